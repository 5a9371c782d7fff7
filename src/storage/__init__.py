"""Quote database storage helpers."""

from .database import (
    QuoteDatabase,
    QuoteDatabaseError,
    LocateError,
    ReadError,
    WriteError,
    locate_database,
    split_records,
)

__all__ = [
    "QuoteDatabase",
    "QuoteDatabaseError",
    "LocateError",
    "ReadError",
    "WriteError",
    "locate_database",
    "split_records",
]
