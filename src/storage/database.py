"""Flat-file quote database: records separated by a `%` line."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional, Union

FILENAME = "fortunes"
SEPARATOR = "\n%\n"


class QuoteDatabaseError(RuntimeError):
    """Raised when the quote database cannot be used."""


class LocateError(QuoteDatabaseError):
    """Raised when the database file cannot be found next to the program."""


class ReadError(QuoteDatabaseError):
    """Raised when the database file cannot be read as UTF-8 text."""


class WriteError(QuoteDatabaseError):
    """Raised when a new quote cannot be appended."""


def locate_database(
    filename: str = FILENAME,
    program_path: Optional[Union[str, Path]] = None,
) -> Path:
    """Returns the absolute path of `filename` in the program's directory.

    The program path is resolved (symlinks included) before taking its parent,
    so a link to the program elsewhere still finds the database beside the
    real file.
    """

    if program_path is None:
        program_path = sys.argv[0] if sys.argv else None
    if not program_path:
        raise LocateError("Could not find executable.")

    path = Path(program_path).resolve().parent / filename
    if not path.exists():
        raise LocateError("Path not found.")
    return path


def split_records(content: str) -> List[str]:
    """Splits raw file content into quote records.

    A separator at the very end of the file closes the last record and does
    not produce an extra empty one.
    """

    if not content:
        return []
    records = content.split(SEPARATOR)
    if records[-1] == "":
        records.pop()
    return records


class QuoteDatabase:
    """Quote file reader/appender.

    Usage:
        db = QuoteDatabase(locate_database())
        quotes = db.load()
        db.append("New quote")
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def read_text(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ReadError(f"{self.path} is not valid UTF-8 text: {exc}") from exc
        except OSError as exc:
            raise ReadError(str(exc)) from exc

    def load(self) -> List[str]:
        """Returns all records in file order."""

        return split_records(self.read_text())

    def append(self, text: str) -> None:
        """Appends `text` as one more record, followed by the separator."""

        if not text:
            raise ValueError("Quote text is required")

        existing = self.read_text()
        # the file may end in a record like "%\n" that only looks like a separator
        closed = not existing or existing.split(SEPARATOR)[-1] == ""
        prefix = "" if closed else SEPARATOR

        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(f"{prefix}{text}{SEPARATOR}")
        except OSError as exc:
            raise WriteError(str(exc)) from exc
