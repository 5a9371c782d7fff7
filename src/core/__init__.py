"""Core helpers for fortune: config, builders, selection, formatting, runner."""
from .config import FortuneConfig, Command, USAGE, load_config
from .builders import build_database, build_rng
from .selection import (
    QUOTE_MIN,
    QUOTE_MAX,
    SizeFilter,
    EmptySelectionError,
    matches_size,
    filter_quotes,
    select_quote,
)
from .formatting import ColorChoice, parse_color, render_quote
from .runner import run, write_quote, print_quote, main as run_main

__all__ = [
    "FortuneConfig",
    "Command",
    "USAGE",
    "load_config",
    "build_database",
    "build_rng",
    "QUOTE_MIN",
    "QUOTE_MAX",
    "SizeFilter",
    "EmptySelectionError",
    "matches_size",
    "filter_quotes",
    "select_quote",
    "ColorChoice",
    "parse_color",
    "render_quote",
    "run",
    "write_quote",
    "print_quote",
    "run_main",
]
