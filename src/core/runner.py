import random
import sys
from typing import Optional, Sequence, TextIO

from colorama import just_fix_windows_console

from src.core.builders import build_database, build_rng
from src.core.config import USAGE, Command, FortuneConfig, load_config
from src.core.formatting import render_quote
from src.core.selection import EmptySelectionError, select_quote
from src.storage.database import LocateError, QuoteDatabaseError, ReadError


def write_quote(config: FortuneConfig, stdin: Optional[TextIO] = None) -> int:
    """Asks for one line and appends it to the database. Always returns 1."""

    stdin = stdin or sys.stdin

    try:
        database = build_database(config)
    except LocateError as err:
        print(f"Error finding file: {err}", file=sys.stderr)
        return 1

    print("Write a quote: ")
    try:
        data = stdin.readline()
    except KeyboardInterrupt:
        data = ""

    text = data.strip()
    if not text:
        print("No data to write.")
        return 1

    try:
        database.append(text)
    except QuoteDatabaseError as err:
        print(f"Could not open file {err}", file=sys.stderr)
        return 1

    print("Written quote!")
    return 1


def print_quote(config: FortuneConfig, rng: Optional[random.Random] = None) -> int:
    try:
        database = build_database(config)
    except LocateError as err:
        print(f"Error finding file: {err}", file=sys.stderr)
        return 1

    try:
        quotes = database.load()
    except ReadError as err:
        print(f"Error reading file: {err}", file=sys.stderr)
        return 1

    try:
        quote = select_quote(quotes, config.size, rng or build_rng())
    except EmptySelectionError as err:
        print(f"No quotes available: {err}", file=sys.stderr)
        return 1

    print(render_quote(quote, config.color))
    return 0


def run(config: FortuneConfig, stdin: Optional[TextIO] = None, rng: Optional[random.Random] = None) -> int:
    if config.command is Command.HELP:
        # usage exits with 1, same as the other non-quote commands
        print(USAGE)
        return 1

    if config.command is Command.WRITE:
        return write_quote(config, stdin)

    if config.command is Command.UNKNOWN:
        print("No such command.")
        return 1

    return print_quote(config, rng)


def main(argv: Optional[Sequence[str]] = None, program_path: Optional[str] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    just_fix_windows_console()
    config = load_config(argv, program_path=program_path)
    return run(config)
