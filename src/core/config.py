from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from src.core.formatting import ColorChoice, parse_color
from src.core.selection import SizeFilter
from src.storage.database import FILENAME

USAGE = """
Available commands:
-help                             This screen right here.
-size  <short,medium,long>        Show short,medium or long quotes only.
-color <red, blue, green, etc>    Add some color. Use after -size command.
-write                            Write a quote to the file.
"""

HELP_COMMANDS = ("help", "-help", "-h")
SIZE_COMMANDS = ("size", "-size", "-o")
WRITE_COMMANDS = ("write", "-write")
COLOR_COMMANDS = ("color", "-color", "-c")


class Command(Enum):
    SELECT = "select"
    HELP = "help"
    WRITE = "write"
    UNKNOWN = "unknown"


@dataclass
class FortuneConfig:
    command: Command = Command.SELECT
    size: SizeFilter = SizeFilter.ANY
    color: ColorChoice = ColorChoice.NONE
    filename: str = FILENAME
    program_path: Optional[str] = None


def parse_size(value: str) -> Optional[SizeFilter]:
    try:
        size = SizeFilter(value.lower())
    except ValueError:
        return None
    if size is SizeFilter.ANY:
        return None
    return size


def load_config(argv: Sequence[str], program_path: Optional[str] = None) -> FortuneConfig:
    """Builds the run configuration from positional arguments.

    Slot 1 is the command, slot 2 its value, slot 3 may be a color command
    with the color name in slot 4.
    """

    args: List[str] = [arg.lower() for arg in argv]
    config = FortuneConfig(program_path=program_path)

    if not args:
        return config

    command = args[0]
    if command in HELP_COMMANDS:
        config.command = Command.HELP
        return config
    if command in WRITE_COMMANDS:
        config.command = Command.WRITE
        return config
    if command not in SIZE_COMMANDS:
        config.command = Command.UNKNOWN
        return config

    if len(args) > 1:
        size = parse_size(args[1])
        if size is None:
            print("Use short, medium or long.")
        else:
            config.size = size

    if len(args) > 3 and args[2] in COLOR_COMMANDS:
        config.color = parse_color(args[3])

    return config
