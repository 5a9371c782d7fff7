from enum import Enum
from typing import Optional

from colorama import Fore, Style


class ColorChoice(Enum):
    NONE = None
    RED = Fore.RED
    GREEN = Fore.GREEN
    YELLOW = Fore.YELLOW
    BLUE = Fore.BLUE
    MAGENTA = Fore.MAGENTA
    CYAN = Fore.CYAN


def parse_color(name: Optional[str]) -> ColorChoice:
    """Maps a color name to a ColorChoice; unknown names fall back to NONE."""

    if not name:
        return ColorChoice.NONE
    return ColorChoice.__members__.get(name.strip().upper(), ColorChoice.NONE)


def render_quote(quote: str, color: ColorChoice = ColorChoice.NONE) -> str:
    if color is ColorChoice.NONE:
        return quote
    return f"{color.value}{quote}{Style.RESET_ALL}"
