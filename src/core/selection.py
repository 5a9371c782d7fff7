import random
from enum import Enum
from typing import List, Optional, Sequence

QUOTE_MIN = 150
QUOTE_MAX = 400


class SizeFilter(Enum):
    ANY = "any"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class EmptySelectionError(LookupError):
    """Raised when no quote matches the requested size."""


def quote_length(quote: str) -> int:
    """Length of a quote in UTF-8 bytes."""

    return len(quote.encode("utf-8"))


def matches_size(quote: str, size: SizeFilter) -> bool:
    length = quote_length(quote)
    if size is SizeFilter.SHORT:
        return length <= QUOTE_MIN
    if size is SizeFilter.MEDIUM:
        return QUOTE_MIN < length < QUOTE_MAX
    if size is SizeFilter.LONG:
        return length >= QUOTE_MAX
    return True


def filter_quotes(quotes: Sequence[str], size: SizeFilter) -> List[str]:
    """Возвращает цитаты подходящего размера в исходном порядке."""

    return [quote for quote in quotes if matches_size(quote, size)]


def select_quote(
    quotes: Sequence[str],
    size: SizeFilter = SizeFilter.ANY,
    rng: Optional[random.Random] = None,
) -> str:
    """Picks one quote of the requested size uniformly at random.

    Raises:
        EmptySelectionError: when nothing matches `size` (including an empty database).
    """

    candidates = filter_quotes(quotes, size)
    if not candidates:
        if not quotes:
            raise EmptySelectionError("the quote database is empty")
        raise EmptySelectionError(f"no {size.value} quotes in the database")

    # random.Random() seeds itself from os.urandom
    rng = rng or random.Random()
    return candidates[rng.randrange(len(candidates))]
