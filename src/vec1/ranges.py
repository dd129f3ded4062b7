"""Index and half-open range helpers shared by the Vec1 mutators."""

import operator
from typing import Optional, Tuple

from .errors import IndexOutOfBoundsError


def normalize_index(index: int, length: int, *, allow_end: bool = False) -> int:
    """
    Turn a list-style index into a position in ``[0, length)``.

    Negative indices count from the end, as they do for lists.

    Args:
        index: Requested index
        length: Current length of the sequence
        allow_end: Accept ``length`` itself (insertion and split points)

    Returns:
        Non-negative position

    Raises:
        IndexOutOfBoundsError: If the index falls outside the sequence
    """
    position = operator.index(index)
    if position < 0:
        position += length

    upper = length if allow_end else length - 1
    if position < 0 or position > upper:
        raise IndexOutOfBoundsError(index, length)
    return position


def resolve_range(start: Optional[int], stop: Optional[int], length: int) -> Tuple[int, int]:
    """
    Resolve a half-open ``[start, stop)`` range against a sequence length.

    ``None`` stands for the respective end of the sequence. Unlike slicing,
    out-of-bounds ends are an error rather than being clamped.

    Raises:
        IndexOutOfBoundsError: If either end is out of bounds or start > stop
    """
    lo = 0 if start is None else normalize_index(start, length, allow_end=True)
    hi = length if stop is None else normalize_index(stop, length, allow_end=True)

    if lo > hi:
        raise IndexOutOfBoundsError(f"[{start}, {stop})", length)
    return lo, hi


def range_covers_all(start: int, stop: int, length: int) -> bool:
    """Check whether the resolved range ``[start, stop)`` spans every element."""
    return start == 0 and stop >= length
