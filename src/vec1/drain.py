from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, TypeVar

from .logging import get_logger

if TYPE_CHECKING:
    from .container import Vec1

logger = get_logger(__name__)

T = TypeVar("T")


class Drain(Iterator[T]):
    """
    Lazy iterator over elements being removed from a Vec1.

    Each ``next()`` removes the yielded element from the owning Vec1.
    Whatever part of the range has not been yielded is removed when the
    drain is closed: on exhaustion, on leaving a ``with`` block, on an
    explicit ``close()`` or when the iterator is garbage collected.

    The range never covers the whole Vec1, so the owner stays non-empty
    at every step.
    """

    def __init__(self, owner: Vec1[T], start: int, stop: int) -> None:
        self._owner = owner
        self._start = start
        self._remaining = stop - start
        self._expected_len = len(owner)
        self._closed = False

    def __iter__(self) -> Drain[T]:
        return self

    def __next__(self) -> T:
        if self._closed:
            raise StopIteration
        if self._remaining == 0:
            self.close()
            raise StopIteration

        self._check_unchanged()
        value = self._owner._items.pop(self._start)
        self._remaining -= 1
        self._expected_len -= 1
        return value

    def __len__(self) -> int:
        return self._remaining

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Remove every element of the range that has not been yielded yet."""
        if self._closed:
            return
        self._closed = True

        if self._remaining:
            self._check_unchanged()
            del self._owner._items[self._start:self._start + self._remaining]
            logger.debug(f"Drain closed early, removed {self._remaining} unconsumed elements")
            self._remaining = 0

    def __enter__(self) -> Drain[T]:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __del__(self) -> None:
        """Commit the remaining removals if the drain was dropped mid-way."""
        try:
            self.close()
        except Exception:
            # Best effort - don't raise in __del__
            pass

    def _check_unchanged(self) -> None:
        if len(self._owner._items) != self._expected_len:
            self._closed = True
            raise RuntimeError("Vec1 changed size during drain")
