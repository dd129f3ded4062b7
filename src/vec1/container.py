"""
Vec1: a list wrapper that always holds at least one element.

The wrapped list is private. Growing operations and reads are delegated
to it directly; every operation that could shrink it re-checks the
length first and refuses (raises, or returns ``None`` for ``pop``) when
the result would be empty. A refused call never leaves a partial change
behind.

Operations that are fundamentally incompatible with non-emptiness, like
``clear()``, are not offered. ``into_vec()`` hands back a plain list for
callers who want to drop the guarantee.
"""

from __future__ import annotations

import collections.abc
import operator
from itertools import islice
from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
    overload,
)

from .config import get_settings
from .drain import Drain
from .errors import (
    EmptyInputError,
    IndexOutOfBoundsError,
    InvalidLengthError,
    InvalidRangeError,
    OnlyElementError,
    RemoveOutOfBoundsError,
    WouldEmptyError,
    WouldEmptySelfError,
)
from .logging import get_logger
from .ranges import normalize_index, range_covers_all, resolve_range

logger = get_logger(__name__)

T = TypeVar("T")
N = TypeVar("N")
K = TypeVar("K")


class Vec1(Sequence[T]):
    """
    A growable, ordered sequence with at least one element.

    ``Vec1(first, *rest)`` is the literal form: the signature itself
    requires an element, so it never fails. Use ``from_sequence`` to
    validate data whose length is only known at runtime.
    """

    # Mutable, like list
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, first: T, *rest: T) -> None:
        self._items: List[T] = [first, *rest]

    # -------------------------------------------------------------------------
    # construction

    @classmethod
    def _from_list(cls, items: List[T]) -> Vec1[T]:
        # Caller guarantees items is a fresh, non-empty list
        instance = cls.__new__(cls)
        instance._items = items
        return instance

    @classmethod
    def from_single(cls, first: T) -> Vec1[T]:
        """Create a Vec1 holding exactly one element."""
        return cls._from_list([first])

    @classmethod
    def from_first_and_rest(cls, first: T, rest: Iterable[T]) -> Vec1[T]:
        """Create a Vec1 from a first element followed by every element of rest."""
        items = [first]
        items.extend(rest)
        return cls._from_list(items)

    @classmethod
    def from_sequence(cls, seq: Iterable[T]) -> Vec1[T]:
        """
        Create a Vec1 from any iterable, keeping order.

        The elements are copied into a new list, so later changes to seq
        do not affect the Vec1.

        Raises:
            EmptyInputError: If seq yields no elements
        """
        items = list(seq)
        if not items:
            logger.debug("Refused to build a Vec1 from an empty sequence")
            raise EmptyInputError()
        return cls._from_list(items)

    try_from = from_sequence

    def copy(self) -> Vec1[T]:
        """Return a shallow copy."""
        return self._from_list(self._items.copy())

    __copy__ = copy

    def mapped(self, func: Callable[[T], N]) -> Vec1[N]:
        """
        Build a new Vec1 by applying func to every element.

        The result has the same length, so it is non-empty without a check.
        If func raises, the exception propagates and nothing is built.
        """
        return self._from_list([func(item) for item in self._items])  # type: ignore[arg-type]

    # -------------------------------------------------------------------------
    # read access

    @property
    def first(self) -> T:
        return self._items[0]

    @first.setter
    def first(self, value: T) -> None:
        self._items[0] = value

    @property
    def last(self) -> T:
        return self._items[-1]

    @last.setter
    def last(self, value: T) -> None:
        self._items[-1] = value

    def get(self, index: int, default: Optional[T] = None) -> Optional[T]:
        """Return the element at index, or default when out of range."""
        position = operator.index(index)
        try:
            return self._items[position]
        except IndexError:
            return default

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return True

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> List[T]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[T, List[T]]:
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def transform(self, func: Callable[[T], T]) -> None:
        """
        Replace every element in place with func(element).

        Length and order are preserved. If func raises, no element is replaced.
        """
        self._items[:] = [func(item) for item in self._items]

    # -------------------------------------------------------------------------
    # growing mutations

    def push(self, value: T) -> None:
        self._items.append(value)

    def insert(self, index: int, value: T) -> None:
        """
        Insert value before index.

        Raises:
            IndexOutOfBoundsError: If index is outside ``[-len, len]``
        """
        position = normalize_index(index, len(self._items), allow_end=True)
        self._items.insert(position, value)

    def append(self, other: List[T]) -> None:
        """
        Move every element of other to the end, leaving other empty.

        Raises:
            TypeError: If other cannot be emptied (for example another Vec1)
        """
        if isinstance(other, Vec1):
            raise TypeError("cannot append a Vec1 since it cannot be emptied, use extend() instead")
        if not isinstance(other, collections.abc.MutableSequence):
            raise TypeError(f"append() expects a mutable sequence, got {type(other).__name__}")

        self._items.extend(other)
        other.clear()

    def extend(self, values: Iterable[T]) -> None:
        if isinstance(values, Vec1):
            values = values._items
        self._items.extend(values)

    def __iadd__(self, values: Iterable[T]) -> Vec1[T]:
        self.extend(values)
        return self

    def __add__(self, other: Any) -> Vec1[T]:
        other_items = _comparable_items(other)
        if other_items is None:
            return NotImplemented
        return self._from_list(self._items + other_items)

    def __radd__(self, other: Any) -> Vec1[T]:
        other_items = _comparable_items(other)
        if other_items is None:
            return NotImplemented
        return self._from_list(other_items + self._items)

    def resize(self, new_len: int, value: T) -> None:
        """
        Grow with repetitions of value, or cut down, to exactly new_len elements.

        Like ``[value] * n``, growth repeats the same object.

        Raises:
            InvalidLengthError: If new_len is below 1
        """
        new_len = operator.index(new_len)
        if new_len < 1:
            raise InvalidLengthError(new_len)

        length = len(self._items)
        if new_len < length:
            del self._items[new_len:]
        else:
            self._items.extend([value] * (new_len - length))

    def sort(self, *, key: Optional[Callable[[T], Any]] = None, reverse: bool = False) -> None:
        self._items.sort(key=key, reverse=reverse)

    def reverse(self) -> None:
        self._items.reverse()

    # -------------------------------------------------------------------------
    # shrinking mutations

    def pop(self) -> Optional[T]:
        """
        Remove and return the last element.

        Returns None and leaves the Vec1 untouched when only one element is left.
        """
        if len(self._items) == 1:
            return None
        return self._items.pop()

    def try_pop(self) -> T:
        """
        Remove and return the last element, raising instead of returning None.

        Raises:
            OnlyElementError: If the Vec1 holds a single element
        """
        if len(self._items) == 1:
            logger.debug("Refused try_pop: only element")
            raise OnlyElementError()
        return self._items.pop()

    def remove(self, index: int) -> T:
        """
        Remove and return the element at index, shifting later elements left.

        Raises:
            OnlyElementError: If the Vec1 holds a single element, whatever the index
            RemoveOutOfBoundsError: If index is outside ``[-len, len)``
        """
        position = self._removal_position(index)
        return self._items.pop(position)

    def swap_remove(self, index: int) -> T:
        """
        Remove and return the element at index in O(1).

        The last element takes the removed element's place, so order is
        not preserved.

        Raises:
            OnlyElementError: If the Vec1 holds a single element, whatever the index
            RemoveOutOfBoundsError: If index is outside ``[-len, len)``
        """
        position = self._removal_position(index)
        last = self._items.pop()
        if position == len(self._items):
            return last

        removed = self._items[position]
        self._items[position] = last
        return removed

    def truncate(self, new_len: int) -> None:
        """
        Keep only the first new_len elements. A new_len >= len is a no-op.

        Raises:
            InvalidLengthError: If new_len is below 1
        """
        new_len = operator.index(new_len)
        if new_len < 1:
            logger.debug(f"Refused truncate to {new_len}")
            raise InvalidLengthError(new_len)
        del self._items[new_len:]

    def drain(self, start: Optional[int] = None, stop: Optional[int] = None) -> Drain[T]:
        """
        Remove the half-open range ``[start, stop)`` lazily.

        Args:
            start: First index to remove, defaults to 0
            stop: Index after the last one to remove, defaults to len

        Returns:
            Drain iterator yielding the removed elements

        Raises:
            IndexOutOfBoundsError: If the range is out of bounds or reversed
            InvalidRangeError: If the range covers every element
        """
        length = len(self._items)
        lo, hi = resolve_range(start, stop, length)
        if range_covers_all(lo, hi, length):
            logger.debug(f"Refused drain of [{lo}, {hi}) covering all {length} elements")
            raise InvalidRangeError(lo, hi, length)

        return Drain(self, lo, hi)

    def splice(
        self,
        start: Optional[int],
        stop: Optional[int],
        replace_with: Iterable[T],
    ) -> List[T]:
        """
        Replace the range ``[start, stop)`` with the elements of replace_with.

        Returns:
            The removed elements

        Raises:
            IndexOutOfBoundsError: If the range is out of bounds or reversed
            InvalidRangeError: If the range covers every element and
                replace_with is empty
        """
        length = len(self._items)
        lo, hi = resolve_range(start, stop, length)
        replacement = list(replace_with)
        if range_covers_all(lo, hi, length) and not replacement:
            logger.debug(f"Refused splice of [{lo}, {hi}) with nothing to put back")
            raise InvalidRangeError(lo, hi, length)

        removed = self._items[lo:hi]
        self._items[lo:hi] = replacement
        return removed

    def retain(self, predicate: Callable[[T], bool]) -> None:
        """
        Keep only the elements for which predicate returns true.

        Raises:
            WouldEmptyError: If no element satisfies predicate; the Vec1 is
                left as it was
        """
        kept = [item for item in self._items if predicate(item)]
        self._commit_filtered(kept, "retain")

    def dedup(self) -> None:
        """Remove consecutive equal elements."""
        self._dedup(operator.eq, "dedup")

    def dedup_by(self, same_bucket: Callable[[T, T], bool]) -> None:
        """
        Remove consecutive elements that belong to the same bucket.

        same_bucket is called as ``same_bucket(candidate, last_kept)``.
        """
        self._dedup(same_bucket, "dedup_by")

    def dedup_by_key(self, key: Callable[[T], K]) -> None:
        """Remove consecutive elements that map to equal keys."""
        self._dedup(lambda candidate, kept: key(candidate) == key(kept), "dedup_by_key")

    def split_off(self, index: int) -> List[T]:
        """
        Split into ``[0, index)``, kept here, and ``[index, len)``, returned.

        Returns:
            The tail as a plain list, empty when index == len

        Raises:
            WouldEmptySelfError: If index is 0
            IndexOutOfBoundsError: If index is outside ``[-len, len]``
        """
        length = len(self._items)
        position = normalize_index(index, length, allow_end=True)
        if position == 0:
            logger.debug("Refused split_off at index 0")
            raise WouldEmptySelfError()

        tail = self._items[position:]
        del self._items[position:]
        return tail

    def __delitem__(self, index: Union[int, slice]) -> None:
        if not isinstance(index, slice):
            self.remove(index)
            return

        length = len(self._items)
        start, stop, step = index.indices(length)
        if len(range(start, stop, step)) >= length:
            logger.debug(f"Refused del of slice [{start}, {stop}) covering all {length} elements")
            raise InvalidRangeError(start, stop, length)
        del self._items[index]

    def __setitem__(self, index: Union[int, slice], value: Any) -> None:
        if not isinstance(index, slice):
            self._items[index] = value
            return

        values = list(value)
        length = len(self._items)
        start, stop, step = index.indices(length)
        # Extended slices must keep their size, only plain ones can shrink
        if step == 1 and length - max(0, stop - start) + len(values) < 1:
            logger.debug(f"Refused assignment to slice [{start}, {stop}) that would empty all {length} elements")
            raise WouldEmptyError("slice assignment")
        self._items[index] = values

    # -------------------------------------------------------------------------
    # escape hatches

    def into_vec(self) -> List[T]:
        """Return the elements as a new plain list, free of the non-empty guarantee."""
        return list(self._items)

    unwrap = into_vec

    def split_off_first(self) -> Tuple[T, List[T]]:
        """Return the first element and a list of the rest."""
        return self._items[0], self._items[1:]

    def split_off_last(self) -> Tuple[List[T], T]:
        """Return a list of all but the last element, and the last element."""
        return self._items[:-1], self._items[-1]

    # -------------------------------------------------------------------------
    # comparison and display

    def __eq__(self, other: object) -> bool:
        other_items = _comparable_items(other)
        if other_items is None:
            return NotImplemented
        return self._items == other_items

    def __lt__(self, other: object) -> bool:
        other_items = _comparable_items(other)
        if other_items is None:
            return NotImplemented
        return self._items < other_items

    def __le__(self, other: object) -> bool:
        other_items = _comparable_items(other)
        if other_items is None:
            return NotImplemented
        return self._items <= other_items

    def __gt__(self, other: object) -> bool:
        other_items = _comparable_items(other)
        if other_items is None:
            return NotImplemented
        return self._items > other_items

    def __ge__(self, other: object) -> bool:
        other_items = _comparable_items(other)
        if other_items is None:
            return NotImplemented
        return self._items >= other_items

    def __repr__(self) -> str:
        name = type(self).__name__
        limit = get_settings().repr_max_items
        if len(self._items) <= limit:
            return f"{name}({self._items!r})"

        shown = [repr(item) for item in islice(self._items, limit)]
        shown.append(f"..., +{len(self._items) - limit} more")
        return f"{name}([{', '.join(shown)}])"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        from .serde import vec1_core_schema

        return vec1_core_schema(cls, source_type, handler)

    # -------------------------------------------------------------------------
    # internals

    def _removal_position(self, index: int) -> int:
        length = len(self._items)
        if length == 1:
            logger.debug(f"Refused removal at index {index}: only element")
            raise OnlyElementError()
        try:
            return normalize_index(index, length)
        except IndexOutOfBoundsError:
            raise RemoveOutOfBoundsError(index, length) from None

    def _dedup(self, same_bucket: Callable[[T, T], bool], operation: str) -> None:
        kept = [self._items[0]]
        for item in islice(self._items, 1, None):
            if not same_bucket(item, kept[-1]):
                kept.append(item)
        self._commit_filtered(kept, operation)

    def _commit_filtered(self, kept: List[T], operation: str) -> None:
        if not kept:
            logger.debug(f"Refused {operation}: no element would survive")
            raise WouldEmptyError(operation)
        self._items[:] = kept


def _comparable_items(other: object) -> Optional[List[Any]]:
    if isinstance(other, Vec1):
        return other._items
    if isinstance(other, list):
        return other
    return None
