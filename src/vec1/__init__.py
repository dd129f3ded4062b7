"""A list that always holds at least one element."""

from .container import Vec1
from .drain import Drain
from .errors import (
    EmptyInputError,
    IndexOutOfBoundsError,
    InvalidLengthError,
    InvalidRangeError,
    OnlyElementError,
    RemoveError,
    RemoveOutOfBoundsError,
    SplitError,
    Vec1Error,
    WouldEmptyError,
    WouldEmptySelfError,
)

__all__ = [
    "Vec1",
    "Drain",
    "Vec1Error",
    "EmptyInputError",
    "IndexOutOfBoundsError",
    "InvalidLengthError",
    "InvalidRangeError",
    "OnlyElementError",
    "RemoveError",
    "RemoveOutOfBoundsError",
    "SplitError",
    "WouldEmptyError",
    "WouldEmptySelfError",
]
