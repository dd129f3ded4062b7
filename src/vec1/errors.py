"""
Exception taxonomy for Vec1.

Every failure derives from Vec1Error. Where a failure has a natural
builtin counterpart the exception also derives from it, so code written
against plain lists (``except IndexError``, ``except ValueError``) still
catches it.
"""


class Vec1Error(Exception):
    """Base class for all Vec1 failures."""


class EmptyInputError(Vec1Error, ValueError):
    """Raised when constructing or decoding a Vec1 from an empty source."""

    def __init__(self, message: str = "cannot create a Vec1 from an empty sequence") -> None:
        super().__init__(message)


class IndexOutOfBoundsError(Vec1Error, IndexError):
    """Raised when an index or range argument exceeds the current bounds."""

    def __init__(self, index, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"index {index} out of bounds for Vec1 of length {length}")


class RemoveError(Vec1Error):
    """Raised when a single-element removal is refused."""


class OnlyElementError(RemoveError):
    """Raised when removing would take away the only element."""

    def __init__(self) -> None:
        super().__init__("cannot remove the only element of a Vec1")


class RemoveOutOfBoundsError(RemoveError, IndexError):
    """Raised when the removal index is outside the Vec1."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"removal index {index} out of bounds for Vec1 of length {length}")


class SplitError(Vec1Error):
    """Raised when a split point is refused."""


class WouldEmptySelfError(SplitError, ValueError):
    """Raised when splitting would leave the original Vec1 empty."""

    def __init__(self) -> None:
        super().__init__("splitting at index 0 would leave the Vec1 empty")


class InvalidRangeError(Vec1Error, ValueError):
    """Raised when a range would remove every element."""

    def __init__(self, start: int, stop: int, length: int) -> None:
        self.start = start
        self.stop = stop
        self.length = length
        super().__init__(
            f"range [{start}, {stop}) would remove all {length} elements of the Vec1"
        )


class WouldEmptyError(Vec1Error, ValueError):
    """Raised when a filtering operation would remove every element."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} would remove every element of the Vec1")


class InvalidLengthError(Vec1Error, ValueError):
    """Raised when a requested length is below 1."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"length must be at least 1, got {length}")
