"""Either type: Left[L] | Right[R], the two-sided container of Try.to_either().

By convention Right holds the successful value and Left holds whatever the
failure was mapped to.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from klaw_try.errors import NoSuchElementError
from klaw_try.option import Nothing, NothingType, Some

if TYPE_CHECKING:
    from klaw_try.try_ import Failure, Success

__all__ = ['Either', 'Left', 'Right']


class Right[R](msgspec.Struct, frozen=True, gc=False):
    """Right variant of Either, holding the successful value.

    Examples:
        >>> Right(2).map(lambda x: x + 1)
        Right(value=3)
        >>> Right(2).fold(len, str)
        '2'
    """

    value: R

    def is_left(self) -> TypeIs[Left[object]]:
        """Return False since this is Right."""
        return False

    def is_right(self) -> TypeIs[Right[R]]:
        """Return True since this is Right."""
        return True

    def get(self) -> R:
        """Return the right value."""
        return self.value

    def get_left(self) -> NoReturn:
        """Raise since this is Right.

        Raises:
            NoSuchElementError: Always.
        """
        raise NoSuchElementError('get_left() on Right')

    def get_or_else(self, default: R) -> R:  # noqa: ARG002
        """Return the right value, ignoring the default."""
        return self.value

    def fold[U](self, if_left: Callable[[object], U], if_right: Callable[[R], U]) -> U:  # noqa: ARG002
        """Reduce to a single value by applying ``if_right``."""
        return if_right(self.value)

    def map[U](self, f: Callable[[R], U]) -> Right[U]:
        """Apply a function to the right value."""
        return Right(f(self.value))

    def map_left[M](self, _f: Callable[[object], M]) -> Right[R]:
        """Return self unchanged since this is Right."""
        return self

    def swap(self) -> Left[R]:
        """Turn this Right into a Left holding the same value."""
        return Left(self.value)

    def to_option(self) -> Some[R]:
        """Convert to Option, returning Some(value)."""
        return Some(self.value)

    def to_try(self, _left_mapper: Callable[[object], BaseException]) -> Success[R]:
        """Convert to Try, returning Success(value)."""
        from klaw_try.try_ import Success

        return Success(self.value)

    def __iter__(self) -> Iterator[R]:
        """Iterate over the right value."""
        yield self.value


class Left[L](msgspec.Struct, frozen=True, gc=False):
    """Left variant of Either, holding the failure-side value.

    Examples:
        >>> Left('boom').map(lambda x: x + 1)
        Left(value='boom')
        >>> Left('boom').get_or_else(0)
        0
    """

    value: L

    def is_left(self) -> TypeIs[Left[L]]:
        """Return True since this is Left."""
        return True

    def is_right(self) -> TypeIs[Right[object]]:
        """Return False since this is Left."""
        return False

    def get(self) -> NoReturn:
        """Raise since this is Left.

        Raises:
            NoSuchElementError: Always.
        """
        raise NoSuchElementError('get() on Left')

    def get_left(self) -> L:
        """Return the left value."""
        return self.value

    def get_or_else[R](self, default: R) -> R:
        """Return the default since this is Left."""
        return default

    def fold[U](self, if_left: Callable[[L], U], if_right: Callable[[object], U]) -> U:  # noqa: ARG002
        """Reduce to a single value by applying ``if_left``."""
        return if_left(self.value)

    def map[R, U](self, _f: Callable[[R], U]) -> Left[L]:
        """Return self unchanged since this is Left."""
        return self

    def map_left[M](self, f: Callable[[L], M]) -> Left[M]:
        """Apply a function to the left value."""
        return Left(f(self.value))

    def swap(self) -> Right[L]:
        """Turn this Left into a Right holding the same value."""
        return Right(self.value)

    def to_option(self) -> NothingType:
        """Convert to Option, returning Nothing."""
        return Nothing

    def to_try(self, left_mapper: Callable[[L], BaseException]) -> Failure[object]:
        """Convert to Try, mapping the left value to the Failure's cause.

        Args:
            left_mapper: Builds the exception to hold from the left value.
        """
        from klaw_try.try_ import Failure

        return Failure(left_mapper(self.value))

    def __iter__(self) -> Iterator[object]:
        """Iterate over nothing."""
        return iter(())


type Either[L, R] = Left[L] | Right[R]
