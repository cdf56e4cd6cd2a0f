"""Option type: Some[T] | Nothing, the zero-or-one container of Try.to_option()."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from klaw_try.errors import NoSuchElementError

if TYPE_CHECKING:
    from klaw_try.try_ import Failure, Success

__all__ = ['Nothing', 'NothingType', 'Option', 'Some']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(3).filter(lambda x: x % 2 == 0)
        NothingType()
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def get(self) -> T:
        """Return the contained value."""
        return self.value

    def get_or_else(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value."""
        return Some(f(self.value))

    def flat_map[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value."""
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if the predicate holds for the value, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def fold[U](self, if_none: Callable[[], U], if_some: Callable[[T], U]) -> U:  # noqa: ARG002
        """Reduce to a single value by applying ``if_some`` to the value."""
        return if_some(self.value)

    def to_try(self) -> Success[T]:
        """Convert to Try, returning Success(value)."""
        from klaw_try.try_ import Success

        return Success(self.value)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the single contained value."""
        yield self.value


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the ``Nothing`` constant instead of
    instantiating directly.
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def get(self) -> NoReturn:
        """Raise since there is no value.

        Raises:
            NoSuchElementError: Always.
        """
        raise NoSuchElementError('No value present')

    def get_or_else[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def flat_map[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def fold[T, U](self, if_none: Callable[[], U], if_some: Callable[[T], U]) -> U:  # noqa: ARG002
        """Reduce to a single value by calling ``if_none``."""
        return if_none()

    def to_try(self) -> Failure[object]:
        """Convert to Try, returning a Failure of NoSuchElementError."""
        from klaw_try.try_ import Failure

        return Failure(NoSuchElementError('No value present'))

    def __iter__(self) -> Iterator[object]:
        """Iterate over nothing."""
        return iter(())


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType
