"""Error types raised or captured by Try and its companion containers."""

from __future__ import annotations

__all__ = [
    'NoSuchElementError',
    'NonFatalError',
    'UnsupportedOperationError',
]


class NonFatalError(Exception):
    """Wraps a non-fatal cause that is not an ``Exception``.

    Raised by ``Failure.get()`` so that unsafe extraction always raises
    something an ``except Exception`` handler will catch.
    """

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f'Non-fatal cause: {cause!r}')


class NoSuchElementError(LookupError):
    """A requested element is absent - filter rejection or empty container."""

    def __init__(self, message: str = 'No value present') -> None:
        super().__init__(message)


class UnsupportedOperationError(RuntimeError):
    """The operation is not defined for this variant."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(operation)
