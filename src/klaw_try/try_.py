"""Try type: Success[T] | Failure[T] for capturing fallible computations.

A Try is the outcome of a synchronous computation that may raise: either the
value it produced or the exception it raised. Combinators run their
functions inside one capture boundary, so a chain of fallible steps never
needs its own try/except until the caller decides to look.

Fatal exceptions (see ``klaw_try.fatal``) are never captured. They propagate
out of every combinator as if the Try were not there.

Example:
    ```python
    from klaw_try import of

    result = (
        of(lambda: 10 / 0)
        .recover(ZeroDivisionError, lambda e: float('inf'))
        .map(str)
    )
    print(result)  # Success(value='inf')
    ```
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Iterator
from typing import Any, NoReturn, TypeIs, overload

import msgspec

from klaw_try._config import get_config
from klaw_try._logging import get_logger
from klaw_try.either import Left, Right
from klaw_try.errors import NoSuchElementError, NonFatalError, UnsupportedOperationError
from klaw_try.fatal import is_fatal
from klaw_try.interrupt import interrupt
from klaw_try.option import Nothing, NothingType, Some

__all__ = [
    'ExceptionKind',
    'Failure',
    'Success',
    'Try',
    'failure',
    'of',
    'run',
    'sequence',
    'success',
]

type ExceptionKind = type[BaseException] | tuple[type[BaseException], ...]
"""An exception class or tuple of classes, matched with isinstance()."""


# ---------------------------------------------------------------------
# Capture boundary
# ---------------------------------------------------------------------


def _log(event: str, **fields: Any) -> None:
    if get_config().log_level is None:
        return
    get_logger(__name__).debug(event, **fields)


def _capture[U](thunk: Callable[[], Try[U]]) -> Try[U]:
    """Run ``thunk``, turning a non-fatal exception into a Failure.

    Fatal exceptions are re-raised with their original traceback. A captured
    InterruptedError re-sets the calling thread's interrupt flag before the
    Failure is returned.
    """
    try:
        return thunk()
    except BaseException as e:  # noqa: BLE001
        if is_fatal(e):
            _log('try.fatal', exc_type=type(e).__name__)
            raise
        if isinstance(e, InterruptedError):
            interrupt()
            _log('try.interrupt_reasserted', thread=threading.current_thread().name)
        _log('try.captured', exc_type=type(e).__name__)
        return Failure(e)


def _ensure_try[U](result: Try[U], origin: str) -> Try[U]:
    if isinstance(result, Success | Failure):
        return result
    msg = f'{origin} must return a Try, got {type(result).__name__}'
    raise TypeError(msg)


# ---------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------


class Success[T](msgspec.Struct, frozen=True):
    """Success variant of Try containing the computed value.

    The value may be None; ``run()`` produces ``Success(None)``.

    Examples:
        >>> Success(4).map(lambda x: x * 2)
        Success(value=8)
        >>> Success(4).filter(lambda x: x % 2 == 0)
        Success(value=4)
    """

    value: T

    def is_success(self) -> TypeIs[Success[T]]:
        """Return True since this is Success.

        This method provides type narrowing - after checking is_success(),
        the type checker knows the try is Success[T].
        """
        return True

    def is_failure(self) -> TypeIs[Failure[object]]:
        """Return False since this is Success."""
        return False

    # --- Extraction ---

    def get(self) -> T:
        """Return the contained value."""
        return self.value

    def get_cause(self) -> NoReturn:
        """Raise since a Success has no cause.

        Raises:
            UnsupportedOperationError: Always.
        """
        raise UnsupportedOperationError('get_cause() on Success')

    def get_or_else(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def get_or_else_get(self, supplier: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the supplier."""
        return self.value

    def get_or_else_throw(self, exception_provider: Callable[[BaseException], BaseException]) -> T:  # noqa: ARG002
        """Return the contained value without calling the provider."""
        return self.value

    # --- Transformation ---

    def map[U](self, mapper: Callable[[T], U]) -> Try[U]:
        """Apply a function to the value.

        Args:
            mapper: Function to apply; it may raise.

        Returns:
            Success of the mapped value, or Failure of what ``mapper`` raised.
        """
        return _capture(lambda: Success(mapper(self.value)))

    def flat_map[U](self, mapper: Callable[[T], Try[U]]) -> Try[U]:
        """Apply a Try-returning function to the value, without nesting.

        Also known as bind or and_then.

        Args:
            mapper: Function that takes T and returns Try[U]; it may raise.

        Returns:
            The Try returned by ``mapper``, or Failure of what it raised.
        """
        return _capture(lambda: _ensure_try(mapper(self.value), 'flat_map mapper'))

    def filter(self, predicate: Callable[[T], bool]) -> Try[T]:
        """Keep this Success only if the predicate holds for its value.

        Args:
            predicate: Test applied to the value; it may raise.

        Returns:
            self if the predicate holds, Failure(NoSuchElementError) if it
            does not, or Failure of what the predicate raised.
        """

        def _apply() -> Try[T]:
            if predicate(self.value):
                return self
            return Failure(NoSuchElementError(f'Predicate does not hold for {self.value!r}'))

        return _capture(_apply)

    def fold[U](
        self,
        if_failure: Callable[[BaseException], U],  # noqa: ARG002
        if_success: Callable[[T], U],
    ) -> U:
        """Reduce to a single value by applying ``if_success``.

        Exceptions raised by ``if_success`` are not captured.
        """
        return if_success(self.value)

    def transform[U](
        self,
        if_failure: Callable[[BaseException], Try[U]],  # noqa: ARG002
        if_success: Callable[[T], Try[U]],
    ) -> Try[U]:
        """Continue with ``if_success(value)``, capturing what it raises."""
        return _capture(lambda: _ensure_try(if_success(self.value), 'transform if_success'))

    # --- Recovery ---

    def failed(self) -> Failure[BaseException]:
        """Invert the Try; a Success becomes a Failure of UnsupportedOperationError."""
        return Failure(UnsupportedOperationError('Success.failed()'))

    def map_failure(self, _mapper: Callable[[BaseException], BaseException]) -> Success[T]:
        """Return self unchanged since this is Success."""
        return self

    def recover[X: BaseException](
        self, _exception_type: type[X] | tuple[type[X], ...], _f: Callable[[X], T]
    ) -> Success[T]:
        """Return self unchanged since this is Success."""
        return self

    def recover_with[X: BaseException](
        self, _exception_type: type[X] | tuple[type[X], ...], _f: Callable[[X], Try[T]]
    ) -> Success[T]:
        """Return self unchanged since this is Success."""
        return self

    def or_else(self, _supplier: Callable[[], Try[T]]) -> Success[T]:
        """Return self unchanged since this is Success."""
        return self

    @overload
    def on_failure(self, action: Callable[[BaseException], object], /) -> Success[T]: ...

    @overload
    def on_failure[X: BaseException](
        self, exception_type: type[X] | tuple[type[X], ...], action: Callable[[X], object], /
    ) -> Success[T]: ...

    def on_failure(self, *_args: Any) -> Success[T]:
        """Return self without calling the action since this is Success."""
        return self

    def on_success(self, action: Callable[[T], object]) -> Success[T]:
        """Call ``action`` with the value and return self.

        Exceptions raised by ``action`` propagate to the caller.
        """
        action(self.value)
        return self

    def rethrow(self, _exception_type: ExceptionKind) -> Success[T]:
        """Return self unchanged since there is nothing to raise."""
        return self

    # --- Conversion ---

    def to_either[L](self, _failure_mapper: Callable[[BaseException], L]) -> Right[T]:
        """Convert to Either, returning Right(value)."""
        return Right(self.value)

    def to_option(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        return Some(self.value)

    def to_optional(self) -> T | None:
        """Return the value; a Success(None) is indistinguishable from a Failure here."""
        return self.value

    def stream(self) -> tuple[T]:
        """Return a one-element tuple of the value."""
        return (self.value,)

    def collect[R](self, collector: Callable[[Iterable[T]], R]) -> R:
        """Feed the 0/1-element stream to ``collector``, e.g. ``collect(list)``."""
        return collector(self.stream())

    def __iter__(self) -> Iterator[T]:
        """Iterate over the single contained value."""
        yield self.value


class Failure[T](msgspec.Struct, frozen=True):
    """Failure variant of Try containing the captured exception.

    A Failure never holds a fatal exception: constructing one with a fatal
    cause re-raises that cause instead.

    Two Failures are equal only when their causes are equal, and exceptions
    compare by identity. ``Failure(ValueError('x')) != Failure(ValueError('x'))``.

    Examples:
        >>> f = Failure(ZeroDivisionError('division by zero'))
        >>> f.recover(ArithmeticError, lambda e: 0)
        Success(value=0)
        >>> f.get_or_else(-1)
        -1
    """

    # Stays GC-tracked like Success: the cause's traceback can reference this instance
    cause: BaseException

    def __post_init__(self) -> None:
        if not isinstance(self.cause, BaseException):
            msg = f'Failure cause must be an exception, got {type(self.cause).__name__}'
            raise TypeError(msg)
        if is_fatal(self.cause):
            raise self.cause

    def is_success(self) -> TypeIs[Success[object]]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure[T]]:
        """Return True since this is Failure.

        This method provides type narrowing - after checking is_failure(),
        the type checker knows the try is Failure[T].
        """
        return True

    # --- Extraction ---

    def get(self) -> NoReturn:
        """Raise the cause, the unsafe way out of a Try.

        Raises:
            Exception: The cause itself when it is an Exception.
            NonFatalError: Wrapping the cause otherwise, so that callers
                catching Exception always see it.
        """
        if isinstance(self.cause, Exception):
            raise self.cause
        raise NonFatalError(self.cause) from self.cause

    def get_cause(self) -> BaseException:
        """Return the captured exception."""
        return self.cause

    def get_or_else[U](self, default: U) -> U:
        """Return the default since this is Failure."""
        return default

    def get_or_else_get[U](self, supplier: Callable[[], U]) -> U:
        """Compute and return a default since this is Failure."""
        return supplier()

    def get_or_else_throw(self, exception_provider: Callable[[BaseException], BaseException]) -> NoReturn:
        """Raise the exception built by ``exception_provider`` from the cause.

        Args:
            exception_provider: Maps the cause to the exception to raise.

        Raises:
            BaseException: Whatever ``exception_provider`` returns, chained
                from the cause.
        """
        raise exception_provider(self.cause) from self.cause

    # --- Transformation ---

    def map[U](self, _mapper: Callable[[T], U]) -> Failure[U]:
        """Return self unchanged since this is Failure."""
        return self  # type: ignore[return-value]

    def flat_map[U](self, _mapper: Callable[[T], Try[U]]) -> Failure[U]:
        """Return self unchanged since this is Failure."""
        return self  # type: ignore[return-value]

    def filter(self, _predicate: Callable[[T], bool]) -> Failure[T]:
        """Return self unchanged since this is Failure."""
        return self

    def fold[U](
        self,
        if_failure: Callable[[BaseException], U],
        if_success: Callable[[T], U],  # noqa: ARG002
    ) -> U:
        """Reduce to a single value by applying ``if_failure`` to the cause.

        Exceptions raised by ``if_failure`` are not captured.
        """
        return if_failure(self.cause)

    def transform[U](
        self,
        if_failure: Callable[[BaseException], Try[U]],
        if_success: Callable[[T], Try[U]],  # noqa: ARG002
    ) -> Try[U]:
        """Continue with ``if_failure(cause)``, capturing what it raises."""
        return _capture(lambda: _ensure_try(if_failure(self.cause), 'transform if_failure'))

    # --- Recovery ---

    def failed(self) -> Success[BaseException]:
        """Invert the Try, returning Success(cause)."""
        return Success(self.cause)

    def map_failure(self, mapper: Callable[[BaseException], BaseException]) -> Failure[T]:
        """Replace the cause with ``mapper(cause)``.

        If ``mapper`` raises, the Failure holds that exception instead.
        """
        return _capture(lambda: Failure(mapper(self.cause)))  # type: ignore[return-value]

    def recover[X: BaseException](
        self, exception_type: type[X] | tuple[type[X], ...], f: Callable[[X], T]
    ) -> Try[T]:
        """Recover from a cause matching ``exception_type`` with a value.

        Matching uses isinstance(), so subclasses of ``exception_type`` are
        recovered too. A non-matching Failure is returned unchanged.

        Args:
            exception_type: Exception class, or tuple of classes, to recover from.
            f: Computes the replacement value from the cause; it may raise.

        Returns:
            Success(f(cause)), Failure of what ``f`` raised, or self.
        """
        cause = self.cause
        if isinstance(cause, exception_type):
            return _capture(lambda: Success(f(cause)))
        return self

    def recover_with[X: BaseException](
        self, exception_type: type[X] | tuple[type[X], ...], f: Callable[[X], Try[T]]
    ) -> Try[T]:
        """Like recover(), but ``f`` returns a Try that replaces this one."""
        cause = self.cause
        if isinstance(cause, exception_type):
            return _capture(lambda: _ensure_try(f(cause), 'recover_with function'))
        return self

    def or_else(self, supplier: Callable[[], Try[T]]) -> Try[T]:
        """Return the Try produced by ``supplier``, capturing what it raises."""
        return _capture(lambda: _ensure_try(supplier(), 'or_else supplier'))

    @overload
    def on_failure(self, action: Callable[[BaseException], object], /) -> Failure[T]: ...

    @overload
    def on_failure[X: BaseException](
        self, exception_type: type[X] | tuple[type[X], ...], action: Callable[[X], object], /
    ) -> Failure[T]: ...

    def on_failure(self, *args: Any) -> Failure[T]:
        """Call an action with the cause and return self.

        Called as ``on_failure(action)`` it always fires; called as
        ``on_failure(exception_type, action)`` it fires only if the cause is
        an instance of ``exception_type``. Exceptions raised by the action
        propagate to the caller.
        """
        if len(args) == 1:
            args[0](self.cause)
        elif len(args) == 2:
            exception_type, action = args
            if isinstance(self.cause, exception_type):
                action(self.cause)
        else:
            msg = f'on_failure() takes 1 or 2 arguments ({len(args)} given)'
            raise TypeError(msg)
        return self

    def on_success(self, _action: Callable[[T], object]) -> Failure[T]:
        """Return self without calling the action since this is Failure."""
        return self

    def rethrow(self, exception_type: ExceptionKind) -> Failure[T]:
        """Raise the cause if it matches ``exception_type``, else return self.

        Raises:
            BaseException: The cause itself, when it matches.
        """
        if isinstance(self.cause, exception_type):
            raise self.cause
        return self

    # --- Conversion ---

    def to_either[L](self, failure_mapper: Callable[[BaseException], L]) -> Left[L]:
        """Convert to Either, returning Left(failure_mapper(cause))."""
        return Left(failure_mapper(self.cause))

    def to_option(self) -> NothingType:
        """Convert to Option, returning Nothing."""
        return Nothing

    def to_optional(self) -> None:
        """Return None since this is Failure."""
        return None

    def stream(self) -> tuple[()]:
        """Return an empty tuple."""
        return ()

    def collect[R](self, collector: Callable[[Iterable[T]], R]) -> R:
        """Feed the empty stream to ``collector``."""
        return collector(self.stream())

    def __iter__(self) -> Iterator[T]:
        """Iterate over nothing."""
        return iter(())


type Try[T] = Success[T] | Failure[T]


# ---------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------


def of[T](supplier: Callable[[], T]) -> Try[T]:
    """Run ``supplier`` once and capture its outcome.

    Args:
        supplier: Zero-argument computation that may raise.

    Returns:
        Success(supplier()) or Failure of the non-fatal exception it raised.

    Raises:
        BaseException: Any fatal exception raised by ``supplier``.

    Examples:
        >>> of(lambda: int('42'))
        Success(value=42)
        >>> of(lambda: 1 / 0).is_failure()
        True
    """
    return _capture(lambda: Success(supplier()))


def run(runnable: Callable[[], object]) -> Try[None]:
    """Run a side-effecting procedure; success is Success(None)."""

    def _run() -> None:
        runnable()

    return of(_run)


def success[T](value: T) -> Success[T]:
    """Create a Success holding ``value``."""
    return Success(value)


def failure[T](exception: BaseException) -> Failure[T]:
    """Create a Failure holding ``exception``.

    Raises:
        BaseException: ``exception`` itself if it is fatal.
        TypeError: If ``exception`` is not an exception instance.
    """
    return Failure(exception)


def sequence[T](tries: Iterable[Try[T]]) -> Try[list[T]]:
    """Collect an iterable of Trys into a Try of list.

    Short-circuits on the first Failure encountered.

    Examples:
        >>> sequence([Success(1), Success(2)])
        Success(value=[1, 2])
    """
    values: list[T] = []
    for t in tries:
        if isinstance(t, Failure):
            return t  # type: ignore[return-value]
        values.append(t.value)
    return Success(values)
