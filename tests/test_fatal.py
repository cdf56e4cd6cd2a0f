"""Tests for fatal exception classification and propagation."""

import asyncio

import pytest
from hypothesis import given

from klaw_try import DEFAULT_FATAL, Failure, NonFatalError, Success, failure, init, is_fatal, of, run, safe

from tests.strategies import fatal_exceptions, non_fatal_exceptions


def _raise(exc: BaseException):
    raise exc


class Halt(BaseException):
    """User-defined BaseException; non-fatal unless registered."""


class TestIsFatal:
    """Tests for is_fatal()."""

    @pytest.mark.parametrize(
        'exc',
        [
            SystemExit(),
            KeyboardInterrupt(),
            GeneratorExit(),
            asyncio.CancelledError(),
            MemoryError(),
            RecursionError(),
            SystemError(),
            ImportError('no module'),
            ModuleNotFoundError('no module'),
        ],
    )
    def test_fatal(self, exc: BaseException):
        """Exit, cancellation, exhaustion and linkage errors are fatal."""
        assert is_fatal(exc) is True

    @pytest.mark.parametrize(
        'exc',
        [ValueError(), TypeError(), OSError(), InterruptedError(), ZeroDivisionError(), Halt(), NonFatalError(Halt())],
    )
    def test_non_fatal(self, exc: BaseException):
        """Ordinary runtime errors and other BaseExceptions are not fatal."""
        assert is_fatal(exc) is False

    def test_default_fatal_is_tuple_of_types(self):
        """DEFAULT_FATAL can be passed straight to isinstance()."""
        assert isinstance(MemoryError(), DEFAULT_FATAL)

    def test_extra_fatal(self):
        """Types registered with init(extra_fatal=...) become fatal."""
        assert is_fatal(Halt()) is False
        init(extra_fatal=(Halt,))
        assert is_fatal(Halt()) is True
        assert is_fatal(MemoryError()) is True

    def test_extra_fatal_propagates(self):
        """A registered extra fatal type escapes of()."""
        init(extra_fatal=(ConnectionResetError,))
        with pytest.raises(ConnectionResetError):
            of(lambda: _raise(ConnectionResetError()))
        assert of(lambda: _raise(ConnectionRefusedError())).is_failure()


class TestFatalPropagation:
    """Fatal exceptions escape every capture site."""

    @given(fatal_exceptions)
    def test_failure_constructor(self, exc: BaseException):
        """failure(fatal) re-raises instead of producing a value."""
        with pytest.raises(type(exc)) as exc_info:
            failure(exc)
        assert exc_info.value is exc

    @given(fatal_exceptions)
    def test_of(self, exc: BaseException):
        """of() re-raises fatal exceptions."""
        with pytest.raises(type(exc)) as exc_info:
            of(lambda: _raise(exc))
        assert exc_info.value is exc

    @given(fatal_exceptions)
    def test_run(self, exc: BaseException):
        """run() re-raises fatal exceptions."""
        with pytest.raises(type(exc)):
            run(lambda: _raise(exc))

    @given(fatal_exceptions)
    def test_success_combinators(self, exc: BaseException):
        """map, flat_map, filter and transform re-raise fatal exceptions."""
        s = Success(1)
        with pytest.raises(type(exc)):
            s.map(lambda v: _raise(exc))
        with pytest.raises(type(exc)):
            s.flat_map(lambda v: _raise(exc))
        with pytest.raises(type(exc)):
            s.filter(lambda v: _raise(exc))
        with pytest.raises(type(exc)):
            s.transform(lambda e: Success(0), lambda v: _raise(exc))

    @given(fatal_exceptions, non_fatal_exceptions)
    def test_failure_combinators(self, exc: BaseException, cause: Exception):
        """Recovery combinators re-raise fatal exceptions."""
        f = Failure(cause)
        with pytest.raises(type(exc)):
            f.recover(Exception, lambda e: _raise(exc))
        with pytest.raises(type(exc)):
            f.recover_with(Exception, lambda e: _raise(exc))
        with pytest.raises(type(exc)):
            f.or_else(lambda: _raise(exc))
        with pytest.raises(type(exc)):
            f.transform(lambda e: _raise(exc), lambda v: Success(0))
        with pytest.raises(type(exc)):
            f.map_failure(lambda e: _raise(exc))

    @given(fatal_exceptions, non_fatal_exceptions)
    def test_map_failure_returning_fatal(self, exc: BaseException, cause: Exception):
        """A mapper that returns a fatal exception causes it to be raised."""
        with pytest.raises(type(exc)):
            Failure(cause).map_failure(lambda e: exc)

    @given(fatal_exceptions)
    def test_safe_decorator(self, exc: BaseException):
        """@safe re-raises fatal exceptions."""

        @safe
        def explode() -> None:
            raise exc

        with pytest.raises(type(exc)):
            explode()

    def test_real_recursion_error(self):
        """A genuine stack overflow escapes of()."""

        def recurse(n: int) -> int:
            return recurse(n + 1) + 1

        with pytest.raises(RecursionError):
            of(lambda: recurse(0))

    def test_failure_never_holds_fatal(self):
        """Every observed Failure holds a non-fatal cause."""
        results = [of(lambda: _raise(ValueError())), of(lambda: _raise(Halt()))]
        assert all(isinstance(r, Failure) and not is_fatal(r.cause) for r in results)
