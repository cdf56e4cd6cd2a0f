"""@safe decorator: turn a raising function into a Try-returning one."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import wrapt

from klaw_try.try_ import Try, of

__all__ = ['safe']


def safe[**P, T](func: Callable[P, T]) -> Callable[P, Try[T]]:
    """Decorator that captures a function's outcome in a Try.

    Each call goes through the same capture boundary as ``of()``: a return
    value becomes Success, a non-fatal exception becomes Failure, and a
    fatal exception propagates.

    Args:
        func: The function to wrap.

    Returns:
        A wrapped function that returns Try[T] instead of T.

    Example:
        ```python
        @safe
        def parse_port(raw: str) -> int:
            return int(raw)

        parse_port('8080')  # Success(value=8080)
        parse_port('http')  # Failure(cause=ValueError(...))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Try[T]:
        return of(lambda: wrapped(*args, **kwargs))

    return wrapper(func)
