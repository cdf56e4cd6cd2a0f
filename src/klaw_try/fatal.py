"""Fatal exception classification.

A fatal exception is one the interpreter cannot meaningfully continue
after: exit and cancellation signals, memory or stack exhaustion, internal
interpreter faults and failures to load code. Fatal exceptions are never
captured into a ``Failure``; every capture site re-raises them unchanged.
"""

from __future__ import annotations

import asyncio

from klaw_try._config import get_config

__all__ = ['DEFAULT_FATAL', 'is_fatal']

DEFAULT_FATAL: tuple[type[BaseException], ...] = (
    # Thread death / cancellation
    SystemExit,
    KeyboardInterrupt,
    GeneratorExit,
    asyncio.CancelledError,
    # Interpreter resource exhaustion / internal faults
    MemoryError,
    RecursionError,
    SystemError,
    # Linkage
    ImportError,
)
"""Exception types that are always fatal, regardless of configuration."""


def is_fatal(exc: BaseException) -> bool:
    """Return True if ``exc`` must propagate rather than be captured.

    Args:
        exc: The exception to classify.

    Returns:
        True for instances of ``DEFAULT_FATAL`` or of any type registered via
        ``init(extra_fatal=...)``, False otherwise.

    Examples:
        >>> is_fatal(MemoryError())
        True
        >>> is_fatal(ValueError('bad input'))
        False
    """
    if isinstance(exc, DEFAULT_FATAL):
        return True
    extra = get_config().extra_fatal
    return bool(extra) and isinstance(exc, extra)
