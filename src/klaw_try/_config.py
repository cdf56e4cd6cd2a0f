"""Library configuration: TryConfig, init() and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_try._logging import configure_logging

__all__ = [
    'TryConfig',
    'get_config',
    'init',
]

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class TryConfig:
    """Configuration for klaw-try.

    Attributes:
        extra_fatal: Exception types treated as fatal in addition to the
            built-in fatal set. The built-in set cannot be shrunk.
        log_level: Logging level for capture-boundary events. None = silent.
    """

    extra_fatal: tuple[type[BaseException], ...] = ()
    log_level: str | None = None


# Global configuration (set by init(), lazily read from env otherwise)
_config: TryConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from the KLAW_TRY_LOG_LEVEL environment variable."""
    env_level = os.environ.get('KLAW_TRY_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in _LEVELS:
        logging.warning("Unknown KLAW_TRY_LOG_LEVEL value '%s', logging disabled", env_level)
        return None
    return env_level


def init(
    extra_fatal: tuple[type[BaseException], ...] = (),
    log_level: str | None = None,
) -> TryConfig:
    """Initialize klaw-try with the given configuration.

    Args:
        extra_fatal: Additional exception types to treat as fatal.
        log_level: Logging level ("DEBUG", "INFO", etc.). Falls back to
            KLAW_TRY_LOG_LEVEL, then None (silent).

    Returns:
        The TryConfig that was set.

    Raises:
        TypeError: If an entry of extra_fatal is not an exception type.

    Example:
        ```python
        from klaw_try import init

        # Treat a driver's connection-lost error as unrecoverable
        init(extra_fatal=(ConnectionLostError,), log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    for exc_type in extra_fatal:
        if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
            msg = f'extra_fatal entries must be exception types, got {exc_type!r}'
            raise TypeError(msg)

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()

    _config = TryConfig(extra_fatal=tuple(extra_fatal), log_level=resolved_level)

    if resolved_level is not None:
        configure_logging(resolved_level)

    return _config


def get_config() -> TryConfig:
    """Get the current configuration.

    Try has to work before anyone calls init(), so on first access this
    builds a TryConfig from KLAW_TRY_LOG_LEVEL. Unlike init(), that path
    installs no handler; events go to the stdlib ``klaw_try`` logger as the
    application has configured it.

    Returns:
        The current TryConfig.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = TryConfig(log_level=_detect_log_level())
    return _config
