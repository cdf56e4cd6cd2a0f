"""Structured logging configuration for klaw-try.

Uses structlog's ProcessorFormatter to unify structlog and stdlib logging
output. Library loggers are wrapped around the stdlib ``klaw_try`` logger
with their own processor chain, so the host application's structlog
configuration is never touched.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

__all__ = [
    'configure_logging',
    'get_logger',
]

_ROOT_LOGGER = 'klaw_try'


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def _get_renderer(json_output: bool = True) -> Any:
    """Get the appropriate renderer based on output format."""
    import structlog

    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Install a ProcessorFormatter handler on the ``klaw_try`` logger.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use colored console output.
    """
    import structlog

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    # Only the library's own logger; root handlers are left alone
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger bound to a stdlib logger under ``klaw_try``.

    Args:
        name: Logger name. If None, uses the ``klaw_try`` logger itself.

    Returns:
        A structlog BoundLogger with the library's own processor chain.
    """
    import structlog

    return structlog.wrap_logger(
        logging.getLogger(name or _ROOT_LOGGER),
        processors=[
            *_get_shared_processors(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
