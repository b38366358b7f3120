"""Structured logging configuration for the HMAC encoder library.

Loggers are structlog front-ends over stdlib ``logging`` loggers, so an
application that never configures logging sees nothing below WARNING,
and nothing at all on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog

__all__ = ["configure_logging", "get_logger"]


def _level_from_name(level: str) -> int:
    """Map a level name such as "info" to its numeric value."""
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def configure_logging(*, json_output: bool = True, level: str = "INFO") -> None:
    """Configure structlog for an application embedding the encoder.

    The library never calls this itself; callers opt in.

    Args:
        json_output: True for JSON (production), False for console (dev).
        level: Log level string.

    Raises:
        ValueError: If level is not a known log level name.
    """
    level_no = _level_from_name(level)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    logging.basicConfig(
        format="%(message)s", stream=sys.stdout, level=level_no, force=True
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None, **kwargs: Any) -> structlog.BoundLogger:
    """Get a bound logger over the stdlib logger ``name``."""
    return structlog.wrap_logger(logging.getLogger(name), **kwargs)  # type: ignore[no-any-return]
