"""
Structured Logging Module

JSON log lines for the payload services, one document per event.

The package is a library, so entries go to stderr unless the host application
passes its own stream to ``configure_logging``. Level and service name come
from Settings. The correlation ID lives in structlog's context variables and
is merged into every entry emitted while it is bound.

Pattern: Structured logging for observability
Pattern: Singleton configuration (configure once, reconfigure only on force)
"""

import logging
import sys
from contextlib import contextmanager
from typing import Generator, Optional, TextIO

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from openrouter_contract.core.config import get_settings

CORRELATION_ID_KEY = "correlation_id"

_configured: bool = False


# =============================================================================
# Correlation ID
# =============================================================================


def set_correlation_id(correlation_id: str) -> None:
    """Bind a correlation ID to every entry logged in the current context."""
    structlog.contextvars.bind_contextvars(**{CORRELATION_ID_KEY: correlation_id})


def get_correlation_id() -> Optional[str]:
    return structlog.contextvars.get_contextvars().get(CORRELATION_ID_KEY)


def clear_correlation_id() -> None:
    structlog.contextvars.unbind_contextvars(CORRELATION_ID_KEY)


@contextmanager
def correlation_id_context(correlation_id: str) -> Generator[None, None, None]:
    """
    Bind a correlation ID for the duration of the block.

    The previous ID, if any, is restored on exit.

    Example:
        >>> with correlation_id_context("gen-12345"):
        ...     parse_response(payload)
    """
    with structlog.contextvars.bound_contextvars(**{CORRELATION_ID_KEY: correlation_id}):
        yield


# =============================================================================
# Processors
# =============================================================================


def add_service_name(
    logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Tag the entry with ``Settings.service_name``."""
    event_dict.setdefault("service", get_settings().service_name)
    return event_dict


def _processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_service_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


# =============================================================================
# Singleton Configuration
# =============================================================================


def configure_logging(
    level: Optional[str] = None,
    stream: Optional[TextIO] = None,
    force: bool = False,
) -> None:
    """
    Configure structlog for the package.

    Subsequent calls are no-ops unless force=True.

    Args:
        level: Minimum log level; defaults to Settings.log_level
        stream: Output stream (default: sys.stderr)
        force: Force reconfiguration (for testing only)
    """
    global _configured

    if _configured and not force:
        return

    structlog.configure(
        processors=_processors(),
        wrapper_class=structlog.make_filtering_bound_logger(
            _level_to_int(level or get_settings().log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )
    _configured = True


def reset_logging() -> None:
    """
    Forget the current configuration so the next call configures again.

    WARNING: This should only be used in tests.
    """
    global _configured
    _configured = False


def get_logger(
    name: str,
    stream: Optional[TextIO] = None,
    level: Optional[str] = None,
) -> structlog.BoundLogger:
    """
    Get a structured logger bound to ``name``.

    Configures logging on first use. Services fetch a logger per operation
    rather than holding one at import time so that reconfiguration applies.

    Args:
        name: Logger name (typically module name)
        stream: Output stream, used only for the initial configuration
        level: Log level, used only for the initial configuration

    Example:
        >>> get_logger(__name__).warning("error envelope received", status=429)
    """
    configure_logging(level=level, stream=stream)
    return structlog.get_logger().bind(logger=name)


def _level_to_int(level: str) -> int:
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO
