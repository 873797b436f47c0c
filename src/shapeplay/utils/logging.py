"""Structured logging configuration using structlog.

Provides correlation IDs for tracing touch streams through the canvas and
configurable output formats (JSON for machine consumption, colored console
for development).
"""

import logging
import sys
from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import Processor

from shapeplay.config import settings

# Context variables for correlation IDs
_canvas_id: ContextVar[str | None] = ContextVar("canvas_id", default=None)
_drawable_id: ContextVar[str | None] = ContextVar("drawable_id", default=None)
_touch_id: ContextVar[int | None] = ContextVar("touch_id", default=None)


def set_correlation_context(
    canvas_id: str | None = None,
    drawable_id: str | None = None,
    touch_id: int | None = None,
) -> None:
    """Set correlation IDs for the current context.

    Args:
        canvas_id: Identifier of the canvas handling the event.
        drawable_id: Identifier of the drawable that owns the touch stream.
        touch_id: Host identifier of the touch/pointer stream.
    """
    if canvas_id is not None:
        _canvas_id.set(canvas_id)
    if drawable_id is not None:
        _drawable_id.set(drawable_id)
    if touch_id is not None:
        _touch_id.set(touch_id)


def clear_correlation_context() -> None:
    """Clear all correlation context variables."""
    _canvas_id.set(None)
    _drawable_id.set(None)
    _touch_id.set(None)


@contextmanager
def touch_context(
    canvas_id: str,
    touch_id: int,
    drawable_id: str | None = None,
) -> Iterator[None]:
    """Bind correlation IDs for the duration of one touch event.

    Unlike set_correlation_context, the previous values are restored on
    exit, so nested dispatches do not leak IDs into each other.
    """
    tokens = [
        (_canvas_id, _canvas_id.set(canvas_id)),
        (_touch_id, _touch_id.set(touch_id)),
        (_drawable_id, _drawable_id.set(drawable_id)),
    ]
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


def _add_correlation_ids(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor to add correlation IDs to log events."""
    _ = logger, method_name  # Required by structlog processor signature
    canvas_id = _canvas_id.get()
    drawable_id = _drawable_id.get()
    touch_id = _touch_id.get()

    if canvas_id is not None:
        event_dict["canvas_id"] = canvas_id
    if drawable_id is not None:
        event_dict["drawable_id"] = drawable_id
    if touch_id is not None:
        event_dict["touch_id"] = touch_id

    return event_dict


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog with the specified settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
                    Defaults to settings.LOG_FORMAT.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_correlation_ids,
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure stdlib logging to match; replace handlers from earlier calls
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
