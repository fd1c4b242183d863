"""Structured logging configuration with structlog."""

import logging
import sys
from typing import Any

import orjson
import structlog
from structlog.types import EventDict, Processor

from query_composer.core.config import settings


def _orjson_dumps(obj: Any, **kwargs: Any) -> str:
    """Serialize with orjson, decoded for stdlib logging handlers."""
    return orjson.dumps(obj, **kwargs).decode()


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add application context to log events."""
    event_dict["app_name"] = settings.APP_NAME
    event_dict["environment"] = settings.APP_ENV
    return event_dict


def build_processors(environment: str) -> list[Processor]:
    """
    Return the structlog processor chain for an environment.

    Composer events carry flat keyword context (filter, column, direction),
    so the chain only stamps level, time and app context before rendering.
    """
    renderer: Processor
    if environment == "development":
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    else:
        renderer = structlog.processors.JSONRenderer(serializer=_orjson_dumps)

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_app_context,
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging() -> None:
    """
    Configure structlog on top of the stdlib root logger.

    Call once at startup (the CLI does this in its callback). ``DEBUG``
    forces debug level so the per-filter composer events are visible.
    """
    level = logging.DEBUG if settings.DEBUG else logging.getLevelName(settings.LOG_LEVEL)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger().setLevel(level)

    structlog.configure(
        processors=build_processors(settings.APP_ENV),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
        context_class=dict,
    )


def get_logger(name: str | None = None) -> Any:
    """
    Get a structlog logger instance.

    Example:
        ```python
        logger = get_logger(__name__)
        logger.debug("filter_applied", filter="status", column="status")
        ```
    """
    return structlog.get_logger(name)
