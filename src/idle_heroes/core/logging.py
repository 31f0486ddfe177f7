"""Structured logging configuration for Idle Heroes.

Engine events are structlog key/value events. They are handed to the
standard library's root logger and rendered by one
``structlog.stdlib.ProcessorFormatter`` per handler, so records from
sqlite3 or other stdlib users share the same format. A debug session
renders for humans; otherwise output is JSON lines.

Example:
    >>> from idle_heroes.core.logging import configure_logging_from_settings, get_logger
    >>> configure_logging_from_settings()
    >>> get_logger(__name__).info("Mission completed", mission_id="mission_1", difficulty=1.2)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor

from idle_heroes.core.exceptions import ConfigurationError


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger

    from idle_heroes.core.config import Settings


APP_NAME = "idle_heroes"


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Tag every event with the application name."""
    event_dict["app"] = APP_NAME
    return event_dict


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(f"Unknown log level: {level!r}", config_key="log_level")
    return resolved


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _formatter(json_format: bool, *, colors: bool) -> logging.Formatter:
    renderer: Processor
    if json_format:
        renderer = structlog.processors.JSONRenderer()
        pre_render: list[Processor] = [structlog.processors.format_exc_info]
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=colors,
            exception_formatter=structlog.dev.plain_traceback,
        )
        pre_render = []

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *pre_render,
            renderer,
        ],
    )


def configure_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | Path | None = None,
) -> None:
    """Configure application-wide logging.

    Replaces the root logger's handlers with a stdout handler and, when
    ``log_file`` is given, a file handler. The file always receives JSON
    lines.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: Render stdout as JSON lines instead of console output.
        log_file: Optional path of a file that also receives every record.

    Raises:
        ConfigurationError: If the level name is unknown.
    """
    numeric_level = _resolve_level(level)

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(_formatter(json_format, colors=not json_format and sys.stdout.isatty()))
    handlers: list[logging.Handler] = [stream_handler]

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(_formatter(True, colors=False))
        handlers.append(file_handler)

    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        handler.setLevel(numeric_level)
        root.addHandler(handler)
    root.setLevel(numeric_level)


def configure_logging_from_settings(settings: Settings | None = None) -> None:
    """Configure logging from application settings.

    Debug mode logs everything at DEBUG as console output. Otherwise the
    configured level applies and output is JSON lines.

    Args:
        settings: Settings to read; defaults to the settings singleton.
    """
    if settings is None:
        from idle_heroes.core.config import get_settings

        settings = get_settings()

    configure_logging(
        level="DEBUG" if settings.debug else settings.log_level,
        json_format=settings.is_production,
        log_file=settings.log_file,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger, typically with ``__name__``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context that is included in all subsequent events.

    Example:
        >>> bind_context(session_id="abc123")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


__all__ = [
    "APP_NAME",
    "add_app_context",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
