# -*- coding: utf-8 -*-
"""Logging configuration for structlog + Logfire.

The notifier runs once per pipeline step, so logs go to stderr (stdout is
left to the CI runner) and the optional file log is appended to, never rotated.
"""

from __future__ import annotations

import logging
import sys
import logfire
import structlog
from typing import Any
from structlog.types import EventDict, Processor
from pathlib import Path

from ci_notify.config import AppSettings, LoggingSettings, Settings

LOG_LEVEL_TO_LOGFIRE: dict[str, str] = {
    "DEBUG": "debug",
    "INFO": "info",
    "WARNING": "warn",
    "ERROR": "error",
    "CRITICAL": "fatal",
}


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def _service_context(app_settings: AppSettings) -> Processor:
    """Build a processor attaching logger name and app/service/environment to every event."""

    def _add_service_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        stdlib_logger = getattr(logger, "_logger", None)
        event_dict["logger"] = (
            getattr(stdlib_logger, "name", None) or getattr(logger, "name", "") or ""
        )
        event_dict["app_name"] = app_settings.app_name
        if app_settings.service_name:
            event_dict["service_name"] = app_settings.service_name
        if app_settings.service_version:
            event_dict["service_version"] = app_settings.service_version
        event_dict["environment"] = app_settings.environment
        return event_dict

    return _add_service_context


def _console_handler(logging_settings: LoggingSettings) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level(logging_settings.console_level))
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def _file_handler(logging_settings: LoggingSettings) -> logging.Handler:
    log_file_path = Path(logging_settings.log_file_path)
    log_file_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file_path, mode="a", encoding="utf-8")
    handler.setLevel(_level(logging_settings.file_level))
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def _build_handlers(logging_settings: LoggingSettings) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if logging_settings.log_to_console:
        handlers.append(_console_handler(logging_settings))
    if logging_settings.log_to_file:
        handlers.append(_file_handler(logging_settings))
    return handlers


def _configure_logfire(settings: Settings) -> None:
    app_settings = settings.app
    logging_settings = settings.logging
    logfire.configure(
        token=logging_settings.logfire_token,
        service_name=app_settings.service_name or app_settings.app_name,
        service_version=app_settings.service_version,
        environment=app_settings.environment,
        min_level=LOG_LEVEL_TO_LOGFIRE.get(logging_settings.logfire_level, "info"),  # type: ignore[arg-type]
        # Logfire's own console printer writes to stdout
        console=False,
    )


def _renderer(logging_settings: LoggingSettings) -> Processor:
    # Enabling the file log switches every handler to JSON.
    if logging_settings.log_to_file or logging_settings.json_format:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(settings: Settings) -> None:
    """Configure stdlib handlers, the structlog processor chain and, if enabled, Logfire."""
    logging_settings = settings.logging

    handlers = _build_handlers(logging_settings)
    if handlers:
        logging.basicConfig(
            level=min(handler.level for handler in handlers),
            handlers=handlers,
            force=True,
        )

    if logging_settings.logfire_enabled:
        _configure_logfire(settings)

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _service_context(settings.app),
    ]
    if logging_settings.logfire_enabled:
        processors.append(logfire.StructlogProcessor())  # type: ignore[arg-type]
    if handlers:
        processors.append(_renderer(logging_settings))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
