"""Structlog-based logging configuration with a stdlib bridge.

Provides:
- configure_logging(): one-shot structlog + stdlib setup
- get_logger(): returns a structlog logger bound to a component
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from htmx_todo.infrastructure.observability.logging.schema_processor import (
    event_schema_processor,
)

_CONFIGURED = False

_JSON_ENVIRONMENTS = ("qa", "staging", "prod", "production")


def configure_logging(
    level: str = "INFO",
    log_format: str | None = None,
    app_env: str | None = None,
) -> None:
    """One-shot structlog + stdlib bridge configuration.

    Safe to call multiple times; only the first invocation takes effect.
    Renderer is selected by ``log_format`` (json|console), falling back to
    the LOG_FORMAT env var and then to the environment name.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    processors = _build_processors(_use_json(log_format, app_env))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Stdlib bridge: uvicorn and other libraries log through the same pipeline
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *processors,
        ],
        foreign_pre_chain=[structlog.stdlib.add_logger_name],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(log_level)


def get_logger(component: str) -> Any:
    """Return a lazily bound structlog logger tagged with context_component."""
    return structlog.get_logger(context_component=component)


def _use_json(log_format: str | None, app_env: str | None) -> bool:
    chosen = (log_format or os.environ.get("LOG_FORMAT", "")).lower()
    if chosen == "json":
        return True
    if chosen == "console":
        return False
    env = (app_env or os.environ.get("APP_ENV", "local")).lower()
    return env in _JSON_ENVIRONMENTS


def _build_processors(use_json: bool) -> list[Any]:
    shared: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if use_json:
        return [*shared, event_schema_processor, structlog.processors.JSONRenderer()]
    return [*shared, structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]

