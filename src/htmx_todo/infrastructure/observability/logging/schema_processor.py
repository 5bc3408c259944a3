"""Groups the flat structlog event_dict into the JSON shape shipped by the service.

A line always carries the top-level fields. ``task`` appears for task
operations, ``request`` for the per-request completion line written by
CorrelationMiddleware, and ``error`` when the event names an error type.
Keys nobody claimed are kept under ``extra``.
"""

from __future__ import annotations

import os
from typing import Any

_TOP_LEVEL = ("timestamp", "level", "correlation_id", "trace_id")

# output block -> (block key, event_dict key) pairs
_BLOCKS: dict[str, tuple[tuple[str, str], ...]] = {
    "task": (("id", "task_id"), ("operation", "operation"), ("completed", "completed")),
    "request": (
        ("method", "context_method"),
        ("endpoint", "context_endpoint"),
        ("status", "processing_status"),
        ("http_status", "processing_http_status"),
        ("duration_ms", "processing_duration_ms"),
    ),
    "error": (("type", "error_type"), ("details", "error_details")),
}

# a block is emitted only when its anchor key is present
_ANCHORS = {"task": "operation", "request": "processing_http_status", "error": "error_type"}


def _take_block(event_dict: dict[str, Any], block: str) -> dict[str, Any] | None:
    if _ANCHORS[block] not in event_dict:
        return None
    return {name: event_dict.pop(key, None) for name, key in _BLOCKS[block]}


def event_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    result: dict[str, Any] = {
        "message": event_dict.pop("event", ""),
        "service": os.environ.get("SERVICE_NAME", "htmx-todo"),
        "component": event_dict.pop("context_component", None),
    }
    for key in _TOP_LEVEL:
        result[key] = event_dict.pop(key, None)

    for block in _BLOCKS:
        content = _take_block(event_dict, block)
        if content is not None:
            result[block] = content

    # request context bound by the middleware rides along on every in-request line
    if "context_endpoint" in event_dict:
        method = event_dict.pop("context_method", "")
        result["endpoint"] = f"{method} {event_dict.pop('context_endpoint')}".strip()

    if event_dict:
        result["extra"] = dict(event_dict)
    return result
