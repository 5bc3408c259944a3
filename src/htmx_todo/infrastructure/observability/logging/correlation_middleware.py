"""Pure ASGI middleware for correlation/trace ID propagation via structlog contextvars.

Injects correlation_id, trace_id, endpoint and method into structlog context
for every HTTP request, echoes the correlation id back in the
X-Correlation-ID response header and logs request completion with duration.
"""

from __future__ import annotations

import time
from typing import Any
from uuid import uuid4

from structlog.contextvars import bind_contextvars, clear_contextvars

from htmx_todo.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("http")

CORRELATION_HEADER = b"x-correlation-id"


class CorrelationMiddleware:
    """ASGI middleware that binds correlation/trace IDs to structlog contextvars."""

    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        await self._handle_request(scope, receive, send)

    async def _handle_request(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        clear_contextvars()
        correlation_id = self._bind_request_context(scope)
        http_status = 500
        start = time.perf_counter()
        try:
            http_status = await self._dispatch_and_capture_status(
                scope, receive, send, correlation_id
            )
        finally:
            await self._log_request_completion(http_status, start)
            clear_contextvars()

    @staticmethod
    def _bind_request_context(scope: dict[str, Any]) -> str:
        """Bind correlation, trace, endpoint, and method into structlog contextvars."""
        correlation_id = _extract_header(scope, CORRELATION_HEADER) or str(uuid4())
        bind_contextvars(
            correlation_id=correlation_id,
            trace_id=str(uuid4()),
            context_endpoint=str(scope.get("path", "/")),
            context_method=str(scope.get("method", "UNKNOWN")),
        )
        return correlation_id

    async def _dispatch_and_capture_status(
        self, scope: dict[str, Any], receive: Any, send: Any, correlation_id: str
    ) -> int:
        """Dispatch the ASGI app, capture the status code and stamp the correlation header."""
        http_status = 500

        async def _capture_status(message: dict[str, Any]) -> None:
            nonlocal http_status
            if message.get("type") == "http.response.start":
                http_status = message.get("status", 500)
                headers = list(message.get("headers", []))
                headers.append((CORRELATION_HEADER, correlation_id.encode("latin-1")))
                message = {**message, "headers": headers}
            await send(message)

        await self.app(scope, receive, _capture_status)
        return http_status

    @staticmethod
    async def _log_request_completion(http_status: int, start: float) -> None:
        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        status_label = "SUCCESS" if http_status < 400 else "ERROR"
        await logger.ainfo(
            "Request processed",
            processing_status=status_label,
            processing_duration_ms=duration_ms,
            processing_http_status=http_status,
        )


def _extract_header(scope: dict[str, Any], name: bytes) -> str | None:
    """Extract a header value from ASGI scope (case-insensitive)."""
    headers: list[tuple[bytes, bytes]] = scope.get("headers", [])
    lower_name = name.lower()
    for key, value in headers:
        if key.lower() == lower_name:
            return value.decode("latin-1")
    return None
