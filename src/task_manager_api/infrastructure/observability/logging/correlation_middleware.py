"""Pure ASGI middleware for correlation ID propagation and access logging.

Binds correlation_id, endpoint, method and client IP into structlog
contextvars for every HTTP request, echoes the correlation id back in the
``X-Correlation-ID`` response header, and logs one line per request with
status code and duration.
"""

from __future__ import annotations

import time
from typing import Any
from uuid import uuid4

from structlog.contextvars import bind_contextvars, clear_contextvars

from task_manager_api.infrastructure.observability.logger_factory_service import get_logger
from task_manager_api.infrastructure.observability.metrics_service import (
    REQUEST_DURATION_SECONDS,
)

CORRELATION_HEADER = b"x-correlation-id"

logger = get_logger("http")


class CorrelationMiddleware:
    """ASGI middleware that binds request context to structlog contextvars."""

    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        await self._handle_request(scope, receive, send)

    async def _handle_request(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        clear_contextvars()
        correlation_id = _extract_header(scope, CORRELATION_HEADER) or str(uuid4())
        bind_contextvars(
            correlation_id=correlation_id,
            context_endpoint=str(scope.get("path", "/")),
            context_method=str(scope.get("method", "UNKNOWN")),
            context_client_ip=_extract_client_ip(scope),
            context_user_agent=_extract_header(scope, b"user-agent"),
        )
        http_status = 500
        start = time.perf_counter()

        async def _send_with_correlation(message: dict[str, Any]) -> None:
            nonlocal http_status
            if message.get("type") == "http.response.start":
                http_status = message.get("status", 500)
                headers = list(message.get("headers", []))
                headers.append((CORRELATION_HEADER, correlation_id.encode("latin-1")))
                message = {**message, "headers": headers}
            await send(message)

        try:
            await self.app(scope, receive, _send_with_correlation)
        finally:
            self._log_request_completion(scope, http_status, start)

    @staticmethod
    def _log_request_completion(scope: dict[str, Any], http_status: int, start: float) -> None:
        duration = time.perf_counter() - start
        REQUEST_DURATION_SECONDS.labels(method=str(scope.get("method", "UNKNOWN"))).observe(duration)
        logger.info(
            "Request processed",
            processing_status="SUCCESS" if http_status < 400 else "ERROR",
            processing_http_status=http_status,
            processing_duration_ms=round(duration * 1000, 2),
        )


def _extract_header(scope: dict[str, Any], name: bytes) -> str | None:
    """Extract a header value from ASGI scope (case-insensitive)."""
    headers: list[tuple[bytes, bytes]] = scope.get("headers", [])
    lower_name = name.lower()
    for key, value in headers:
        if key.lower() == lower_name:
            return value.decode("latin-1")
    return None


def _extract_client_ip(scope: dict[str, Any]) -> str | None:
    client = scope.get("client")
    if not client:
        return None
    return str(client[0])
