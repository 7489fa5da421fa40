"""Structlog processor that nests flat event dicts into the service log schema.

Root fields: timestamp, level, service, environment, correlation_id, trace_id,
span_id, message. trace_id and span_id come from the current OpenTelemetry span
when one is recording.
Optional blocks: processing, error, context, extra.
All field extraction uses dict.pop(key, default) to avoid KeyError.
"""

from __future__ import annotations

from typing import Any

from opentelemetry import trace


def _build_root_fields(
    event_dict: dict[str, Any], service: str, environment: str
) -> dict[str, Any]:
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": service,
        "environment": environment,
        "correlation_id": event_dict.pop("correlation_id", None),
        "trace_id": event_dict.pop("trace_id", None),
        "span_id": event_dict.pop("span_id", None),
        "message": event_dict.pop("event", ""),
    }


def _safe_float(value: Any) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _build_processing(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    status = event_dict.pop("processing_status", None)
    if status is None:
        return None
    return {
        "status": status,
        "http_status": event_dict.pop("processing_http_status", None),
        "duration_ms": _safe_float(event_dict.pop("processing_duration_ms", None)),
    }


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "details": event_dict.pop("error_details", None),
    }


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    component = event_dict.pop("context_component", None)
    endpoint = event_dict.pop("context_endpoint", None)
    if component is None and endpoint is None:
        return None
    return {
        "component": component,
        "endpoint": endpoint,
        "method": event_dict.pop("context_method", None),
        "client_ip": event_dict.pop("context_client_ip", None),
        "user_agent": event_dict.pop("context_user_agent", None),
    }


def _hex_to_uuid(hex_str: str) -> str:
    return f"{hex_str[:8]}-{hex_str[8:12]}-{hex_str[12:16]}-{hex_str[16:20]}-{hex_str[20:]}"


def _inject_otel_ids(event_dict: dict[str, Any]) -> None:
    """Overwrite trace_id and span_id from the current span if it is recording."""
    span = trace.get_current_span()
    if not span.is_recording():
        return
    ctx = span.get_span_context()
    event_dict["trace_id"] = _hex_to_uuid(format(ctx.trace_id, "032x"))
    event_dict["span_id"] = format(ctx.span_id, "016x")


def build_schema_processor(service: str, environment: str):
    """Return a structlog processor bound to the given service/environment labels."""

    def task_api_schema_processor(
        logger: Any,  # noqa: ARG001
        method_name: str,  # noqa: ARG001
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        _inject_otel_ids(event_dict)
        result = _build_root_fields(event_dict, service, environment)

        processing = _build_processing(event_dict)
        if processing is not None:
            result["processing"] = processing

        error = _build_error(event_dict)
        if error is not None:
            result["error"] = error

        context = _build_context(event_dict)
        if context is not None:
            result["context"] = context

        if event_dict:
            result["extra"] = dict(event_dict)

        return result

    return task_api_schema_processor
