"""Prometheus metrics declarations for the task service.

All metrics are declared statically at module level.
Labels use ONLY static enumerations, never task ids.
"""

from prometheus_client import Counter, Gauge, Histogram

TASK_OPERATIONS_TOTAL = Counter(
    "task_api_operations_total",
    "Task operations handled by the service",
    ["operation", "outcome"],
)

TASKS_STORED = Gauge(
    "task_api_tasks_stored",
    "Tasks currently held in the store",
)

REQUEST_DURATION_SECONDS = Histogram(
    "task_api_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method"],
)


def record_operation(operation: str, outcome: str) -> None:
    TASK_OPERATIONS_TOTAL.labels(operation=operation, outcome=outcome).inc()
