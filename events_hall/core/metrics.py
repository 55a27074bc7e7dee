from fastapi import Request
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

UNMATCHED_ROUTE_LABEL = "unmatched"

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests by route template",
    ["method", "path", "status_code"],
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds by route template",
    ["method", "path"],
)

BOOKING_OPERATIONS = Counter(
    "booking_operations_total",
    "Booking store operations by outcome",
    ["operation", "outcome"],
)


def route_label(request: Request) -> str:
    """Label requests by route template so ids and dates do not become new series."""
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path or UNMATCHED_ROUTE_LABEL


def render_metrics() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST
