from fastapi.testclient import TestClient

from events_hall.core.exceptions import available_routes
from events_hall.main import create_app
from events_hall.services.booking_store import InMemoryBookingStore


def test_root_returns_plain_text_health_string(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Events Hall Backend Running"


def test_error_response_has_unified_shape(client):
    response = client.get("/api/bookings/1")

    assert response.status_code == 404
    body = response.json()
    assert "message" in body
    assert "request_id" in body


def test_unmatched_route_lists_available_routes(client):
    response = client.get("/api/unknown")

    assert response.status_code == 404
    body = response.json()
    assert body["message"] == "Route not found"
    assert "GET /api/bookings" in body["availableRoutes"]
    assert "POST /api/bookings" in body["availableRoutes"]
    assert "DELETE /api/bookings/{booking_id}" in body["availableRoutes"]
    assert "GET /api/bookings/hall/{hall_type}" in body["availableRoutes"]


def test_unsupported_method_is_treated_as_unmatched_route(client):
    response = client.put("/api/bookings/1", json={})

    assert response.status_code == 404
    assert "availableRoutes" in response.json()


def test_malformed_body_returns_400(client):
    response = client.post(
        "/api/bookings",
        content="not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Request validation failed"


class ExplodingStore(InMemoryBookingStore):
    def list_all(self):
        raise RuntimeError("store unavailable")


def test_unexpected_failure_returns_500_with_error_text():
    app = create_app(booking_store=ExplodingStore())
    with TestClient(app) as test_client:
        response = test_client.get("/api/bookings")

        assert response.status_code == 500
        body = response.json()
        assert body["message"] == "Internal server error"
        assert body["error"] == "store unavailable"

        assert test_client.get("/").status_code == 200


def test_cors_allows_any_origin(client):
    response = client.options(
        "/api/bookings",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "DELETE",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert "DELETE" in response.headers["access-control-allow-methods"]


def test_available_routes_include_router_endpoints():
    routes = available_routes(create_app())

    assert "GET /" in routes
    assert "GET /api/bookings" in routes
    assert "GET /api/bookings/{booking_id}" in routes
    assert "GET /api/bookings/date/{date}" in routes
    assert "GET /api/booked-dates" in routes
    assert "POST /api/book" in routes
