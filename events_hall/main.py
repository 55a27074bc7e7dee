import logging
import time
from uuid import uuid4

from fastapi import FastAPI
from fastapi import Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from events_hall.api.v1.booked_dates import router as booked_dates_router
from events_hall.api.v1.bookings import router as bookings_router
from events_hall.core.config import settings
from events_hall.core.exceptions import internal_error_response, register_exception_handlers
from events_hall.core.logging import setup_logging
from events_hall.core.metrics import REQUEST_COUNT, REQUEST_LATENCY, render_metrics, route_label
from events_hall.core.request_context import request_id_ctx_var
from events_hall.services.booked_dates_store import BookedDatesStore
from events_hall.services.booking_store import BookingRepository, InMemoryBookingStore

setup_logging()
logger = logging.getLogger("events_hall.request")


def create_app(
    booking_store: BookingRepository | None = None,
    booked_dates_store: BookedDatesStore | None = None,
) -> FastAPI:
    app = FastAPI(title="Events Hall Booking API", version="1.0.0")
    app.state.booking_store = booking_store or InMemoryBookingStore()
    app.state.booked_dates_store = booked_dates_store or BookedDatesStore(settings.booked_dates_seed_list())

    register_exception_handlers(app)

    @app.middleware("http")
    async def observability_middleware(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or str(uuid4())
        token = request_id_ctx_var.set(request_id)
        start = time.perf_counter()
        path = request.url.path
        method = request.method
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception("request_failed method=%s path=%s status=500", method, path)
            response = internal_error_response(exc)

        elapsed = time.perf_counter() - start
        label = route_label(request)
        REQUEST_COUNT.labels(method=method, path=label, status_code=response.status_code).inc()
        REQUEST_LATENCY.labels(method=method, path=label).observe(elapsed)
        response.headers["X-Request-ID"] = request_id
        logger.info(
            "request_completed method=%s path=%s status=%s duration_ms=%.2f",
            method,
            path,
            response.status_code,
            elapsed * 1000,
        )
        request_id_ctx_var.reset(token)
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_methods=settings.cors_method_list(),
        allow_headers=settings.cors_header_list(),
    )

    app.include_router(bookings_router)
    app.include_router(booked_dates_router)

    @app.get("/", response_class=PlainTextResponse, tags=["health"])
    def root() -> str:
        return settings.health_message

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/metrics", tags=["observability"])
    def metrics() -> Response:
        payload, content_type = render_metrics()
        return Response(content=payload, media_type=content_type)

    return app


app = create_app()
