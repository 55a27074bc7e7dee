from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from events_hall.core.request_context import request_id_ctx_var
from events_hall.models import Booking
from events_hall.schemas.booking import BookingResponse

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


class BookingError(Exception):
    """Base class for failures the API reports to the client as JSON."""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class BookingValidationError(BookingError):
    def __init__(self, message: str, required: list[str] | None = None) -> None:
        super().__init__(message, status.HTTP_400_BAD_REQUEST)
        self.required = list(required or [])


class BookingConflictError(BookingError):
    def __init__(self, message: str, existing_booking: Booking) -> None:
        super().__init__(message, status.HTTP_409_CONFLICT)
        self.existing_booking = existing_booking


class BookingNotFoundError(BookingError):
    def __init__(self, message: str = "Booking not found") -> None:
        super().__init__(message, status.HTTP_404_NOT_FOUND)


def error_payload(message: str, **extra: Any) -> dict[str, Any]:
    return {
        "message": message,
        **extra,
        "request_id": request_id_ctx_var.get(),
    }


def available_routes(app: FastAPI) -> list[str]:
    routes: list[str] = []
    for path, operations in app.openapi().get("paths", {}).items():
        for method in operations:
            if method.upper() in HTTP_METHODS:
                routes.append(f"{method.upper()} {path}")
    return routes


async def booking_error_handler(_: Request, exc: BookingError) -> JSONResponse:
    extra: dict[str, Any] = {}
    if isinstance(exc, BookingValidationError) and exc.required:
        extra["required"] = exc.required
    if isinstance(exc, BookingConflictError):
        extra["existingBooking"] = BookingResponse.model_validate(exc.existing_booking).model_dump(
            mode="json", by_alias=True
        )
    return JSONResponse(status_code=exc.status_code, content=error_payload(exc.message, **extra))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=error_payload("Route not found", availableRoutes=available_routes(request.app)),
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_payload(str(exc.detail)),
        headers=exc.headers,
    )


async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_payload("Request validation failed", detail=jsonable_encoder(exc.errors())),
    )


def internal_error_response(exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_payload("Internal server error", error=str(exc)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookingError, booking_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
