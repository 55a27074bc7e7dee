from fastapi import APIRouter, Depends, status

from events_hall.api.deps import get_booking_store
from events_hall.core.exceptions import BookingError
from events_hall.core.metrics import BOOKING_OPERATIONS
from events_hall.schemas.booking import BookingCreateRequest, BookingMessageResponse, BookingResponse
from events_hall.services.booking_store import BookingRepository

router = APIRouter(prefix="/api/bookings", tags=["bookings"])

BOOKING_CREATED_DETAIL = "Booking created successfully"
BOOKING_DELETED_DETAIL = "Booking deleted successfully"


def _to_response(bookings) -> list[BookingResponse]:
    return [BookingResponse.model_validate(booking) for booking in bookings]


@router.get("", response_model=list[BookingResponse], status_code=status.HTTP_200_OK)
def list_bookings(store: BookingRepository = Depends(get_booking_store)) -> list[BookingResponse]:
    return _to_response(store.list_all())


@router.get("/hall/{hall_type}", response_model=list[BookingResponse], status_code=status.HTTP_200_OK)
def list_bookings_by_hall(
    hall_type: str,
    store: BookingRepository = Depends(get_booking_store),
) -> list[BookingResponse]:
    return _to_response(store.list_by_hall(hall_type))


@router.get("/date/{date}", response_model=list[BookingResponse], status_code=status.HTTP_200_OK)
def list_bookings_by_date(
    date: str,
    store: BookingRepository = Depends(get_booking_store),
) -> list[BookingResponse]:
    return _to_response(store.list_by_date(date))


@router.get("/{booking_id}", response_model=BookingResponse, status_code=status.HTTP_200_OK)
def get_booking_by_id(
    booking_id: str,
    store: BookingRepository = Depends(get_booking_store),
) -> BookingResponse:
    return BookingResponse.model_validate(store.get(booking_id))


@router.post("", response_model=BookingMessageResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    payload: BookingCreateRequest | None = None,
    store: BookingRepository = Depends(get_booking_store),
) -> BookingMessageResponse:
    payload = payload or BookingCreateRequest()
    try:
        booking = store.create(
            hall_type=payload.hall_type,
            date=payload.date,
            customer_name=payload.customer_name,
            customer_email=payload.customer_email,
            customer_phone=payload.customer_phone,
        )
    except BookingError as exc:
        BOOKING_OPERATIONS.labels(operation="create", outcome=f"http_{exc.status_code}").inc()
        raise

    BOOKING_OPERATIONS.labels(operation="create", outcome="created").inc()
    return BookingMessageResponse(
        message=BOOKING_CREATED_DETAIL,
        booking=BookingResponse.model_validate(booking),
    )


@router.delete("/{booking_id}", response_model=BookingMessageResponse, status_code=status.HTTP_200_OK)
def delete_booking(
    booking_id: str,
    store: BookingRepository = Depends(get_booking_store),
) -> BookingMessageResponse:
    try:
        booking = store.delete(booking_id)
    except BookingError as exc:
        BOOKING_OPERATIONS.labels(operation="delete", outcome=f"http_{exc.status_code}").inc()
        raise

    BOOKING_OPERATIONS.labels(operation="delete", outcome="deleted").inc()
    return BookingMessageResponse(
        message=BOOKING_DELETED_DETAIL,
        booking=BookingResponse.model_validate(booking),
    )
