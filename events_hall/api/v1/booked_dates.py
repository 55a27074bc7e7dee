from fastapi import APIRouter, Depends, status

from events_hall.api.deps import get_booked_dates_store
from events_hall.core.metrics import BOOKING_OPERATIONS
from events_hall.schemas.booked_date import BookDateRequest, BookedDateResponse
from events_hall.services.booked_dates_store import BookedDatesStore

router = APIRouter(prefix="/api", tags=["booked-dates"], deprecated=True)

DATE_BOOKED_DETAIL = "Booked successfully"


@router.get("/booked-dates", response_model=list[str], status_code=status.HTTP_200_OK)
def list_booked_dates(store: BookedDatesStore = Depends(get_booked_dates_store)) -> list[str]:
    return store.list_all()


@router.post("/book", response_model=BookedDateResponse, status_code=status.HTTP_200_OK)
def book_date(
    payload: BookDateRequest | None = None,
    store: BookedDatesStore = Depends(get_booked_dates_store),
) -> BookedDateResponse:
    date = store.book((payload or BookDateRequest()).date)
    BOOKING_OPERATIONS.labels(operation="book_date", outcome="booked").inc()
    return BookedDateResponse(message=DATE_BOOKED_DETAIL, date=date)
