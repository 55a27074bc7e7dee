import logging
import threading
from collections.abc import Iterable

from events_hall.core.exceptions import BookingValidationError

logger = logging.getLogger(__name__)

DATE_REQUIRED_DETAIL = "Date is required"


class BookedDatesStore:
    """Bare list of booked dates kept for clients of the old date-only API.

    No identity, no customer data and no duplicate check: booking a date
    twice stores it twice.
    """

    def __init__(self, seed: Iterable[str] = ()) -> None:
        self._dates: list[str] = list(seed)
        self._lock = threading.Lock()

    def list_all(self) -> list[str]:
        with self._lock:
            return list(self._dates)

    def book(self, date: str | None) -> str:
        if not date:
            raise BookingValidationError(DATE_REQUIRED_DETAIL, required=["date"])
        with self._lock:
            self._dates.append(date)
        logger.info("date_booked date=%s", date)
        return date
