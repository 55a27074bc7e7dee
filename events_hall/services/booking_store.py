import logging
import threading
from abc import ABC, abstractmethod

from events_hall.core.exceptions import BookingConflictError, BookingNotFoundError, BookingValidationError
from events_hall.models import Booking

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("hallType", "date", "customerName", "customerEmail", "customerPhone")
MISSING_FIELDS_DETAIL = "Missing required fields"
HALL_ALREADY_BOOKED_DETAIL = "This hall is already booked for the selected date"


def parse_booking_id(raw_id: int | str) -> int:
    """Turn a path segment into a booking id, treating garbage as an unknown booking."""
    if isinstance(raw_id, int):
        return raw_id
    if not (raw_id.isascii() and raw_id.isdigit()):
        raise BookingNotFoundError()
    return int(raw_id)


class BookingRepository(ABC):
    @abstractmethod
    def list_all(self) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def get(self, booking_id: int | str) -> Booking:
        raise NotImplementedError

    @abstractmethod
    def create(
        self,
        hall_type: str | None,
        date: str | None,
        customer_name: str | None,
        customer_email: str | None,
        customer_phone: str | None,
    ) -> Booking:
        raise NotImplementedError

    @abstractmethod
    def delete(self, booking_id: int | str) -> Booking:
        raise NotImplementedError

    @abstractmethod
    def list_by_hall(self, hall_type: str) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def list_by_date(self, date: str) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError


class InMemoryBookingStore(BookingRepository):
    """Process-local bookings kept in insertion order.

    Ids come from a counter that only moves forward, so an id freed by a
    delete is never handed out again. Every read-modify-write runs under one
    lock because sync endpoints are served from a thread pool.
    """

    def __init__(self) -> None:
        self._bookings: list[Booking] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def list_all(self) -> list[Booking]:
        with self._lock:
            return list(self._bookings)

    def get(self, booking_id: int | str) -> Booking:
        target_id = parse_booking_id(booking_id)
        with self._lock:
            for booking in self._bookings:
                if booking.id == target_id:
                    return booking
        raise BookingNotFoundError()

    def create(
        self,
        hall_type: str | None,
        date: str | None,
        customer_name: str | None,
        customer_email: str | None,
        customer_phone: str | None,
    ) -> Booking:
        values = (hall_type, date, customer_name, customer_email, customer_phone)
        if not all(values):
            missing = [name for name, value in zip(REQUIRED_FIELDS, values) if not value]
            logger.info("booking_rejected missing=%s", ",".join(missing))
            raise BookingValidationError(MISSING_FIELDS_DETAIL, required=list(REQUIRED_FIELDS))

        with self._lock:
            existing = next((b for b in self._bookings if b.occupies(hall_type, date)), None)
            if existing is not None:
                logger.info(
                    "booking_conflict hall_type=%s date=%s existing_id=%s",
                    hall_type,
                    date,
                    existing.id,
                )
                raise BookingConflictError(HALL_ALREADY_BOOKED_DETAIL, existing_booking=existing)

            booking = Booking(
                id=self._next_id,
                hall_type=hall_type,
                date=date,
                customer_name=customer_name,
                customer_email=customer_email,
                customer_phone=customer_phone,
            )
            self._next_id += 1
            self._bookings.append(booking)

        logger.info("booking_created id=%s hall_type=%s date=%s", booking.id, hall_type, date)
        return booking

    def delete(self, booking_id: int | str) -> Booking:
        target_id = parse_booking_id(booking_id)
        with self._lock:
            for index, booking in enumerate(self._bookings):
                if booking.id == target_id:
                    del self._bookings[index]
                    break
            else:
                raise BookingNotFoundError()

        logger.info("booking_deleted id=%s", target_id)
        return booking

    def list_by_hall(self, hall_type: str) -> list[Booking]:
        wanted = hall_type.casefold()
        with self._lock:
            return [b for b in self._bookings if b.hall_type.casefold() == wanted]

    def list_by_date(self, date: str) -> list[Booking]:
        with self._lock:
            return [b for b in self._bookings if b.date == date]

    def count(self) -> int:
        with self._lock:
            return len(self._bookings)
