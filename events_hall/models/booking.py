from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum


class BookingStatus(str, Enum):
    CONFIRMED = "confirmed"


def utc_timestamp() -> str:
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class Booking:
    id: int
    hall_type: str
    date: str
    customer_name: str
    customer_email: str
    customer_phone: str
    created_at: str = field(default_factory=utc_timestamp)
    status: str = BookingStatus.CONFIRMED.value

    def occupies(self, hall_type: str, date: str) -> bool:
        return self.hall_type == hall_type and self.date == date
