from events_hall.models.booking import Booking, BookingStatus

__all__ = [
    "Booking",
    "BookingStatus",
]
