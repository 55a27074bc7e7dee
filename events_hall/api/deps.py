from fastapi import Request

from events_hall.services.booked_dates_store import BookedDatesStore
from events_hall.services.booking_store import BookingRepository


def get_booking_store(request: Request) -> BookingRepository:
    return request.app.state.booking_store


def get_booked_dates_store(request: Request) -> BookedDatesStore:
    return request.app.state.booked_dates_store
