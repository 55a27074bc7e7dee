import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1]))

from events_hall.main import create_app
from events_hall.services.booked_dates_store import BookedDatesStore
from events_hall.services.booking_store import InMemoryBookingStore

BOOKING_PAYLOAD = {
    "hallType": "Grand",
    "date": "2025-03-01",
    "customerName": "A",
    "customerEmail": "a@x.com",
    "customerPhone": "123",
}


@pytest.fixture()
def booking_store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture()
def booked_dates_store() -> BookedDatesStore:
    return BookedDatesStore()


@pytest.fixture()
def client(booking_store, booked_dates_store) -> TestClient:
    app = create_app(booking_store=booking_store, booked_dates_store=booked_dates_store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def booking_payload() -> dict[str, str]:
    return dict(BOOKING_PAYLOAD)
