import pytest

from events_hall.core.exceptions import BookingValidationError
from events_hall.services.booked_dates_store import BookedDatesStore


def test_book_appends_without_duplicate_check():
    store = BookedDatesStore(seed=["2025-02-10"])

    store.book("2025-02-22")
    store.book("2025-02-22")

    assert store.list_all() == ["2025-02-10", "2025-02-22", "2025-02-22"]


@pytest.mark.parametrize("date", [None, ""])
def test_book_requires_date(date):
    store = BookedDatesStore()

    with pytest.raises(BookingValidationError) as exc_info:
        store.book(date)

    assert exc_info.value.message == "Date is required"
    assert store.list_all() == []
