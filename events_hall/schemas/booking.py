from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class BookingCreateRequest(BaseModel):
    hall_type: str | None = None
    date: str | None = None
    customer_name: str | None = None
    customer_email: str | None = None
    customer_phone: str | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True, "coerce_numbers_to_str": True}


class BookingResponse(BaseModel):
    id: int
    hall_type: str
    date: str
    customer_name: str
    customer_email: str
    customer_phone: str
    created_at: str
    status: str

    model_config = {"from_attributes": True, "alias_generator": to_camel, "populate_by_name": True}


class BookingMessageResponse(BaseModel):
    message: str
    booking: BookingResponse
