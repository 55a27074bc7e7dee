from pydantic import BaseModel


class BookDateRequest(BaseModel):
    date: str | None = None

    model_config = {"coerce_numbers_to_str": True}


class BookedDateResponse(BaseModel):
    message: str
    date: str
