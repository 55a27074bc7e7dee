import io
import logging

from events_hall.core.logging import build_handler
from events_hall.core.request_context import request_id_ctx_var


def _emit(message: str) -> str:
    stream = io.StringIO()
    logger = logging.getLogger("events_hall.test_logging")
    logger.propagate = False
    logger.setLevel(logging.INFO)
    handler = build_handler(stream)
    logger.addHandler(handler)
    try:
        logger.info(message)
    finally:
        logger.removeHandler(handler)
    return stream.getvalue()


def test_records_carry_current_request_id():
    token = request_id_ctx_var.set("req-42")
    try:
        line = _emit("booking_created id=1")
    finally:
        request_id_ctx_var.reset(token)

    assert "request_id=req-42" in line
    assert "events_hall.test_logging booking_created id=1" in line


def test_records_outside_a_request_use_placeholder():
    assert "request_id=- " in _emit("startup")
