import logging
import sys

from events_hall.core.config import settings
from events_hall.core.request_context import request_id_ctx_var

LOG_FORMAT = "%(asctime)s %(levelname)s request_id=%(request_id)s %(name)s %(message)s"

# observability_middleware writes its own access line per request
QUIETED_LOGGERS = {"uvicorn.access": logging.WARNING}


class RequestIdFilter(logging.Filter):
    """Stamp each record with the id of the request being served, or "-" outside one."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx_var.get()
        return True


def build_handler(stream=None) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout if stream is None else stream)
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler


def setup_logging(level: str | None = None) -> None:
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    root_logger.setLevel((level or settings.log_level).upper())
    root_logger.addHandler(build_handler())
    for name, logger_level in QUIETED_LOGGERS.items():
        logging.getLogger(name).setLevel(logger_level)
