import uvicorn

from events_hall.core.config import settings


def run() -> None:
    uvicorn.run(
        "events_hall.main:app",
        host=settings.app_host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
