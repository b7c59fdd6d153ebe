import uvicorn

from tasklist.config import get_settings


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "tasklist.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
