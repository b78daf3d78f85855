"""
Run the API with uvicorn using HOST, PORT and LOG_LEVEL from settings:

  python -m app.server
"""

import logging

import uvicorn

from app.core.config import get_settings
from app.core.logging_config import configure_logging


def run() -> None:  # pragma: no cover - exercised in deployment
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    logging.getLogger(__name__).info(
        "Fashion API listening on http://%s:%s", settings.HOST, settings.PORT
    )
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    run()
