"""Matchmaker API server entry point"""

import logging

import uvicorn

from .app import create_app
from .core.config import get_settings

logger = logging.getLogger(__name__)

app = create_app()


def run() -> None:
    settings = get_settings()
    logger.info(f"Listening on {settings.host}:{settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
