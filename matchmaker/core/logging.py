"""Logging configuration

One Rich handler on the root logger. Loggers under ``matchmaker`` follow
``settings.log_level``; everything else (uvicorn, asyncio) stays at
WARNING unless the app itself runs at DEBUG.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .config import Settings

APP_LOGGER = "matchmaker"

# uvicorn.access logs every request, including queue polling
_QUIET_LOGGERS = ("uvicorn.access",)


def _build_handler(settings: Settings) -> RichHandler:
    handler = RichHandler(
        console=Console(stderr=True, width=120),
        show_path=settings.log_level == "DEBUG",
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=settings.is_development,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="[%X]"))
    return handler


def setup_logging(settings: Settings) -> logging.Logger:
    """Install the Rich handler and set levels; returns the app logger."""
    level = getattr(logging, settings.log_level, logging.INFO)
    third_party = logging.DEBUG if level == logging.DEBUG else logging.WARNING

    # force=True: uvicorn configures the root logger before the app is built
    logging.basicConfig(level=third_party, handlers=[_build_handler(settings)], force=True)

    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(level)
    logging.getLogger("uvicorn.error").setLevel(min(level, logging.INFO))
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    app_logger.info(f"Logging: {settings.log_level} | Env: {settings.environment}")
    return app_logger
