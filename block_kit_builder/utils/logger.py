import logging
import sys

import structlog

from block_kit_builder.services.settings.main import settings

PACKAGE_LOGGER = "block_kit_builder"


def _processors() -> list:
    """
    Processor chain applied to library events before they reach stdlib logging.
    Renders JSON if not in DEBUG mode, otherwise colored readable text.
    """
    if settings.DEBUG:
        return [
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    return [
        structlog.stdlib.filter_by_level,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.dict_tracebacks,
        structlog.processors.JSONRenderer(),
    ]


def setup_logger(level: int | None = None) -> logging.Logger:
    """
    Send library logs to stderr, for hosts that do not configure logging themselves.

    The library never calls this: without it events go wherever the host's stdlib
    logging config sends the `block_kit_builder` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if level is None:
        level = logging.DEBUG if settings.DEBUG else logging.INFO
    logger.setLevel(level)
    if not any(
        isinstance(h, logging.StreamHandler) and h.stream is sys.stderr
        for h in logger.handlers
    ):
        logger.addHandler(logging.StreamHandler(sys.stderr))
    return logger


def get_logger(name: str | None = None):
    """Get a structlog logger over the stdlib logger `name`, bound to the application name."""
    return structlog.wrap_logger(
        logging.getLogger(name or PACKAGE_LOGGER),
        processors=_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        app=settings.APP_NAME,
    )
