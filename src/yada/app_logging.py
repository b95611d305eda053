"""Logging configuration helpers."""

import logging

from yada.config import Settings

LOGGER_NAME = "yada"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach one stream handler to the ``yada`` logger.

    Calling again only refreshes the level and format from settings.
    """
    resolved = settings or Settings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved.log_level.upper())
    formatter = logging.Formatter(resolved.log_format)
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
    for handler in logger.handlers:
        handler.setFormatter(formatter)
    logger.propagate = False
    return logger
