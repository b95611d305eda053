"""Tests for logging configuration."""

import logging

import pytest

from yada.app_logging import configure_logging
from yada.config import Settings


@pytest.fixture
def yada_logger():
    logger = logging.getLogger("yada")
    logger.handlers.clear()
    yield logger
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def test_configure_logging_idempotent(yada_logger: logging.Logger) -> None:
    configure_logging(Settings())
    first_count = len(yada_logger.handlers)

    configure_logging(Settings(log_level="debug"))
    second_count = len(yada_logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert yada_logger.level == logging.DEBUG
    assert yada_logger.propagate is False


def test_configure_logging_applies_format(yada_logger: logging.Logger) -> None:
    configure_logging(Settings(log_format="%(name)s | %(message)s"))
    record = logging.LogRecord(
        "yada.cli", logging.INFO, __file__, 1, "Started", None, None
    )

    formatted = yada_logger.handlers[0].format(record)

    assert formatted == "yada.cli | Started"
