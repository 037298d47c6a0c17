"""Test telemetry module."""

import logging

import pytest
import structlog
from string_enum.telemetry import configure_logging, get_logger


@pytest.fixture
def restore_logging():
    """Restore logging configuration after the test."""
    config = structlog.get_config()
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.configure(**config)
    root.handlers[:] = handlers
    root.setLevel(level)


def test_get_logger():
    """Test get_logger."""
    # Test with no arguments
    logger = get_logger()
    assert isinstance(logger.bind(), structlog.stdlib.BoundLogger)

    # Test with a name
    logger = get_logger("test")
    assert isinstance(logger.bind(), structlog.stdlib.BoundLogger)
    assert logger.bind().name == "test"


@pytest.mark.usefixtures("restore_logging")
def test_configure_logging():
    """Test configure_logging."""
    configure_logging("log", verbose=True)
    assert structlog.is_configured()
    assert isinstance(
        structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer
    )
    assert logging.getLogger().level == logging.DEBUG

    configure_logging("report")
    assert isinstance(
        structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer
    )
    assert logging.getLogger().level == logging.INFO
