"""Tests for logging setup."""

import logging

import pytest
import structlog

from shopcatalog.infrastructure.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


def test_configure_logging_sets_level() -> None:
    configure_logging("DEBUG", json=False)

    assert logging.getLogger().level == logging.DEBUG
    assert structlog.is_configured()


def test_unknown_level_falls_back_to_info() -> None:
    configure_logging("CHATTY", json=True)

    structlog.get_logger("shopcatalog.test").info("Product created", product_id="p-1")

    assert logging.getLogger().level == logging.INFO
