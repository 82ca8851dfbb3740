"""Tests for logging configuration."""

import logging

from fastapi.testclient import TestClient

from calorie_tracker.api.app import create_app
from calorie_tracker.app_logging import configure_logging


def test_configure_logging_adds_one_handler_and_updates_level() -> None:
    logger = logging.getLogger("calorie_tracker")
    logger.handlers.clear()

    configure_logging()
    configure_logging("debug")

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_create_app_applies_configured_log_level(container) -> None:
    container.settings = container.settings.model_copy(update={"log_level": "WARNING"})

    TestClient(create_app(container)).get("/health")

    assert logging.getLogger("calorie_tracker").level == logging.WARNING
