"""Shared pytest fixtures."""

import pytest

from calorie_ledger.utils.logging_config import reset_logging


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Drop handlers installed by setup_logging so they do not outlive a test."""
    yield
    reset_logging()
