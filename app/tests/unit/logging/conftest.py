"""Fixtures for polyglot.logging tests."""

import pytest

from polyglot.logging import configure_logging


@pytest.fixture(autouse=True)
def restore_test_logging():
    """Put back the silent test configuration after each test."""
    yield
    configure_logging()
