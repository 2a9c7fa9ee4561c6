"""Shared fixtures for the whole test suite."""

import pytest

from polyglot.configuration import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop the cached settings so environment changes take effect per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clean_i18n_env(monkeypatch):
    """Remove I18N_* variables inherited from the environment."""
    for name in (
        "I18N_DEFAULT_LOCALE",
        "I18N_LOAD_PATH",
        "I18N_DEFAULT_SEPARATOR",
        "I18N_MEMOIZE",
        "I18N_RAISE_ON_MISSING",
    ):
        monkeypatch.delenv(name, raising=False)
