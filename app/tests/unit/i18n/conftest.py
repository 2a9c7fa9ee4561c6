"""Feature-level fixtures for translation engine tests.

Provides pre-filled backends and temporary translation files.
"""

import pytest
import yaml

from polyglot.i18n import InMemoryBackend, Translator
from tests.factories.i18n import (
    make_backend,
    make_en_translations,
    make_fr_translations,
    make_memoized_backend,
)


@pytest.fixture
def en_translations():
    """English translation tree."""
    return make_en_translations()


@pytest.fixture
def backend():
    """InMemoryBackend holding English and French translations."""
    return make_backend()


@pytest.fixture
def memoized_backend():
    """MemoizedInMemoryBackend holding English and French translations."""
    return make_memoized_backend()


@pytest.fixture
def empty_backend():
    """InMemoryBackend with no translations."""
    return InMemoryBackend()


@pytest.fixture
def translator(backend):
    """Translator raising on missing translations, defaulting to English."""
    return Translator(backend, default_locale="en")


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create a temporary directory with sample translation files.

    Returns a directory structure like:
    - app.en.yml
    - app.fr.yaml
    - extra.py
    - notes.txt (ignored when expanding the directory)
    """
    with open(tmp_path / "app.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(
            {"en": {"greeting": "Hello %{name}", "users": {"title": "Users"}}},
            f,
            allow_unicode=True,
        )

    with open(tmp_path / "app.fr.yaml", "w", encoding="utf-8") as f:
        yaml.dump(
            {"fr": {"greeting": "Bonjour %{name}", "users": {"title": "Utilisateurs"}}},
            f,
            allow_unicode=True,
        )

    (tmp_path / "extra.py").write_text(
        'translations = {"en": {"extra": {"answer": "forty-two"}}}\n',
        encoding="utf-8",
    )
    (tmp_path / "notes.txt").write_text("not a translation file", encoding="utf-8")

    return tmp_path


@pytest.fixture
def fr_translations():
    """French translation tree."""
    return make_fr_translations()
