"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_backend,
    make_en_translations,
    make_fr_translations,
    make_memoized_backend,
)

__all__ = [
    "make_backend",
    "make_en_translations",
    "make_fr_translations",
    "make_memoized_backend",
]
