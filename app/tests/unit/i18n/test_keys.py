"""Tests for polyglot.i18n.keys module."""

import pytest

from polyglot.i18n.keys import normalize_flat_keys, normalize_key, normalize_keys


@pytest.mark.unit
class TestNormalizeKey:
    """Tests for normalize_key()."""

    def test_splits_on_separator(self):
        """Dotted strings are split into segments."""
        assert normalize_key("a.b.c") == ["a", "b", "c"]

    def test_drops_empty_segments(self):
        """Leading, trailing and doubled separators yield no segments."""
        assert normalize_key(".a..b.") == ["a", "b"]

    def test_none_has_no_segments(self):
        """None yields an empty list."""
        assert normalize_key(None) == []

    def test_flattens_sequences(self):
        """Nested lists and tuples are flattened and split."""
        assert normalize_key(["a.b", ("c", ["d"])]) == ["a", "b", "c", "d"]

    def test_custom_separator(self):
        """Splitting follows the given separator."""
        assert normalize_key("a|b.c", "|") == ["a", "b.c"]

    def test_non_string_keys_are_stringified(self):
        """Numbers are converted to strings."""
        assert normalize_key(5) == ["5"]


@pytest.mark.unit
class TestNormalizeKeys:
    """Tests for normalize_keys()."""

    def test_locale_scope_key_order(self):
        """Segments are ordered locale, scope, key."""
        assert normalize_keys("en", "title", "users.admin") == [
            "en",
            "users",
            "admin",
            "title",
        ]

    def test_scope_as_list(self):
        """A list scope is flattened."""
        assert normalize_keys("en", "b", ["a"]) == ["en", "a", "b"]


@pytest.mark.unit
class TestNormalizeFlatKeys:
    """Tests for normalize_flat_keys()."""

    def test_scope_and_key_combine(self):
        """A scoped key flattens like the equivalent dotted key."""
        assert normalize_flat_keys("en", "b", ["a"]) == "en.a.b"
        assert normalize_flat_keys("en", "a.b") == "en.a.b"

    def test_custom_separator_joined_with_dot(self):
        """Flat keys always use the dot, whatever the separator."""
        assert normalize_flat_keys("en", "a|b", separator="|") == "en.a.b"

    def test_dots_inside_segments_do_not_collide(self):
        """A dot inside a segment is escaped rather than splitting it."""
        with_dot = normalize_flat_keys("en", "a.b|c", separator="|")
        split = normalize_flat_keys("en", "a|b|c", separator="|")
        assert with_dot != split
