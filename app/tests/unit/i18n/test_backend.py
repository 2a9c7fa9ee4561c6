"""Tests for the resolution engine in polyglot.i18n.backend."""

import pytest

from polyglot.i18n import (
    Found,
    InMemoryBackend,
    InvalidLocale,
    InvalidPluralizationData,
    Missing,
    MissingInterpolationArgument,
    ref,
)


@pytest.mark.unit
class TestTranslate:
    """Tests for Backend.translate()."""

    def test_leaf_translation(self, backend):
        """A stored string is returned as found content."""
        assert backend.translate("en", "farewell") == Found("Goodbye")

    def test_interpolation(self, backend):
        """Placeholders are filled from the options."""
        outcome = backend.translate("en", "greeting", {"name": "Ada"})
        assert outcome.unwrap() == "Hello Ada"

    def test_other_locale(self, backend):
        """Lookups are scoped to the requested locale."""
        outcome = backend.translate("fr", "greeting", {"name": "Ada"})
        assert outcome.unwrap() == "Bonjour Ada"

    def test_missing_key_is_missing_outcome(self, backend):
        """A miss is returned, not raised."""
        outcome = backend.translate("en", "nope")
        assert outcome == Missing("en", "nope")
        assert str(outcome.to_error()) == "translation missing: en.nope"

    def test_scope_prefixes_key(self, backend):
        """scope is prepended to the key."""
        assert backend.translate("en", "title", {"scope": "users"}).unwrap() == "Users"
        assert backend.translate("en", "title", {"scope": ["users"]}).unwrap() == "Users"

    def test_key_as_segment_list(self, backend):
        """Keys may be given as segment lists."""
        assert backend.translate("en", ["users", "title"]).unwrap() == "Users"

    def test_custom_separator(self, backend):
        """separator changes how the key is split."""
        outcome = backend.translate("en", "users|title", {"separator": "|"})
        assert outcome.unwrap() == "Users"

    @pytest.mark.parametrize("locale", [None, ""])
    def test_empty_locale_raises(self, backend, locale):
        """A missing locale is a programming error."""
        with pytest.raises(InvalidLocale):
            backend.translate(locale, "farewell")

    def test_missing_interpolation_argument_raises(self, backend):
        """A placeholder without a value raises once interpolation runs."""
        with pytest.raises(MissingInterpolationArgument):
            backend.translate("en", "greeting", {"other": "x"})

    def test_no_options_skips_interpolation(self, backend):
        """Content is returned raw when no values are supplied."""
        assert backend.translate("en", "greeting").unwrap() == "Hello %{name}"
        assert backend.translate("en", "escaped").unwrap() == "literally %%{name}"

    def test_escaped_placeholder_with_values(self, backend):
        """%%{name} renders literally when interpolating."""
        outcome = backend.translate("en", "escaped", {"name": "Ada"})
        assert outcome.unwrap() == "literally %{name}"

    def test_namespace_lookup_returns_copy(self, backend):
        """Mutating a returned mapping never changes the store."""
        content = backend.translate("en", "users").unwrap()
        assert content == {"title": "Users", "empty": "No users yet"}

        content["title"] = "Changed"
        assert backend.translate("en", "users.title").unwrap() == "Users"

    def test_none_key_without_default_is_missing(self, backend):
        """No key and no default resolves to Missing."""
        assert backend.translate("en", None).is_found is False

    def test_none_key_with_default(self, backend):
        """With no key the default is the content."""
        assert backend.translate("en", None, {"default": "Fallback"}).unwrap() == "Fallback"


@pytest.mark.unit
class TestDefaults:
    """Tests for default handling."""

    def test_string_default(self, backend):
        """A literal default is used on a miss."""
        outcome = backend.translate("en", "nope", {"default": "Fallback"})
        assert outcome.unwrap() == "Fallback"

    def test_default_ignored_when_found(self, backend):
        """A default never overrides stored content."""
        outcome = backend.translate("en", "farewell", {"default": "Fallback"})
        assert outcome.unwrap() == "Goodbye"

    def test_default_list_first_resolvable_wins(self, backend):
        """Candidates are tried in order."""
        outcome = backend.translate(
            "en", "nope", {"default": [ref("also.missing"), ref("farewell"), "last"]}
        )
        assert outcome.unwrap() == "Goodbye"

    def test_default_list_falls_through_to_literal(self, backend):
        """A literal after unresolvable refs is used."""
        outcome = backend.translate(
            "en", "nope", {"default": [ref("also.missing"), "literal"]}
        )
        assert outcome.unwrap() == "literal"

    def test_default_list_all_unresolvable(self, backend):
        """An exhausted default list is Missing for the requested key."""
        outcome = backend.translate(
            "en", "nope", {"default": [ref("a.missing"), ref("b.missing")]}
        )
        assert outcome == Missing("en", "nope")

    def test_default_ref_is_scoped(self, backend):
        """A symbolic default is resolved within the same scope."""
        outcome = backend.translate(
            "en", "nope", {"scope": "users", "default": ref("title")}
        )
        assert outcome.unwrap() == "Users"

    def test_default_is_interpolated(self, backend):
        """Placeholders in a default are filled."""
        outcome = backend.translate(
            "en", "nope", {"default": "Hi %{name}", "name": "Ada"}
        )
        assert outcome.unwrap() == "Hi Ada"

    def test_default_chain_does_not_recurse(self, backend):
        """A missing default ref does not fall back into the same default list."""
        outcome = backend.translate("en", "nope", {"default": [ref("nope")]})
        assert outcome.is_found is False

    def test_default_does_not_mutate_options(self, backend):
        """Caller options are left intact."""
        options = {"default": "Fallback", "name": "Ada"}
        backend.translate("en", "nope", options)
        assert options == {"default": "Fallback", "name": "Ada"}


@pytest.mark.unit
class TestResolve:
    """Tests for symbolic references and computed subjects."""

    def test_stored_symbolic_ref(self, backend):
        """A stored SymbolicRef resolves to its target."""
        assert backend.translate("en", "title").unwrap() == "Goodbye"

    def test_symbolic_ref_mid_path(self, empty_backend):
        """A SymbolicRef met while walking a key is followed."""
        empty_backend.store_translations(
            "en", {"people": ref("users"), "users": {"title": "Users"}}
        )
        assert empty_backend.translate("en", "people.title").unwrap() == "Users"

    def test_unresolvable_stored_ref_is_missing(self, empty_backend):
        """A dangling SymbolicRef yields Missing, not an error."""
        empty_backend.store_translations("en", {"dangling": ref("nowhere")})
        assert empty_backend.translate("en", "dangling").is_found is False

    def test_computed_subject(self, empty_backend):
        """A stored callable is called with the key and options."""
        empty_backend.store_translations(
            "en", {"dynamic": lambda key, options: f"value for {key}"}
        )
        assert empty_backend.translate("en", "dynamic").unwrap() == "value for dynamic"

    def test_computed_subject_uses_object_option(self, empty_backend):
        """The object option replaces the key as the callable's target."""
        empty_backend.store_translations(
            "en", {"describe": lambda obj, options: f"object {obj}"}
        )
        outcome = empty_backend.translate("en", "describe", {"object": "thing"})
        assert outcome.unwrap() == "object thing"

    def test_computed_returning_ref_is_resolved(self, backend):
        """A callable's result is resolved in turn."""
        backend.store_translations("en", {"pointer": lambda key, options: ref("farewell")})
        assert backend.translate("en", "pointer").unwrap() == "Goodbye"

    def test_computed_default(self, backend):
        """A callable default is resolved like stored content."""
        outcome = backend.translate(
            "en", "nope", {"default": lambda key, options: f"no {key}"}
        )
        assert outcome.unwrap() == "no nope"

    def test_resolve_false_returns_raw_subject(self, empty_backend):
        """resolve=False skips calling computed subjects."""

        def fn(key, options):
            return "called"

        empty_backend.store_translations("en", {"dynamic": fn})
        outcome = empty_backend.translate("en", "dynamic", {"resolve": False})
        assert outcome.unwrap() is fn

    def test_computed_returning_none_is_missing(self, empty_backend):
        """A callable returning None counts as a miss."""
        empty_backend.store_translations("en", {"void": lambda key, options: None})
        assert empty_backend.translate("en", "void").is_found is False


@pytest.mark.unit
class TestPluralization:
    """Tests for count-driven pluralization."""

    @pytest.mark.parametrize(
        "count, expected",
        [(0, "No messages"), (1, "One message"), (2, "2 messages"), (10, "10 messages")],
    )
    def test_inbox_forms(self, backend, count, expected):
        """count selects zero, one or other."""
        assert backend.translate("en", "inbox", {"count": count}).unwrap() == expected

    def test_zero_falls_back_to_other(self, backend):
        """Without a zero form, 0 uses other."""
        assert backend.translate("en", "apples", {"count": 0}).unwrap() == "0 apples"

    def test_missing_form_raises(self, backend):
        """A plural entry without the selected form is invalid."""
        with pytest.raises(InvalidPluralizationData) as exc_info:
            backend.translate("en", "broken_plural", {"count": 2})
        assert exc_info.value.count == 2

    def test_count_on_text_is_interpolated_only(self, backend):
        """Non-mapping content is not pluralized."""
        outcome = backend.translate("en", "greeting", {"count": 2, "name": "Ada"})
        assert outcome.unwrap() == "Hello Ada"

    def test_pluralized_default(self, backend):
        """A mapping default is pluralized."""
        outcome = backend.translate(
            "en", "nope", {"count": 1, "default": {"one": "a thing", "other": "things"}}
        )
        assert outcome.unwrap() == "a thing"

    def test_pluralize_passes_through_non_mappings(self, backend):
        """pluralize() leaves text untouched."""
        assert backend.pluralize("en", "text", 3) == "text"

    def test_pluralize_without_count(self, backend):
        """pluralize() with no count returns the entry."""
        entry = {"one": "a", "other": "b"}
        assert backend.pluralize("en", entry, None) is entry


@pytest.mark.unit
class TestExists:
    """Tests for Backend.exists()."""

    def test_exists_for_stored_key(self, backend):
        """Stored keys exist."""
        assert backend.exists("en", "greeting") is True
        assert backend.exists("en", "users.title") is True

    def test_exists_for_missing_key(self, backend):
        """Unknown keys and locales do not exist."""
        assert backend.exists("en", "nope") is False
        assert backend.exists("de", "greeting") is False


@pytest.mark.unit
class TestBaseBackend:
    """Tests for the Backend storage contract."""

    def test_reload_entry_default_hook(self):
        """The default reload_entry hook reports success."""
        assert InMemoryBackend().reload_entry("en", "greeting") is True
