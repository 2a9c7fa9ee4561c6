"""Resolution engine shared by all translation backends.

A backend only has to provide raw storage access (``lookup``,
``store_translations``, ``available_locales``). This base class turns a raw
lookup into content: it resolves symbolic references, computed subjects and
default chains, then applies pluralization and interpolation.

Missing translations are returned as ``Missing`` outcomes, never raised.
"""

from abc import ABC, abstractmethod
import copy
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional

from polyglot.i18n import loader
from polyglot.i18n.errors import InvalidLocale, InvalidPluralizationData
from polyglot.i18n.interpolation import get_interpolation_keys, interpolate
from polyglot.i18n.keys import DEFAULT_SEPARATOR
from polyglot.i18n.models import (
    Computed,
    Literal,
    SymbolicRef,
    TranslationRequest,
    to_subject,
)
from polyglot.i18n.result import Found, Missing, Resolution, found_or_missing
from polyglot.logging import get_module_logger

logger = get_module_logger()

LOCALIZED_DIRECTIVES = re.compile(r"%%|%[aAbBpP]")


class Backend(ABC):
    """Base class for translation backends.

    Attributes:
        load_path: Translation files read on ``load_translations()``.
        default_separator: Separator used when a call does not pass one.
    """

    def __init__(
        self,
        load_path: Optional[Iterable[Any]] = None,
        default_separator: str = DEFAULT_SEPARATOR,
    ):
        self.load_path = list(load_path or [])
        self.default_separator = default_separator

    # Storage contract

    @abstractmethod
    def lookup(
        self,
        locale: Any,
        key: Any,
        scope: Any = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Return the raw stored value for a key, or None when absent."""
        pass

    @abstractmethod
    def store_translations(
        self,
        locale: Any,
        data: Mapping[str, Any],
        options: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Store a nested mapping of translations for a locale."""
        pass

    @abstractmethod
    def available_locales(self) -> List[str]:
        """Return the locales this backend has translations for."""
        pass

    def reload(self) -> None:
        """Discard loaded state so it is rebuilt on next use."""

    def reload_entry(
        self, locale: Any, key: Any, options: Optional[Dict[str, Any]] = None
    ) -> bool:
        """Hook called after a single entry changed in the underlying store."""
        return True

    def exists(self, locale: Any, key: Any) -> bool:
        """Check whether a raw value is stored for a key."""
        return self.lookup(locale, key) is not None

    # Loading

    def load_translations(self, *filenames: Any) -> None:
        """Load translation files into this backend.

        Args:
            *filenames: Paths (or lists of paths) to load. Defaults to the
                backend's load_path.

        Raises:
            UnknownFileType: If a file extension is not supported.
            InvalidLocaleData: If a file does not yield a mapping.
        """
        files = _flatten(filenames) if filenames else _flatten(self.load_path)
        for filename in files:
            self.load_file(filename)

    def load_file(self, filename: Any) -> None:
        """Load one file and store each locale subtree it contains."""
        data = loader.load_file(filename)
        for locale, translations in data.items():
            self.store_translations(locale, translations or {})

    # Resolution

    def translate(
        self,
        locale: Any,
        key: Any,
        options: Optional[Dict[str, Any]] = None,
    ) -> Resolution:
        """Resolve a key into content.

        Args:
            locale: Locale identifier.
            key: Lookup key, or None when only a default is given.
            options: Caller options (scope, default, separator, resolve,
                object, count and interpolation values).

        Returns:
            Found with the final content, or Missing.

        Raises:
            InvalidLocale: If locale is empty.
            InvalidPluralizationData: If a plural entry lacks the needed key.
            MissingInterpolationArgument: If a placeholder has no value.
        """
        if not locale:
            raise InvalidLocale(locale)

        options = dict(options or {})
        request = TranslationRequest.build(
            locale, key, options, backend=type(self).__name__
        )

        if request.key is not None:
            request.unparsed_content = self.lookup(
                request.locale, request.key, request.scope, options
            )
            request.interpolation_keys = get_interpolation_keys(
                request.unparsed_content
            )

        if options and request.unparsed_content is None and request.default is not None:
            outcome = self.default(
                request.locale, request.key, request.default, options
            )
        else:
            subject_options = options
            if isinstance(request.unparsed_content, SymbolicRef):
                # Stored links name absolute keys
                subject_options = {**options, "scope": None}
            outcome = self.resolve(
                request.locale, request.key, request.unparsed_content, subject_options
            )

        if not outcome.is_found:
            logger.debug(
                "translation_missing",
                locale=str(request.locale),
                key=str(request.key),
                backend=request.backend,
            )
            return Missing(request.locale, request.key, options)

        content = outcome.content
        if isinstance(content, (dict, list)):
            content = copy.deepcopy(content)

        if request.count is not None:
            content = self.pluralize(request.locale, content, request.count)

        if request.interpolations:
            content = self.interpolate(request.locale, content, request.interpolations)

        request.content = content
        return Found(request.content)

    def default(
        self,
        locale: Any,
        obj: Any,
        subject: Any,
        options: Optional[Dict[str, Any]] = None,
    ) -> Resolution:
        """Resolve a default subject or the first resolvable one of a list.

        The ``default`` option is removed before resolving candidates so a
        candidate can not fall back into the same default chain.
        """
        options = {
            name: value
            for name, value in (options or {}).items()
            if name != "default"
        }
        if isinstance(subject, (list, tuple)):
            for item in subject:
                outcome = self.resolve(locale, obj, item, options)
                if outcome.is_found:
                    return outcome
            return Missing(locale, obj, options)
        return self.resolve(locale, obj, subject, options)

    def resolve(
        self,
        locale: Any,
        obj: Any,
        subject: Any,
        options: Optional[Dict[str, Any]] = None,
    ) -> Resolution:
        """Resolve a subject into content.

        Symbolic references are translated again with the same locale and
        options; a miss there is returned as Missing, not raised. Computed
        subjects are called with ``(object option or obj, options)`` and
        their result is resolved in turn. Anything else is content.
        """
        options = dict(options or {})
        if options.get("resolve") is False:
            return found_or_missing(subject, locale, obj, options)

        match to_subject(subject):
            case SymbolicRef(key=ref_key):
                return self.translate(locale, ref_key, options)
            case Computed(fn=fn):
                target = options.pop("object", None) or obj
                return self.resolve(locale, obj, fn(target, options), options)
            case Literal(value=value):
                return found_or_missing(value, locale, obj, options)

    def pluralize(self, locale: Any, entry: Any, count: Any) -> Any:
        """Pick the plural form of an entry for a count.

        - ``zero`` when count is 0 and the entry has a ``zero`` form
        - ``one`` when count is 1
        - ``other`` otherwise

        This is not CLDR pluralization; backends needing richer rules
        override this method.

        Raises:
            InvalidPluralizationData: If the entry lacks the selected form.
        """
        if not isinstance(entry, Mapping) or count is None:
            return entry

        if count == 0 and "zero" in entry:
            key = "zero"
        else:
            key = "one" if count == 1 else "other"
        if key not in entry:
            raise InvalidPluralizationData(entry, count)
        return entry[key]

    def interpolate(self, locale: Any, string: Any, values: Mapping[str, Any]) -> Any:
        """Interpolate values into text content; other content passes through."""
        if isinstance(string, str) and values:
            return interpolate(string, values)
        return string

    # Localization

    def localize(
        self,
        locale: Any,
        obj: Any,
        format: Any = "default",
        options: Optional[Dict[str, Any]] = None,
    ) -> Resolution:
        """Format a date, datetime or time with localized names.

        ``format`` is either a named format (a SymbolicRef, or a string with
        no ``%`` directive) looked up under ``date.formats`` or
        ``time.formats``, or a literal strftime format. Day names, month
        names and am/pm markers for ``%a %A %b %B %p %P`` come from the
        locale's ``date.*`` and ``time.*`` translations.

        Raises:
            TypeError: If obj has no strftime method.
        """
        if not hasattr(obj, "strftime"):
            raise TypeError(
                f"Object must be a date, datetime or time object. {obj!r} given."
            )

        options = dict(options or {})
        if isinstance(format, SymbolicRef) or (
            isinstance(format, str) and "%" not in format
        ):
            kind = "time" if hasattr(obj, "hour") else "date"
            format_key = f"{kind}.formats.{format}"
            outcome = self.translate(locale, format_key, {**options, "object": obj})
            if not outcome.is_found:
                return outcome
            format = outcome.content

        format = str(format)
        replacements: Dict[str, str] = {}
        for directive in {m.group(0) for m in LOCALIZED_DIRECTIVES.finditer(format)}:
            if directive == "%%":
                continue
            outcome = self._localized_directive(locale, obj, directive)
            if not outcome.is_found:
                return outcome
            replacements[directive] = str(outcome.content).replace("%", "%%")

        format = LOCALIZED_DIRECTIVES.sub(
            lambda match: replacements.get(match.group(0), match.group(0)), format
        )
        return Found(obj.strftime(format))

    def _localized_directive(self, locale: Any, obj: Any, directive: str) -> Resolution:
        if directive in ("%p", "%P"):
            if not hasattr(obj, "hour"):
                return Found("")
            marker = "am" if obj.hour < 12 else "pm"
            outcome = self.translate(locale, f"time.{marker}")
            if not outcome.is_found:
                return outcome
            text = str(outcome.content)
            return Found(text.upper() if directive == "%p" else text.lower())

        if directive in ("%a", "%A"):
            if not hasattr(obj, "weekday"):
                return Found("")
            key = "date.abbr_day_names" if directive == "%a" else "date.day_names"
            # Sunday first, as in the stored name arrays
            index = (obj.weekday() + 1) % 7
        else:
            if not hasattr(obj, "month"):
                return Found("")
            key = "date.abbr_month_names" if directive == "%b" else "date.month_names"
            index = obj.month

        outcome = self.translate(locale, key)
        if not outcome.is_found:
            return outcome
        names = outcome.content
        if (
            not isinstance(names, (list, tuple))
            or index >= len(names)
            or names[index] is None
        ):
            return Missing(locale, key)
        return Found(names[index])


def _flatten(items: Iterable[Any]) -> List[Any]:
    flat: List[Any] = []
    for item in items:
        if isinstance(item, (list, tuple)):
            flat.extend(_flatten(item))
        else:
            flat.append(item)
    return flat
