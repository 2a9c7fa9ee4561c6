"""Translation models for the i18n engine.

Defines the per-call translation request and the subject variants a stored
value or a default can take.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Set, Union

# Option names that steer resolution and never reach interpolation.
RESERVED_KEYS = frozenset(
    {
        "locale",
        "key",
        "scope",
        "default",
        "separator",
        "resolve",
        "object",
        "format",
        "backend",
        "context",
        "raise_on_missing",
    }
)


@dataclass(frozen=True)
class SymbolicRef:
    """Reference to another translation key, re-resolved on use.

    Attributes:
        key: Dotted key string or tuple of segments.
    """

    key: Any

    def __str__(self) -> str:
        if isinstance(self.key, tuple):
            return ".".join(str(part) for part in self.key)
        return str(self.key)


@dataclass(frozen=True)
class Computed:
    """Callable subject invoked as ``fn(obj, options)``."""

    fn: Callable[[Any, Dict[str, Any]], Any]


@dataclass(frozen=True)
class Literal:
    """Plain content returned as is."""

    value: Any


Subject = Union[SymbolicRef, Computed, Literal]


def ref(key: Any) -> SymbolicRef:
    """Build a SymbolicRef from a dotted string or a sequence of segments.

    Example:
        >>> translator.translate("title", default=[ref("fallback.title"), "Untitled"])
    """
    if isinstance(key, list):
        key = tuple(key)
    return SymbolicRef(key)


def to_subject(value: Any) -> Subject:
    """Classify a raw stored value or default into its subject variant."""
    if isinstance(value, (SymbolicRef, Computed, Literal)):
        return value
    if callable(value):
        return Computed(value)
    return Literal(value)


@dataclass
class TranslationRequest:
    """Parameters and intermediate state of one resolution.

    A request is built fresh for each translate call, filled in by the
    engine during that call and discarded afterwards.

    Attributes:
        locale: Locale identifier (required).
        key: Lookup key, or None when the caller supplies content directly.
        scope: Path prefix applied to the key before lookup.
        default: Fallback subject, or list of subjects, used on a lookup miss.
        backend: Name of the backend serving the request.
        context: Caller-supplied context, kept out of interpolation.
        interpolations: Placeholder values (all non-reserved options).
        unparsed_content: Raw value returned by the backend lookup.
        content: Final value after resolution, pluralization and interpolation.
        interpolation_keys: Placeholder names found in unparsed_content.
    """

    locale: Any
    key: Any = None
    scope: Any = None
    default: Any = None
    backend: Optional[str] = None
    context: Any = None
    interpolations: Dict[str, Any] = field(default_factory=dict)
    unparsed_content: Any = None
    content: Any = None
    interpolation_keys: Set[str] = field(default_factory=set)

    @classmethod
    def build(
        cls,
        locale: Any,
        key: Any,
        options: Optional[Mapping[str, Any]] = None,
        backend: Optional[str] = None,
    ) -> "TranslationRequest":
        """Create a request from caller options plus locale and key.

        Args:
            locale: Locale identifier.
            key: Lookup key (may be None).
            options: Caller options; reserved names become request fields,
                everything else becomes an interpolation value.
            backend: Name of the backend serving the request.

        Returns:
            New TranslationRequest.
        """
        options = dict(options or {})
        return cls(
            locale=locale,
            key=key,
            scope=options.get("scope"),
            default=options.get("default"),
            backend=backend,
            context=options.get("context"),
            interpolations={
                name: value
                for name, value in options.items()
                if name not in RESERVED_KEYS
            },
        )

    @property
    def count(self) -> Any:
        """Count interpolation value, which triggers pluralization."""
        return self.interpolations.get("count")
