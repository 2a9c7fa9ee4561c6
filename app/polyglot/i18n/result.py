"""Resolution outcomes.

Every layer of the engine returns either ``Found`` or ``Missing`` instead of
raising for a missing translation. Callers match on the outcome and decide
whether to try the next candidate or pass the miss upward.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Union

from polyglot.i18n.errors import MissingTranslation


@dataclass(frozen=True)
class Found:
    """Successful resolution.

    Attributes:
        content: Resolved content (never None).
    """

    content: Any

    @property
    def is_found(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Return the resolved content."""
        return self.content


@dataclass(frozen=True)
class Missing:
    """No content could be resolved.

    Attributes:
        locale: Requested locale.
        key: Requested key (or format, for localization).
        options: Options in effect when the miss happened.
    """

    locale: Any
    key: Any
    options: Dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def is_found(self) -> bool:
        return False

    def to_error(self) -> MissingTranslation:
        """Build the exception reported at the call boundary."""
        return MissingTranslation(self.locale, self.key, self.options)

    def unwrap(self) -> Any:
        """Raise MissingTranslation for this outcome."""
        raise self.to_error()


Resolution = Union[Found, Missing]


def found_or_missing(
    content: Any, locale: Any, key: Any, options: Dict[str, Any]
) -> Resolution:
    """Wrap content as Found, treating None as Missing."""
    if content is None:
        return Missing(locale, key, dict(options))
    return Found(content)
