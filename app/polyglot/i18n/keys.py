"""Key normalization.

Turns a (locale, key, scope, separator) combination into the ordered list of
path segments used for lookups, or into one flat string used as a cache key.
"""

from typing import Any, List, Optional

DEFAULT_SEPARATOR = "."
FLATTEN_SEPARATOR = "."
SEPARATOR_ESCAPE_CHAR = "\x01"


def normalize_key(key: Any, separator: str = DEFAULT_SEPARATOR) -> List[str]:
    """Split one key component into its non-empty segments.

    Sequences are flattened, everything else is converted to a string and
    split on ``separator``. ``None`` yields no segments.
    """
    if key is None:
        return []
    if isinstance(key, (list, tuple)):
        segments: List[str] = []
        for part in key:
            segments.extend(normalize_key(part, separator))
        return segments
    return [segment for segment in str(key).split(separator) if segment]


def normalize_keys(
    locale: Any,
    key: Any,
    scope: Any = None,
    separator: Optional[str] = None,
) -> List[str]:
    """Build the ordered segment path ``locale + scope + key``.

    Args:
        locale: Locale identifier.
        key: Dotted key string, or a sequence of segments.
        scope: Optional path prefix (dotted string or sequence).
        separator: Segment separator (default: ".").

    Returns:
        List of path segments.
    """
    separator = separator or DEFAULT_SEPARATOR
    keys: List[str] = []
    keys.extend(normalize_key(locale, separator))
    keys.extend(normalize_key(scope, separator))
    keys.extend(normalize_key(key, separator))
    return keys


def normalize_flat_keys(
    locale: Any,
    key: Any,
    scope: Any = None,
    separator: Optional[str] = None,
) -> str:
    """Build the canonical flat key for a (locale, key, scope) combination.

    Segments are always joined with ``.``; a ``.`` inside a segment (possible
    with a custom separator) is escaped so distinct paths never collide.

    Example:
        >>> normalize_flat_keys("en", "b", ["a"])
        'en.a.b'
    """
    segments = normalize_keys(locale, key, scope, separator)
    return FLATTEN_SEPARATOR.join(
        segment.replace(FLATTEN_SEPARATOR, SEPARATOR_ESCAPE_CHAR)
        for segment in segments
    )
