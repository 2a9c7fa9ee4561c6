"""String interpolation for translated templates.

Supported placeholders:
    %{name}       replaced by the value of ``name``
    %<name>.2f    replaced by the value formatted with a printf-style spec
    %%            a literal ``%``, so ``%%{name}`` renders as ``%{name}``

    interpolate("file %{file} opened by %%{user}", {"file": "test.txt"})
    # => "file test.txt opened by %{user}"
"""

import re
from typing import Any, Mapping, Set

from polyglot.i18n.errors import MissingInterpolationArgument, ReservedInterpolationKey
from polyglot.i18n.models import RESERVED_KEYS

INTERPOLATION_PATTERN = re.compile(
    r"%%"
    r"|%\{(?P<name>\w+)\}"
    r"|%<(?P<formatted>\w+)>(?P<spec>[-+ #0]*\d*(?:\.\d+)?[diouxXeEfFgGcrs])"
)

RESERVED_KEYS_PATTERN = re.compile(
    r"(?<!%)%\{(" + "|".join(sorted(RESERVED_KEYS)) + r")\}"
)


def get_interpolation_keys(content: Any) -> Set[str]:
    """Collect the placeholder names used in a template.

    Escaped placeholders are ignored; non-text content has no keys.
    """
    if not isinstance(content, str):
        return set()
    names = set()
    for match in INTERPOLATION_PATTERN.finditer(content):
        name = match.group("name") or match.group("formatted")
        if name:
            names.add(name)
    return names


def interpolate(string: str, values: Mapping[str, Any]) -> str:
    """Substitute placeholder values into a template.

    Args:
        string: Template text.
        values: Placeholder name -> value. Callable values are called with
            ``values`` and their result is substituted.

    Returns:
        Interpolated text.

    Raises:
        ReservedInterpolationKey: If the template uses a reserved option name.
        MissingInterpolationArgument: If a placeholder has no value.
    """
    reserved = RESERVED_KEYS_PATTERN.search(string)
    if reserved:
        raise ReservedInterpolationKey(reserved.group(1), string)

    def _replace(match: "re.Match[str]") -> str:
        if match.group(0) == "%%":
            return "%"
        name = match.group("name") or match.group("formatted")
        if name not in values:
            raise MissingInterpolationArgument(name, values, string)
        value = values[name]
        if callable(value):
            value = value(values)
        spec = match.group("spec")
        if spec:
            return f"%{spec}" % (value,)
        return str(value)

    return INTERPOLATION_PATTERN.sub(_replace, string)
