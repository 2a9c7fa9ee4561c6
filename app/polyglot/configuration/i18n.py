"""Translation engine settings."""

import json
from typing import Annotated, Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from polyglot.configuration.base import ComponentSettings


class I18nSettings(ComponentSettings):
    """Configuration for the translation resolution engine.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used when a call does not name one (default: "en")
        I18N_LOAD_PATH: Translation files to load lazily, as a JSON list or a
            comma-separated string (default: none)
        I18N_DEFAULT_SEPARATOR: Key segment separator (default: ".")
        I18N_MEMOIZE: Wrap the storage backend with memoized lookups (default: True)
        I18N_RAISE_ON_MISSING: Raise MissingTranslation at the call boundary
            instead of returning None (default: True)

    Example:
        ```python
        from polyglot.configuration import get_settings

        settings = get_settings()

        if settings.i18n.memoize:
            # Build a memoized backend...
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale used when a call does not name one",
    )
    load_path: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        alias="I18N_LOAD_PATH",
        description="Translation files (.yml, .yaml, .py) loaded on first lookup",
    )
    default_separator: str = Field(
        default=".",
        alias="I18N_DEFAULT_SEPARATOR",
        description="Separator between key segments",
    )
    memoize: bool = Field(
        default=True,
        alias="I18N_MEMOIZE",
        description="Cache raw lookups per locale",
    )
    raise_on_missing: bool = Field(
        default=True,
        alias="I18N_RAISE_ON_MISSING",
        description="Raise on missing translations instead of returning None",
    )

    @field_validator("load_path", mode="before")
    @classmethod
    def _parse_load_path(cls, v: Optional[Any]) -> Any:
        """Parse I18N_LOAD_PATH from a JSON list or a comma-separated string."""
        if v is None:
            return []
        if isinstance(v, str):
            stripped = v.strip()
            if not stripped:
                return []
            if stripped.startswith("["):
                try:
                    return json.loads(stripped)
                except json.JSONDecodeError as e:
                    raise ValueError(f"I18N_LOAD_PATH is not valid JSON: {e}") from e
            return [part.strip() for part in stripped.split(",") if part.strip()]
        return v
