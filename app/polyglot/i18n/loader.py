"""Translation file loading.

Defines the contract for reading translation files and provides YAML and
Python implementations. A translation file yields a mapping with locales as
top-level keys:

    en:
      greeting: "Hello %{name}"
      title: !ref greeting
"""

from abc import ABC, abstractmethod
from pathlib import Path
import runpy
from typing import Any, Dict, Iterable, List, Mapping

import structlog
import yaml

from polyglot.i18n.errors import InvalidLocaleData, UnknownFileType
from polyglot.i18n.models import SymbolicRef, ref

logger = structlog.get_logger().bind(component="i18n.loader")


class TranslationYAMLLoader(yaml.SafeLoader):
    """SafeLoader understanding the ``!ref`` tag for symbolic references."""


def _construct_ref(loader: yaml.SafeLoader, node: yaml.Node) -> SymbolicRef:
    if isinstance(node, yaml.SequenceNode):
        return ref(loader.construct_sequence(node))
    return ref(loader.construct_scalar(node))


TranslationYAMLLoader.add_constructor("!ref", _construct_ref)


class TranslationLoader(ABC):
    """Abstract base for translation file loaders.

    Implementations turn one file into a mapping of locale -> translations.
    """

    extensions: tuple = ()

    @abstractmethod
    def load(self, filename: Path) -> Any:
        """Read a translation file.

        Args:
            filename: Path to the file.

        Returns:
            The parsed document (expected to be a mapping).

        Raises:
            InvalidLocaleData: If the file can not be read or parsed.
        """
        pass


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML translation files (.yml, .yaml)."""

    extensions = ("yml", "yaml")

    def load(self, filename: Path) -> Any:
        try:
            with open(filename, "r", encoding="utf-8") as f:
                return yaml.load(f, Loader=TranslationYAMLLoader)
        except (yaml.YAMLError, OSError, UnicodeDecodeError) as e:
            logger.error("yaml_parse_error", file=str(filename), error=str(e))
            raise InvalidLocaleData(str(filename), repr(e)) from e


class PythonTranslationLoader(TranslationLoader):
    """Loader for Python translation files (.py).

    The file is executed and must bind a module-level ``translations``
    mapping.
    """

    extensions = ("py",)

    def load(self, filename: Path) -> Any:
        try:
            namespace = runpy.run_path(str(filename))
        except OSError as e:
            logger.error("python_load_error", file=str(filename), error=str(e))
            raise InvalidLocaleData(str(filename), repr(e)) from e
        if "translations" not in namespace:
            raise InvalidLocaleData(
                str(filename), "expects it to define `translations`, but does not"
            )
        return namespace["translations"]


LOADERS: Dict[str, TranslationLoader] = {}
for _loader in (YAMLTranslationLoader(), PythonTranslationLoader()):
    for _extension in _loader.extensions:
        LOADERS[_extension] = _loader


def load_file(filename: Any) -> Mapping[str, Any]:
    """Load one translation file, dispatching on its extension.

    Args:
        filename: Path to a .yml, .yaml or .py file.

    Returns:
        Mapping of locale -> nested translation data.

    Raises:
        UnknownFileType: If the extension has no loader.
        InvalidLocaleData: If the file does not yield a mapping.
    """
    path = Path(filename)
    file_type = path.suffix.lstrip(".").lower()
    loader = LOADERS.get(file_type)
    if loader is None:
        raise UnknownFileType(file_type, str(path))

    data = loader.load(path)
    if not isinstance(data, Mapping):
        logger.warning("invalid_translation_file", file=str(path), expected="dict")
        raise InvalidLocaleData(
            str(path), "expects it to return a mapping, but does not"
        )

    logger.info("loaded_translation_file", file=str(path), locale_count=len(data))
    return data


def expand_load_path(entries: Iterable[Any]) -> List[Path]:
    """Expand a load path into translation files.

    Directory entries contribute every supported file they contain, sorted by
    name; file entries are kept as given.
    """
    files: List[Path] = []
    for entry in entries:
        path = Path(entry)
        if path.is_dir():
            files.extend(
                sorted(
                    child
                    for child in path.iterdir()
                    if child.is_file() and child.suffix.lstrip(".").lower() in LOADERS
                )
            )
        else:
            files.append(path)
    return files
