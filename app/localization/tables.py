"""String tables mapping lookup names to templates.

Defines the lookup contract used by the formatter and adapters for the usual
sources of templates: an in-memory mapping, a single YAML file, an Apple
``.xcstrings`` catalog or a ``gettext`` translations object.
"""

import gettext
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

import structlog

logger = structlog.get_logger()


class StringTable(ABC):
    """Read-only lookup of templates by name.

    Implementations must not change once constructed so that one table can be
    shared by any number of callers.
    """

    @abstractmethod
    def lookup(self, name: str) -> Optional[str]:
        """Look up the template for a name.

        Args:
            name: Lookup name (e.g., "pointsEarned").

        Returns:
            Template string, or None if the table has no entry.
        """
        pass

    def names(self) -> Optional[List[str]]:
        """List all names with a template.

        Returns:
            Sorted list of names, or None if the table cannot enumerate them.
        """
        return None


class MappingStringTable(StringTable):
    """String table backed by a ``name -> template`` mapping.

    Attributes:
        source: Where the templates came from (for logging).
    """

    def __init__(self, messages: Optional[Mapping[str, Any]] = None, source: str = ""):
        self._messages: Dict[str, str] = {
            name: template
            for name, template in (messages or {}).items()
            if isinstance(template, str)
        }
        self.source = source

    def __len__(self) -> int:
        return len(self._messages)

    def lookup(self, name: str) -> Optional[str]:
        return self._messages.get(name)

    def names(self) -> List[str]:
        return sorted(self._messages)

    @classmethod
    def from_yaml(cls, path: Path) -> "MappingStringTable":
        """Read a flat YAML mapping of names to templates.

        Entries whose value is not a string are skipped.

        Args:
            path: Path to the YAML file.

        Returns:
            MappingStringTable with the file's templates.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not a YAML mapping.
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"String file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            logger.error("invalid_yaml_format", file=str(path), expected="dict")
            raise ValueError(f"String file must contain a mapping: {path}")

        for name, template in data.items():
            if not isinstance(template, str):
                logger.warning(
                    "invalid_template_format",
                    file=str(path),
                    name=str(name),
                    expected="str",
                )

        table = cls({str(name): value for name, value in data.items()}, source=str(path))
        logger.info("loaded_string_table", file=str(path), template_count=len(table))
        return table

    @classmethod
    def from_strings_catalog(cls, path: Path, language: str = "en") -> "MappingStringTable":
        """Read one language from an Xcode ``.xcstrings`` catalog.

        Expected format:
        {
          "sourceLanguage": "en",
          "strings": {
            "pointsEarned": {
              "localizations": {
                "en": {"stringUnit": {"state": "translated", "value": "..."}}
              }
            }
          }
        }

        Names without a string unit for the language are left out, as are
        plural and device variations.

        Args:
            path: Path to the catalog file.
            language: Language code to read (e.g., "en", "pt-BR").

        Returns:
            MappingStringTable with the language's templates.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not a valid catalog.
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"String file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("catalog_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

        strings = data.get("strings") if isinstance(data, dict) else None
        if not isinstance(strings, dict):
            logger.error("invalid_catalog_format", file=str(path), expected="strings")
            raise ValueError(f"String catalog has no 'strings' mapping: {path}")

        messages = {}
        for name, entry in strings.items():
            localizations = entry.get("localizations") if isinstance(entry, dict) else None
            if not isinstance(localizations, dict):
                continue
            localization = localizations.get(language)
            unit = localization.get("stringUnit") if isinstance(localization, dict) else None
            if isinstance(unit, dict) and isinstance(unit.get("value"), str):
                messages[name] = unit["value"]

        table = cls(messages, source=str(path))
        logger.info(
            "loaded_string_table",
            file=str(path),
            language=language,
            template_count=len(table),
        )
        return table


class GettextStringTable(StringTable):
    """String table backed by a ``gettext`` translations object.

    gettext returns the message id unchanged when it has no translation, so
    an unchanged result counts as a missing entry.
    """

    def __init__(self, translations: gettext.NullTranslations):
        self.translations = translations

    def lookup(self, name: str) -> Optional[str]:
        template = self.translations.gettext(name)
        if template == name:
            return None
        return template
