"""Factory functions for creating localization components.

Builds formatters from the application settings so callers do not need to
know where the string table comes from.
"""

from pathlib import Path
from typing import Optional

import structlog
from core.config import settings
from localization.formatter import LocalizationFormatter
from localization.tables import MappingStringTable, StringTable

logger = structlog.get_logger()

YAML_SUFFIXES = (".yml", ".yaml")
CATALOG_SUFFIXES = (".xcstrings", ".json")


def create_string_table(
    strings_file: Optional[Path] = None,
    language: str = "en",
) -> StringTable:
    """Create a string table for a strings file.

    Args:
        strings_file: Path to a YAML or .xcstrings file. None gives an empty
            table, so every key renders as its lookup name.
        language: Language read from .xcstrings catalogs.

    Returns:
        StringTable with the file's templates.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file type is not supported or the file is invalid.
    """
    if strings_file is None:
        return MappingStringTable()

    path = Path(strings_file)
    suffix = path.suffix.lower()
    if suffix in YAML_SUFFIXES:
        return MappingStringTable.from_yaml(path)
    if suffix in CATALOG_SUFFIXES:
        return MappingStringTable.from_strings_catalog(path, language=language)

    raise ValueError(f"Unsupported strings file type: {path}")


def create_formatter(
    strings_file: Optional[Path] = None,
    language: Optional[str] = None,
    log_missing_keys: Optional[bool] = None,
) -> LocalizationFormatter:
    """Create and configure a LocalizationFormatter.

    Arguments left as None are read from ``settings.localization``.

    Args:
        strings_file: Path to a YAML or .xcstrings file
            (default: LOCALIZATION_STRINGS_FILE).
        language: Language read from .xcstrings catalogs
            (default: LOCALIZATION_STRINGS_LANGUAGE).
        log_missing_keys: Whether to log fallbacks to the lookup name
            (default: LOCALIZATION_LOG_MISSING_KEYS).

    Returns:
        LocalizationFormatter: Configured formatter instance

    Usage:
        # Use settings
        formatter = create_formatter()

        # Explicit catalog
        formatter = create_formatter(Path("Localizable.xcstrings"), language="pt-BR")
    """
    config = settings.localization
    if strings_file is None and config.STRINGS_FILE:
        strings_file = Path(config.STRINGS_FILE)
    if language is None:
        language = config.STRINGS_LANGUAGE
    if log_missing_keys is None:
        log_missing_keys = config.LOG_MISSING_KEYS

    table = create_string_table(strings_file, language=language)
    logger.info(
        "formatter_created",
        strings_file=str(strings_file) if strings_file else None,
        language=language,
    )
    return LocalizationFormatter(table, log_missing_keys=log_missing_keys)
