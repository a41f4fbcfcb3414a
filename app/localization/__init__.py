"""Localization - typed keys formatted into localized strings.

Maps variants of a key family to templates in a string table and substitutes
the variants' values with printf-style rules.

Main components:
- keys: LocalizedKey base class for key families and their variants
- tables: StringTable and its mapping/YAML/.xcstrings/gettext adapters
- printf: format_string() printf-style substitution
- formatter: LocalizationFormatter
- coverage: check_coverage() and assert_coverage() for key/table drift
- factory: create_formatter() from settings
- service: localized() with a process-wide default formatter
"""

from localization.coverage import (
    CoverageReport,
    IncompleteStringTableError,
    assert_coverage,
    check_coverage,
)
from localization.factory import create_formatter, create_string_table
from localization.formatter import LocalizationFormatter
from localization.keys import LocalizedKey, is_format_argument
from localization.printf import format_string
from localization.service import (
    get_default_formatter,
    localized,
    set_default_formatter,
)
from localization.tables import GettextStringTable, MappingStringTable, StringTable

__all__ = [
    "LocalizedKey",
    "is_format_argument",
    "StringTable",
    "MappingStringTable",
    "GettextStringTable",
    "format_string",
    "LocalizationFormatter",
    "CoverageReport",
    "IncompleteStringTableError",
    "check_coverage",
    "assert_coverage",
    "create_formatter",
    "create_string_table",
    "get_default_formatter",
    "set_default_formatter",
    "localized",
]
