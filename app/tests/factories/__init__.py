"""Test data factories for deterministic test data generation."""

from tests.factories.localization import (
    make_formatter,
    make_string_table,
    make_strings_catalog,
)

__all__ = [
    "make_formatter",
    "make_string_table",
    "make_strings_catalog",
]
