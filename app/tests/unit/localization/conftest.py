"""Feature-level fixtures for localization tests.

Provides string tables and string files for formatting scenarios.
"""

import json

import pytest
import yaml

from tests.factories.localization import (
    SAMPLE_MESSAGES,
    make_formatter,
    make_string_table,
    make_strings_catalog,
)


@pytest.fixture
def string_table():
    """MappingStringTable with the sample templates."""
    return make_string_table()


@pytest.fixture
def formatter():
    """LocalizationFormatter over the sample templates."""
    return make_formatter()


@pytest.fixture
def yaml_strings_file(tmp_path):
    """Write the sample templates to Localizable.yml."""
    path = tmp_path / "Localizable.yml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(SAMPLE_MESSAGES, f, allow_unicode=True)
    return path


@pytest.fixture
def strings_catalog_file(tmp_path):
    """Write an .xcstrings catalog with English and Brazilian Portuguese."""
    path = tmp_path / "Localizable.xcstrings"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(make_strings_catalog(), f, ensure_ascii=False)
    return path
