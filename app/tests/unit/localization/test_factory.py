"""Tests for localization.factory and localization.service modules."""

from unittest.mock import patch

import pytest

from localization import (
    LocalizationFormatter,
    MappingStringTable,
    create_formatter,
    create_string_table,
    get_default_formatter,
    localized,
    set_default_formatter,
)
from tests.factories.localization import PointsEarned, Unmapped, Welcome, make_formatter


class TestCreateStringTable:
    """Tests for create_string_table()."""

    def test_no_file_gives_empty_table(self):
        """No strings file gives an empty table."""
        table = create_string_table(None)
        assert isinstance(table, MappingStringTable)
        assert len(table) == 0

    def test_yaml_file(self, yaml_strings_file):
        """.yml files are read as YAML."""
        table = create_string_table(yaml_strings_file)
        assert table.lookup("welcome") == "Welcome!"

    def test_yaml_suffix_case_insensitive(self, tmp_path):
        """.YAML files are read as YAML."""
        path = tmp_path / "Strings.YAML"
        path.write_text("welcome: Hi\n", encoding="utf-8")
        assert create_string_table(path).lookup("welcome") == "Hi"

    def test_strings_catalog_file(self, strings_catalog_file):
        """.xcstrings files are read as catalogs in the given language."""
        table = create_string_table(strings_catalog_file, language="pt-BR")
        assert table.lookup("welcome") == "Bem-vindo!"

    def test_unsupported_suffix_raises_error(self, tmp_path):
        """Unknown file types raise ValueError."""
        path = tmp_path / "Localizable.strings"
        path.write_text('"welcome" = "Welcome!";', encoding="utf-8")
        with pytest.raises(ValueError):
            create_string_table(path)


class TestCreateFormatter:
    """Tests for create_formatter()."""

    def test_defaults_without_strings_file(self):
        """Without a configured file every key renders as its name."""
        with patch("localization.factory.settings") as mock_settings:
            mock_settings.localization.STRINGS_FILE = ""
            mock_settings.localization.STRINGS_LANGUAGE = "en"
            mock_settings.localization.LOG_MISSING_KEYS = True
            formatter = create_formatter()

        assert isinstance(formatter, LocalizationFormatter)
        assert formatter.log_missing_keys is True
        assert formatter.format(Welcome()) == "welcome"

    def test_strings_file_from_settings(self, strings_catalog_file):
        """The strings file and language are read from settings."""
        with patch("localization.factory.settings") as mock_settings:
            mock_settings.localization.STRINGS_FILE = str(strings_catalog_file)
            mock_settings.localization.STRINGS_LANGUAGE = "pt-BR"
            mock_settings.localization.LOG_MISSING_KEYS = False
            formatter = create_formatter()

        assert formatter.log_missing_keys is False
        assert formatter.format(PointsEarned(count=7)) == "Você ganhou 7 pontos"

    def test_arguments_override_settings(self, yaml_strings_file):
        """Explicit arguments take precedence over settings."""
        with patch("localization.factory.settings") as mock_settings:
            mock_settings.localization.STRINGS_FILE = "/nonexistent/strings.yml"
            mock_settings.localization.STRINGS_LANGUAGE = "en"
            mock_settings.localization.LOG_MISSING_KEYS = True
            formatter = create_formatter(yaml_strings_file, log_missing_keys=False)

        assert formatter.log_missing_keys is False
        assert formatter.format(PointsEarned(count=5)) == "You earned 5 points"

    def test_missing_configured_file_raises_error(self, tmp_path):
        """A configured file that does not exist raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            create_formatter(tmp_path / "missing.yml")


class TestDefaultFormatter:
    """Tests for the process-wide default formatter."""

    def test_localized_uses_default_formatter(self):
        """localized() formats with the default formatter."""
        set_default_formatter(make_formatter())
        assert localized(PointsEarned(count=5)) == "You earned 5 points"
        assert localized(Welcome()) == "Welcome!"
        assert localized(Unmapped()) == "unmapped"

    def test_default_formatter_created_once(self):
        """get_default_formatter() builds the formatter lazily, once."""
        formatter = make_formatter()
        with patch(
            "localization.service.create_formatter", return_value=formatter
        ) as mock_create:
            assert get_default_formatter() is formatter
            assert get_default_formatter() is formatter
        mock_create.assert_called_once_with()

    def test_reset_default_formatter(self):
        """set_default_formatter(None) rebuilds on next use."""
        first = make_formatter()
        second = make_formatter()
        set_default_formatter(first)
        set_default_formatter(None)
        with patch("localization.service.create_formatter", return_value=second):
            assert get_default_formatter() is second
