"""Formatter turning typed localization keys into display strings."""

from core.logging import get_module_logger
from localization.keys import LocalizedKey
from localization.printf import format_string
from localization.tables import StringTable

logger = get_module_logger()


class LocalizationFormatter:
    """Formats localization keys with templates from a string table.

    The template for a key is looked up by the key's lookup name and the key's
    values are substituted into it positionally. A name missing from the table
    is displayed as-is, the same way platform localization falls back.

    Attributes:
        table: StringTable providing templates.
        log_missing_keys: Whether to log lookups that fall back to the name.
    """

    def __init__(self, table: StringTable, log_missing_keys: bool = True):
        self.table = table
        self.log_missing_keys = log_missing_keys

    def format(self, key: LocalizedKey) -> str:
        """Format a key into its localized string.

        Never raises for missing names or malformed templates.

        Args:
            key: Variant instance of a key family.

        Returns:
            Localized, formatted string.
        """
        template = self.table.lookup(key.key)
        if template is None:
            if self.log_missing_keys:
                logger.warning("translation_not_found", key=key.key)
            template = key.key

        return format_string(template, key.values)

    def has_translation(self, key: LocalizedKey) -> bool:
        """Check whether the table has a template for the key."""
        return self.table.lookup(key.key) is not None
