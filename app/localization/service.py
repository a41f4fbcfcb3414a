"""Process-wide formatter for call sites that do not inject one.

Usage:
    from localization import localized

    message = localized(PointsEarned(count=5))
"""

from typing import Optional

from localization.factory import create_formatter
from localization.formatter import LocalizationFormatter
from localization.keys import LocalizedKey

_default_formatter: Optional[LocalizationFormatter] = None


def get_default_formatter() -> LocalizationFormatter:
    """Get the default formatter, creating it from settings on first use."""
    global _default_formatter
    if _default_formatter is None:
        _default_formatter = create_formatter()
    return _default_formatter


def set_default_formatter(formatter: Optional[LocalizationFormatter]) -> None:
    """Replace the default formatter.

    Args:
        formatter: Formatter to use, or None to rebuild from settings on the
            next call.
    """
    global _default_formatter
    _default_formatter = formatter


def localized(key: LocalizedKey) -> str:
    """Format a key with the default formatter."""
    return get_default_formatter().format(key)
