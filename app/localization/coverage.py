"""Checks that a key family and a string table correspond one to one."""

from dataclasses import dataclass, field
from typing import List, Optional, Type

from core.logging import get_module_logger
from localization.keys import LocalizedKey
from localization.tables import StringTable

logger = get_module_logger()


class IncompleteStringTableError(ValueError):
    """Raised when variants of a key family have no template.

    Attributes:
        missing: Lookup names without a template.
    """

    def __init__(self, family: Type[LocalizedKey], missing: List[str]):
        self.missing = missing
        super().__init__(
            f"String table has no template for {len(missing)} "
            f"{family.__qualname__} key(s): {', '.join(missing)}"
        )


@dataclass(frozen=True)
class CoverageReport:
    """Result of comparing a key family with a string table.

    Attributes:
        missing: Lookup names of variants the table has no template for.
        unused: Table names no variant uses, or None if the table cannot
            enumerate its names.
    """

    missing: List[str] = field(default_factory=list)
    unused: Optional[List[str]] = None

    @property
    def is_complete(self) -> bool:
        return not self.missing


def check_coverage(family: Type[LocalizedKey], table: StringTable) -> CoverageReport:
    """Compare the variants of a key family with a string table.

    Args:
        family: Key family (or any of its variants).
        table: StringTable to check.

    Returns:
        CoverageReport listing missing and unused names.
    """
    lookup_names = family.lookup_names()
    missing = [name for name in lookup_names if table.lookup(name) is None]

    table_names = table.names()
    unused = None
    if table_names is not None:
        declared = set(lookup_names)
        unused = [name for name in table_names if name not in declared]

    report = CoverageReport(missing=missing, unused=unused)
    logger.info(
        "checked_string_table_coverage",
        family=family.family().__qualname__,
        variant_count=len(lookup_names),
        missing_count=len(missing),
        unused_count=len(unused) if unused is not None else None,
    )
    return report


def assert_coverage(family: Type[LocalizedKey], table: StringTable) -> CoverageReport:
    """Require a template for every variant of a key family.

    Args:
        family: Key family (or any of its variants).
        table: StringTable to check.

    Returns:
        CoverageReport when every variant has a template.

    Raises:
        IncompleteStringTableError: If any variant has no template.
    """
    report = check_coverage(family, table)
    if not report.is_complete:
        logger.error(
            "incomplete_string_table",
            family=family.family().__qualname__,
            missing=report.missing,
        )
        raise IncompleteStringTableError(family.family(), report.missing)
    return report
