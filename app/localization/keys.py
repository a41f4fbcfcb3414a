"""Typed localization keys.

A key family is a direct subclass of ``LocalizedKey`` and is the closed set of
messages an application can display. Each subclass of a family is a variant:
a frozen dataclass whose tag is the lookup name in the string table and whose
fields, in declaration order, are the format arguments.

Usage:
    class AppKey(LocalizedKey):
        pass

    class Welcome(AppKey):
        pass

    class PointsEarned(AppKey):
        count: int

    class Farewell(AppKey, key="goodbye"):
        name: str

    PointsEarned(count=5).key     # "pointsEarned"
    PointsEarned(count=5).values  # [5]
"""

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, ClassVar, Dict, List, Optional, Type

from core.logging import get_module_logger

logger = get_module_logger()

# Values accepted by printf-style substitution
FORMAT_ARGUMENT_TYPES = (str, int, float, Decimal)

RESERVED_FIELD_NAMES = frozenset({"key", "values"})


def is_format_argument(value: Any) -> bool:
    """Check whether a value can be substituted into a template."""
    return isinstance(value, FORMAT_ARGUMENT_TYPES)


def lookup_name_for(class_name: str) -> str:
    """Derive the default lookup name from a variant class name.

    Args:
        class_name: Variant class name (e.g., "PointsEarned").

    Returns:
        Class name with its first character lower-cased (e.g., "pointsEarned").
    """
    return class_name[:1].lower() + class_name[1:]


class LocalizedKey:
    """Base class for localization key families.

    Direct subclasses are families and keep a registry of their variants.
    Every deeper subclass is a variant, turned into a frozen dataclass when it
    is declared. Variants support structural pattern matching through the
    generated ``__match_args__``.

    Attributes:
        key: Lookup name of the variant in the string table.
    """

    key: ClassVar[str] = ""
    _family: ClassVar[Optional[Type["LocalizedKey"]]] = None
    _registry: ClassVar[Dict[str, Type["LocalizedKey"]]] = {}

    def __init_subclass__(cls, key: Optional[str] = None, **kwargs):
        super().__init_subclass__(**kwargs)

        if LocalizedKey in cls.__bases__:
            if key is not None:
                raise TypeError(
                    f"Key family {cls.__qualname__} cannot declare a lookup name"
                )
            cls._family = cls
            cls._registry = {}
            return

        family = cls._family
        if family is None:
            raise TypeError(f"{cls.__qualname__} must derive from a key family")

        name = key if key is not None else lookup_name_for(cls.__name__)
        if not name:
            raise TypeError(f"Variant {cls.__qualname__} has an empty lookup name")

        existing = family._registry.get(name)
        if existing is not None:
            raise TypeError(
                f"Lookup name {name!r} of {cls.__qualname__} is already used by "
                f"{existing.__qualname__} in {family.__qualname__}"
            )

        cls.key = name
        dataclass(frozen=True)(cls)

        reserved = RESERVED_FIELD_NAMES.intersection(f.name for f in fields(cls))
        if reserved:
            raise TypeError(
                f"Variant {cls.__qualname__} uses reserved field names: "
                f"{', '.join(sorted(reserved))}"
            )

        family._registry[name] = cls

    def __new__(cls, *args, **kwargs):
        if cls._family is None or cls is cls._family:
            raise TypeError(
                f"{cls.__qualname__} is a key family; instantiate one of its variants"
            )
        return super().__new__(cls)

    @property
    def values(self) -> List[Any]:
        """Format arguments in field declaration order.

        List and tuple fields are spliced in place. Values that cannot be
        formatted are left out.

        Returns:
            Flat list of format arguments.
        """
        arguments: List[Any] = []
        for data_field in fields(self):
            value = getattr(self, data_field.name)
            if isinstance(value, (list, tuple)):
                for element in value:
                    self._append_argument(arguments, data_field.name, element)
            else:
                self._append_argument(arguments, data_field.name, value)
        return arguments

    def _append_argument(self, arguments: List[Any], field_name: str, value: Any):
        if is_format_argument(value):
            arguments.append(value)
            return
        logger.debug(
            "dropped_format_argument",
            key=self.key,
            field=field_name,
            value_type=type(value).__name__,
        )

    @classmethod
    def family(cls) -> Type["LocalizedKey"]:
        """Get the key family this class belongs to.

        Raises:
            TypeError: If called on LocalizedKey itself.
        """
        if cls._family is None:
            raise TypeError("LocalizedKey is not a key family")
        return cls._family

    @classmethod
    def variants(cls) -> List[Type["LocalizedKey"]]:
        """Get all variants of the family in declaration order."""
        return list(cls.family()._registry.values())

    @classmethod
    def lookup_names(cls) -> List[str]:
        """Get the lookup names of all variants in declaration order."""
        return list(cls.family()._registry.keys())

    @classmethod
    def variant_for(cls, name: str) -> Optional[Type["LocalizedKey"]]:
        """Get the variant declared with a lookup name.

        Args:
            name: Lookup name (e.g., "pointsEarned").

        Returns:
            Variant class, or None if no variant uses that name.
        """
        return cls.family()._registry.get(name)
