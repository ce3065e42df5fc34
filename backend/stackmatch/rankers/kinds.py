"""
Catalog kinds known to the ranking engine.
"""

from enum import Enum

from stackmatch.core.exceptions import UnknownCatalogKindError


class CatalogKind(str, Enum):
    """The three recommendable catalog kinds."""

    TEMPLATE = "template"
    AGENT = "agent"
    TEAM = "team"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "CatalogKind | str") -> "CatalogKind":
        """
        Resolve an enum member or its string value.

        Raises:
            UnknownCatalogKindError: If value names no known kind.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise UnknownCatalogKindError(
                str(value), valid_kinds=[k.value for k in cls]
            ) from None


AVAILABLE_KINDS = [kind.value for kind in CatalogKind]
