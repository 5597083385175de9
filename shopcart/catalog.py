"""
Catalog Lookup

Read-only price and display-name lookup for item ids. Unknown ids are not
an error: they cost 0 and are named "bad id".
"""

from functools import cache
from typing import Any, Iterable, Mapping

from shopcart.errors import ERROR_DUPLICATE_CATALOG_ID, is_item_id
from shopcart.logging import get_logger
from shopcart.models import CatalogEntry

logger = get_logger(__name__)

UNKNOWN_ITEM_PRICE = 0
UNKNOWN_ITEM_NAME = "bad id"

DEFAULT_ENTRIES = (
    CatalogEntry(item_id=1, price=10, name="apple"),
    CatalogEntry(item_id=2, price=12, name="banana"),
)


class Catalog:
    """
    Immutable mapping from item id to CatalogEntry.

    Usage:
        catalog = Catalog([CatalogEntry(item_id=7, price=3, name="plum")])
        catalog.cost(7)   # 3
        catalog.name(8)   # "bad id"
    """

    def __init__(self, entries: Iterable[CatalogEntry] = DEFAULT_ENTRIES):
        table: dict[int, CatalogEntry] = {}
        for entry in entries:
            if entry.item_id in table:
                raise ValueError(f"{ERROR_DUPLICATE_CATALOG_ID}: {entry.item_id}")
            table[entry.item_id] = entry
        self._entries = table

    @classmethod
    def from_dict(cls, data: Mapping[Any, Mapping[str, Any]]) -> "Catalog":
        """
        Build a catalog from plain data.

        Args:
            data: {item_id: {"price": int, "name": str}, ...}

        Raises:
            pydantic.ValidationError: If an entry is malformed
        """
        return cls(
            CatalogEntry(item_id=item_id, **fields)
            for item_id, fields in data.items()
        )

    def get(self, item_id: int) -> CatalogEntry | None:
        """Entry for item_id, None if unknown or not an item id."""
        if not is_item_id(item_id):
            return None
        return self._entries.get(item_id)

    def cost(self, item_id: int) -> int:
        """Configured price for item_id, or 0 if unknown."""
        entry = self.get(item_id)
        if entry is None:
            logger.debug(f"Unknown catalog id {item_id}, using price {UNKNOWN_ITEM_PRICE}")
            return UNKNOWN_ITEM_PRICE
        return entry.price

    def name(self, item_id: int) -> str:
        """Configured display name for item_id, or "bad id" if unknown."""
        entry = self.get(item_id)
        if entry is None:
            logger.debug(f"Unknown catalog id {item_id}, using name {UNKNOWN_ITEM_NAME!r}")
            return UNKNOWN_ITEM_NAME
        return entry.name

    def __contains__(self, item_id: object) -> bool:
        return self.get(item_id) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Catalog({sorted(self._entries)})"


@cache
def get_default_catalog() -> Catalog:
    """Get the shared two-item default catalog (read-only, safe to share)."""
    return Catalog(DEFAULT_ENTRIES)
