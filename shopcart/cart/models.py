"""Cart line items and the in-memory cart container."""
from dataclasses import dataclass, replace
from typing import Iterator

from shopcart.errors import ItemNotFoundError, is_item_id, validate_item_id
from shopcart.logging import get_logger

logger = get_logger(__name__)


@dataclass
class LineItem:
    """Single item id in the cart and how many units of it."""
    item_id: int
    quantity: int = 1

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"item_id": self.item_id, "quantity": self.quantity}


class Cart:
    """
    Shopping cart holding at most one LineItem per item id.

    Items are kept in a dict keyed by id, so iteration follows insertion
    order. The cart is owned by a single session and is never shared.
    """

    def __init__(self):
        self._items: dict[int, LineItem] = {}

    def add(self, item_id: int) -> None:
        """Add one unit of item_id, creating the line item on first add."""
        validate_item_id(item_id)

        existing_item = self._items.get(item_id)
        if existing_item:
            existing_item.quantity += 1
        else:
            self._items[item_id] = LineItem(item_id=item_id)

        logger.debug(f"Added item {item_id}, quantity now {self._items[item_id].quantity}")

    def remove(self, item_id: int) -> int:
        """
        Remove the line item for item_id.

        Returns:
            The quantity that was in the cart

        Raises:
            ItemNotFoundError: If item_id is not in the cart. The cart is
                left unchanged.
        """
        validate_item_id(item_id)

        item = self._items.pop(item_id, None)
        if item is None:
            logger.warning(f"Failed to find item {item_id} in shopping cart")
            raise ItemNotFoundError(item_id)

        logger.debug(f"Removed item {item_id} (quantity {item.quantity})")
        return item.quantity

    def discard(self, item_id: int) -> int:
        """Like remove(), but returns 0 when item_id is not in the cart."""
        try:
            return self.remove(item_id)
        except ItemNotFoundError:
            return 0

    def quantity(self, item_id: int) -> int:
        """Units of item_id in the cart, 0 if absent or not an item id."""
        if not is_item_id(item_id):
            return 0
        item = self._items.get(item_id)
        return item.quantity if item else 0

    def clear(self) -> None:
        self._items.clear()

    @property
    def item_ids(self) -> list[int]:
        return list(self._items)

    @property
    def total_items(self) -> int:
        """Total number of units in cart."""
        return sum(item.quantity for item in self._items.values())

    @property
    def is_empty(self) -> bool:
        return not self._items

    def to_dict(self) -> dict:
        return {"items": [item.to_dict() for item in self._items.values()]}

    def __contains__(self, item_id: object) -> bool:
        return is_item_id(item_id) and item_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[LineItem]:
        # Yields copies; line items stay owned by the cart
        return iter([replace(item) for item in self._items.values()])

    def __repr__(self) -> str:
        return f"Cart({self.to_dict()['items']})"
