"""
Cart errors and shared error messages.

Message strings live here so the cart, session and tests agree on them.
"""

# Cart errors
ERROR_ITEM_NOT_IN_CART = "Item not in cart"
ERROR_INVALID_ITEM_ID = "item_id must be an integer"

# Catalog errors
ERROR_DUPLICATE_CATALOG_ID = "Duplicate catalog id"


class CartError(Exception):
    """Base error for cart operations."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class ItemNotFoundError(CartError):
    """Remove targeted an item id that is not in the cart."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"{ERROR_ITEM_NOT_IN_CART}: {item_id}", code="ITEM_NOT_FOUND")
        self.item_id = item_id


def is_item_id(value: object) -> bool:
    """True for plain integers. bool is an int subclass but never an item id."""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_item_id(item_id: object) -> int:
    """Return item_id unchanged if it is a plain integer, else raise ValueError."""
    if not is_item_id(item_id):
        raise ValueError(f"{ERROR_INVALID_ITEM_ID}, got {type(item_id).__name__}")
    return item_id


__all__ = [
    "ERROR_ITEM_NOT_IN_CART",
    "ERROR_INVALID_ITEM_ID",
    "ERROR_DUPLICATE_CATALOG_ID",
    "CartError",
    "ItemNotFoundError",
    "is_item_id",
    "validate_item_id",
]
