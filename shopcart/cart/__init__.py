"""Cart package: line items, cart container, and session facade."""
from .models import LineItem, Cart
from .service import (
    CartSession,
    add_to_cart,
    remove_from_cart,
    get_cost,
    get_name,
)

__all__ = [
    "LineItem",
    "Cart",
    "CartSession",
    "add_to_cart",
    "remove_from_cart",
    "get_cost",
    "get_name",
]
