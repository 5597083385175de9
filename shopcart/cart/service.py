"""Cart session service and the functional cart/catalog surface."""
from typing import Optional

from shopcart.catalog import Catalog, get_default_catalog
from shopcart.logging import get_logger, sanitize_id_for_logging
from shopcart.models import CartLine, CartSummary
from .models import Cart

logger = get_logger(__name__)


class CartSession:
    """
    One shopping session: owns its Cart, reads from a Catalog.

    Each session gets an independent cart, so two sessions never see each
    other's items and no locking is needed.

    Usage:
        session = CartSession("user-42")
        session.add_to_cart(1)
        session.add_to_cart(1)
        session.remove_from_cart(1)   # 2
        session.get_cart_summary()
    """

    def __init__(self, session_id: str, catalog: Optional[Catalog] = None):
        self.session_id = session_id
        self.catalog = catalog if catalog is not None else get_default_catalog()
        self.cart = Cart()
        logger.info(f"Cart session {sanitize_id_for_logging(session_id)} started")

    def add_to_cart(self, item_id: int) -> None:
        add_to_cart(self.cart, item_id)

    def remove_from_cart(self, item_id: int) -> int:
        """
        Remove item_id from this session's cart.

        Returns:
            Quantity removed

        Raises:
            ItemNotFoundError: If item_id is not in the cart
        """
        return remove_from_cart(self.cart, item_id)

    def get_cost(self, item_id: int) -> int:
        return self.catalog.cost(item_id)

    def get_name(self, item_id: int) -> str:
        return self.catalog.name(item_id)

    def clear_cart(self) -> None:
        """Empty this session's cart."""
        self.cart.clear()
        logger.info(f"Cart session {sanitize_id_for_logging(self.session_id)} cleared")

    def __repr__(self) -> str:
        return f"CartSession({sanitize_id_for_logging(self.session_id)!r}, items={len(self.cart)})"

    def get_cart_summary(self) -> CartSummary:
        """
        Join cart contents with catalog prices and names.

        Unknown ids are listed with price 0 and the "bad id" name.

        Returns:
            CartSummary snapshot (empty summary for an empty cart)
        """
        if self.cart.is_empty:
            return CartSummary(session_id=self.session_id)

        lines = []
        for item in self.cart:
            unit_price = self.catalog.cost(item.item_id)
            lines.append(
                CartLine(
                    item_id=item.item_id,
                    name=self.catalog.name(item.item_id),
                    quantity=item.quantity,
                    unit_price=unit_price,
                    line_total=unit_price * item.quantity,
                )
            )

        return CartSummary(
            session_id=self.session_id,
            is_empty=False,
            total_items=self.cart.total_items,
            items=lines,
            total=sum(line.line_total for line in lines),
        )


def add_to_cart(cart: Cart, item_id: int) -> None:
    """Add one unit of item_id to cart."""
    cart.add(item_id)


def remove_from_cart(cart: Cart, item_id: int) -> int:
    """Remove item_id from cart and return its quantity; raises ItemNotFoundError if absent."""
    return cart.remove(item_id)


def get_cost(item_id: int, catalog: Optional[Catalog] = None) -> int:
    """Price of item_id, 0 if unknown. Uses the default catalog unless one is given."""
    if catalog is None:
        catalog = get_default_catalog()
    return catalog.cost(item_id)


def get_name(item_id: int, catalog: Optional[Catalog] = None) -> str:
    """Display name of item_id, "bad id" if unknown."""
    if catalog is None:
        catalog = get_default_catalog()
    return catalog.name(item_id)
