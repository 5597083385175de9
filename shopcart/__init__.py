"""
shopcart - in-memory shopping cart tracker

This package contains:
- cart: line items, the Cart container and CartSession
- catalog: read-only price/name lookup
- models: Pydantic schemas for catalog entries and cart summaries
- errors: CartError hierarchy and message constants
- logging: logger configuration

Note: Imports are lazy so that importing shopcart alone stays cheap.
"""

__all__ = [
    "Cart",
    "CartSession",
    "Catalog",
    "ItemNotFoundError",
]


def __getattr__(name):
    """Lazy attribute access for the public API."""
    if name == "Cart":
        from shopcart.cart import Cart
        return Cart
    elif name == "CartSession":
        from shopcart.cart import CartSession
        return CartSession
    elif name == "Catalog":
        from shopcart.catalog import Catalog
        return Catalog
    elif name == "ItemNotFoundError":
        from shopcart.errors import ItemNotFoundError
        return ItemNotFoundError
    raise AttributeError(f"module 'shopcart' has no attribute '{name}'")
