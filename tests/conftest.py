"""Pytest configuration and fixtures"""
import os
import pytest

# Set test environment variables
os.environ.setdefault("LOG_LEVEL", "INFO")

from shopcart.cart import Cart, CartSession
from shopcart.catalog import Catalog
from shopcart.models import CatalogEntry


@pytest.fixture
def cart():
    """Empty cart"""
    return Cart()


@pytest.fixture
def session():
    """Session on the default catalog"""
    return CartSession("session-123")


@pytest.fixture
def fruit_catalog():
    """Three-item catalog"""
    return Catalog([
        CatalogEntry(item_id=1, price=10, name="apple"),
        CatalogEntry(item_id=2, price=12, name="banana"),
        CatalogEntry(item_id=7, price=3, name="plum"),
    ])
