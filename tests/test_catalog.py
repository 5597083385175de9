"""
Tests for Catalog
"""

import logging

import pytest
from pydantic import ValidationError
from shopcart.catalog import (
    Catalog,
    UNKNOWN_ITEM_NAME,
    UNKNOWN_ITEM_PRICE,
    get_default_catalog,
)
from shopcart.models import CatalogEntry


class TestDefaultCatalog:
    """Tests for the built-in two-item catalog."""

    @pytest.mark.parametrize(
        "item_id,price,name",
        [(1, 10, "apple"), (2, 12, "banana")],
    )
    def test_known_items(self, item_id, price, name):
        """Known ids return their configured price and name."""
        catalog = get_default_catalog()

        assert catalog.cost(item_id) == price
        assert catalog.name(item_id) == name

    def test_unknown_item_defaults(self):
        """Unknown ids cost 0 and are named "bad id"."""
        catalog = get_default_catalog()

        assert catalog.cost(99) == 0
        assert catalog.name(99) == "bad id"
        assert UNKNOWN_ITEM_PRICE == 0
        assert UNKNOWN_ITEM_NAME == "bad id"

    def test_default_is_shared(self):
        """The default catalog is built once."""
        assert get_default_catalog() is get_default_catalog()
        assert len(get_default_catalog()) == 2

    def test_unknown_lookup_logged_at_debug(self, caplog):
        """Default-value lookups are only debug noise."""
        with caplog.at_level(logging.DEBUG, logger="shopcart.catalog"):
            get_default_catalog().name(99)

        assert "Unknown catalog id 99" in caplog.text
        assert all(record.levelno == logging.DEBUG for record in caplog.records)


class TestNonIdLookups:
    """Lookups with values that are not item ids."""

    @pytest.mark.parametrize("bad_id", [True, "1", 1.0, None])
    def test_non_id_uses_defaults(self, bad_id):
        """bool and non-int values never match a catalog entry."""
        catalog = get_default_catalog()

        assert catalog.cost(bad_id) == 0
        assert catalog.name(bad_id) == "bad id"
        assert catalog.get(bad_id) is None
        assert bad_id not in catalog


class TestCustomCatalog:
    """Tests for user-supplied catalogs."""

    def test_entries(self, fruit_catalog):
        """Custom entries are looked up by id."""
        assert fruit_catalog.cost(7) == 3
        assert fruit_catalog.name(7) == "plum"
        assert 7 in fruit_catalog
        assert 8 not in fruit_catalog

    def test_get(self, fruit_catalog):
        """get returns the entry or None."""
        assert fruit_catalog.get(7) == CatalogEntry(item_id=7, price=3, name="plum")
        assert fruit_catalog.get(8) is None

    def test_duplicate_ids_rejected(self):
        """The same id cannot be configured twice."""
        with pytest.raises(ValueError, match="Duplicate catalog id"):
            Catalog([
                CatalogEntry(item_id=1, price=10, name="apple"),
                CatalogEntry(item_id=1, price=11, name="green apple"),
            ])

    def test_empty_catalog(self):
        """An empty catalog answers every id with the defaults."""
        catalog = Catalog([])

        assert len(catalog) == 0
        assert catalog.cost(1) == 0
        assert catalog.name(1) == "bad id"

    def test_from_dict(self):
        """Catalogs can be built from plain data."""
        catalog = Catalog.from_dict({
            3: {"price": 5, "name": "cherry"},
            4: {"price": 0, "name": "sample"},
        })

        assert catalog.cost(3) == 5
        assert catalog.name(4) == "sample"

    def test_from_dict_negative_price(self):
        """Negative prices are rejected."""
        with pytest.raises(ValidationError):
            Catalog.from_dict({3: {"price": -1, "name": "cherry"}})

    def test_from_dict_missing_name(self):
        """Entries need a name."""
        with pytest.raises(ValidationError):
            Catalog.from_dict({3: {"price": 5}})
