"""Tests for the catalog store"""
import pytest
from pydantic import ValidationError

from storefront.database.catalog import CatalogStore
from storefront.models.catalog import CatalogItem, ItemKind


def test_collections(catalog):
    """Test the three static collections"""
    assert [s.id for s in catalog.list_services()] == ["ev-repair", "module-repair", "aux-modules"]
    assert [p.id for p in catalog.list_products()] == ["p1", "p2", "p3", "p4"]
    assert [c.id for c in catalog.list_courses()] == ["t1", "t2", "t3"]


def test_get_product(catalog):
    product = catalog.get_product("p2")
    assert product.title == "VFD 2.2kW (3ph)"
    assert product.price == 24500
    assert product.sku == "VFD-2K2"


def test_get_course(catalog):
    course = catalog.get_course("t2")
    assert course.title == "Module Repair & Diagnostics"
    assert course.length == "3 days"


def test_missing_ids_return_none(catalog):
    """Test lookups never raise for a missing id"""
    assert catalog.get_product("p99") is None
    assert catalog.get_course("nope") is None
    assert catalog.get_service("") is None
    assert catalog.find_item("missing") is None


def test_lookup_respects_kind(catalog):
    """Test a course id is not found among products"""
    assert catalog.get_product("t1") is None
    assert catalog.get_course("p1") is None
    assert catalog.find_item("t1").kind == ItemKind.COURSE


def test_items_are_immutable(catalog):
    product = catalog.get_product("p1")
    with pytest.raises(ValidationError):
        product.price = 1


def test_prices_are_non_negative(catalog):
    items = catalog.list_services() + catalog.list_products() + catalog.list_courses()
    assert all(item.price >= 0 for item in items)


def test_duplicate_ids_rejected():
    item = CatalogItem(id="x", kind=ItemKind.PRODUCT, title="X", price=1)
    with pytest.raises(ValueError):
        CatalogStore(services=(), products=(item,), courses=(item,))
