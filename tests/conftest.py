"""Pytest configuration and fixtures"""
import pytest
from fastapi.testclient import TestClient

from storefront.core.config import Settings
from storefront.database.carts import InMemoryCartRepository
from storefront.database.catalog import CatalogStore
from storefront.main import create_app
from storefront.services.cart import CartEngine
from storefront.services.submission import LoggingEnquirySubmitter, LoggingOrderSubmitter


@pytest.fixture
def catalog():
    """Default static catalog"""
    return CatalogStore()


@pytest.fixture
def slots():
    """Shared backing dict so several repositories see the same slot"""
    return {}


@pytest.fixture
def repository(slots):
    return InMemoryCartRepository(slots=slots)


@pytest.fixture
def engine(catalog, repository):
    return CartEngine(catalog, repository)


@pytest.fixture
def vfd_drive(catalog):
    """VFD 2.2kW (3ph), priced 24500"""
    return catalog.get_product("p2")


@pytest.fixture
def ecm(catalog):
    """Refurbished ECM, priced 6500"""
    return catalog.get_product("p1")


@pytest.fixture
def scanner(catalog):
    """OBD-II Advanced Scanner, priced 12800"""
    return catalog.get_product("p3")


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, debug=False, cart_storage_key="fixev_cart")


@pytest.fixture
def order_submitter():
    return LoggingOrderSubmitter()


@pytest.fixture
def enquiry_submitter():
    return LoggingEnquirySubmitter()


@pytest.fixture
def app(test_settings, catalog, order_submitter, enquiry_submitter):
    return create_app(
        settings=test_settings,
        catalog=catalog,
        order_submitter=order_submitter,
        enquiry_submitter=enquiry_submitter,
    )


@pytest.fixture
def client(app):
    """Test client"""
    return TestClient(app)
