"""Tests for settings"""
from fastapi.testclient import TestClient

from storefront.core.config import Settings
from storefront.main import create_app


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.app_name == "Fix EV Garage"
    assert settings.cart_storage_key == "fixev_cart"
    assert settings.cookie_secure is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CART_STORAGE_KEY", "garage_cart")
    monkeypatch.setenv("DEBUG", "true")

    settings = Settings(_env_file=None)

    assert settings.cart_storage_key == "garage_cart"
    assert settings.debug is True


def test_cart_cookie_uses_configured_key(catalog):
    app = create_app(settings=Settings(_env_file=None, cart_storage_key="garage_cart"), catalog=catalog)
    client = TestClient(app)

    client.post("/cart/add", data={"item_id": "p1"})

    assert client.cookies.get("garage_cart") is not None
    assert client.cookies.get("fixev_cart") is None
