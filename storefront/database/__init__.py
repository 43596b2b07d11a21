# Storage modules

from .catalog import catalog_store, CatalogStore
from .carts import CartRepository, CookieCartRepository, InMemoryCartRepository, DEFAULT_CART_KEY

__all__ = [
    "catalog_store",
    "CatalogStore",
    "CartRepository",
    "CookieCartRepository",
    "InMemoryCartRepository",
    "DEFAULT_CART_KEY",
]
