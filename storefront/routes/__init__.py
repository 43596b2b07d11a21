# Page and form routes

from .pages import router as pages_router
from .cart import router as cart_router
from .checkout import router as checkout_router
from .contact import router as contact_router

__all__ = ["pages_router", "cart_router", "checkout_router", "contact_router"]
