"""Cart storage for the storefront

The cart itself lives with the client. A repository is the single
key-value slot the cart engine reads on construction and overwrites after
every change.
"""

from typing import Optional, Protocol
from urllib.parse import quote, unquote

from starlette.responses import Response

DEFAULT_CART_KEY = "fixev_cart"


class CartRepository(Protocol):
    """Persistence slot holding the serialized cart"""

    key: str

    def load(self) -> Optional[str]:
        ...

    def save(self, payload: str) -> None:
        ...


class InMemoryCartRepository:
    """Dictionary-backed cart slot.

    Several repositories may share one ``slots`` dict, which lets a fresh
    engine rehydrate what an earlier one saved.
    """

    def __init__(self, key: str = DEFAULT_CART_KEY, slots: Optional[dict[str, str]] = None):
        self.key = key
        self.slots = slots if slots is not None else {}

    def load(self) -> Optional[str]:
        return self.slots.get(self.key)

    def save(self, payload: str) -> None:
        self.slots[self.key] = payload


class CookieCartRepository:
    """Cart slot carried in a browser cookie.

    The incoming cookie is read once; saves replace the value in place so
    later loads in the same request see them, and ``write_to`` copies the
    latest value onto the outgoing response.
    """

    def __init__(self, key: str, cookie_value: Optional[str] = None):
        self.key = key
        self._value = unquote(cookie_value) if cookie_value else None
        self.dirty = False

    def load(self) -> Optional[str]:
        return self._value

    def save(self, payload: str) -> None:
        self._value = payload
        self.dirty = True

    def write_to(self, response: Response, max_age: int, secure: bool = False) -> None:
        """Set the cart cookie on a response if the cart changed"""
        if not self.dirty or self._value is None:
            return
        response.set_cookie(
            self.key,
            quote(self._value, safe=""),
            max_age=max_age,
            httponly=True,
            samesite="lax",
            secure=secure,
        )
