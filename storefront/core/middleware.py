"""
Client State Middleware

Attaches the cookie-backed cart repository to each request and writes
the cart slot and pending flash messages back onto the response.
"""

from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ..database.carts import CookieCartRepository
from .config import Settings
from .flash import FLASH_COOKIE, clear_flash_cookie, get_pending_messages, set_flash_cookie


class ClientStateMiddleware(BaseHTTPMiddleware):
    """
    Middleware that carries per-client state in cookies.

    The cart repository is created from the incoming cookie before the
    route runs; if the route changed the cart, the new value is set on the
    response. Flash messages queued by the route are stored for the next
    page, and messages already shown on a GET are cleared.
    """

    def __init__(self, app, settings: Settings):
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        key = self.settings.cart_storage_key
        repository = CookieCartRepository(key, request.cookies.get(key))
        request.state.cart_repository = repository

        response = await call_next(request)

        repository.write_to(
            response,
            max_age=self.settings.cart_cookie_max_age,
            secure=self.settings.cookie_secure,
        )

        messages = get_pending_messages(request)
        if messages:
            set_flash_cookie(response, messages)
        elif request.method == "GET" and request.cookies.get(FLASH_COOKIE):
            clear_flash_cookie(response)

        return response
