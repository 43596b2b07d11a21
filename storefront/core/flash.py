"""
Flash Messages

Cookie-based one-shot messages that survive a single redirect.

Usage in routes:
    flash(request, "Order placed", "success")
    return RedirectResponse("/", status_code=303)

Usage in templates:
    {% for msg in get_flashed_messages(request) %}
        <div class="flash flash-{{ msg.category }}">{{ msg.text }}</div>
    {% endfor %}
"""

import json
import urllib.parse

from fastapi import Request
from starlette.responses import Response

FLASH_COOKIE = "_flash"


def flash(request: Request, message: str, category: str = "info") -> None:
    """Queue a flash message to be shown after the next redirect."""
    pending = get_pending_messages(request)
    pending.append({"text": message, "category": category})
    request.state.flash_messages = pending


def get_pending_messages(request: Request) -> list:
    """Messages queued during the current request"""
    return list(getattr(request.state, "flash_messages", []))


def get_flashed_messages(request: Request) -> list[dict]:
    """Read flash messages from the incoming cookie."""
    cookie_val = request.cookies.get(FLASH_COOKIE, "")
    if not cookie_val:
        return []
    try:
        messages = json.loads(urllib.parse.unquote(cookie_val))
    except ValueError:
        return []
    if not isinstance(messages, list):
        return []
    return [m for m in messages if isinstance(m, dict) and "text" in m]


def set_flash_cookie(response: Response, messages: list) -> None:
    encoded = urllib.parse.quote(json.dumps(messages, ensure_ascii=False), safe="")
    response.set_cookie(FLASH_COOKIE, encoded, httponly=True, samesite="lax", max_age=60)


def clear_flash_cookie(response: Response) -> None:
    response.delete_cookie(FLASH_COOKIE)
