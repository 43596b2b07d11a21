"""Jinja2 templates setup with storefront filters and globals"""

import os
from datetime import datetime

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..database.catalog import CatalogStore
from ..services.pages import PageView
from .flash import get_flashed_messages
from .formatting import format_inr
from .navigation import build_header

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "..", "templates")

templates = Jinja2Templates(directory=TEMPLATES_DIR)

# Filters (usage in template: {{ item.price | inr }})
templates.env.filters["inr"] = format_inr

# Globals
templates.env.globals["get_flashed_messages"] = get_flashed_messages
templates.env.globals["current_year"] = lambda: datetime.now().year


def render_page(request: Request, view: PageView, catalog: CatalogStore, cart_count: int):
    """Render a page view inside the site layout"""
    header = build_header(request.url.path, cart_count, catalog.company)
    context = {
        "title": view.title,
        "header": header,
        "company": catalog.company,
        **view.context,
    }
    return templates.TemplateResponse(
        request,
        view.template,
        context,
        status_code=view.status_code,
    )
