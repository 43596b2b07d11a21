"""
Storefront Application

Marketing site and light shop for Fix EV Garage: services, industrial
VFD repair, parts and tools, technician training, contact and a
cookie-backed cart with simulated checkout.
"""

import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import Settings, get_settings
from .core.deps import get_cart_repository
from .core.middleware import ClientStateMiddleware
from .core.templating import render_page
from .database.catalog import CatalogStore, catalog_store
from .routes import cart_router, checkout_router, contact_router, pages_router
from .services.cart import CartEngine
from .services.pages import not_found_page
from .services.submission import (
    EnquirySubmitter,
    LoggingEnquirySubmitter,
    LoggingOrderSubmitter,
    OrderSubmitter,
)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Render the site's not-found page for 404s, defer to FastAPI otherwise"""
    if exc.status_code != 404:
        return await http_exception_handler(request, exc)

    catalog: CatalogStore = request.app.state.catalog
    cart = CartEngine(catalog, get_cart_repository(request))
    return render_page(request, not_found_page(), catalog, cart.item_count)


def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[CatalogStore] = None,
    order_submitter: Optional[OrderSubmitter] = None,
    enquiry_submitter: Optional[EnquirySubmitter] = None,
) -> FastAPI:
    """Build the storefront with its collaborators"""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events"""
        logger.info(f"{settings.app_name} storefront starting up...")
        logger.info(f"Cart slot: cookie '{settings.cart_storage_key}'")
        yield
        logger.info(f"{settings.app_name} storefront shutting down...")

    app = FastAPI(
        title=settings.app_name,
        description="Repair services, parts and technician training",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.settings = settings
    app.state.catalog = catalog or catalog_store
    app.state.order_submitter = order_submitter or LoggingOrderSubmitter(settings.recent_submissions_limit)
    app.state.enquiry_submitter = enquiry_submitter or LoggingEnquirySubmitter(settings.recent_submissions_limit)

    app.add_middleware(ClientStateMiddleware, settings=settings)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)

    # Static files
    static_dir = os.path.join(os.path.dirname(__file__), "static")
    if os.path.exists(static_dir):
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    app.include_router(pages_router)
    app.include_router(cart_router)
    app.include_router(checkout_router)
    app.include_router(contact_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "storefront"}

    return app


configure_logging(get_settings())
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
