"""FastAPI dependencies for the storefront"""

import logging

from fastapi import Depends, Request

from ..database.carts import CartRepository, InMemoryCartRepository
from ..database.catalog import CatalogStore
from ..services.cart import CartEngine
from ..services.submission import EnquirySubmitter, OrderSubmitter

logger = logging.getLogger(__name__)


def get_catalog(request: Request) -> CatalogStore:
    return request.app.state.catalog


def get_cart_repository(request: Request) -> CartRepository:
    """Cart slot attached by the client state middleware"""
    repository = getattr(request.state, "cart_repository", None)
    if repository is None:
        logger.warning("No cart repository on request; using a throwaway in-memory slot")
        repository = InMemoryCartRepository()
        request.state.cart_repository = repository
    return repository


def _log_cart_change(engine: CartEngine) -> None:
    logger.debug(f"Cart updated: {engine.item_count} item(s), subtotal {engine.subtotal}")


def get_cart_engine(
    catalog: CatalogStore = Depends(get_catalog),
    repository: CartRepository = Depends(get_cart_repository),
) -> CartEngine:
    """Build the request's cart engine from its client slot"""
    engine = CartEngine(catalog, repository)
    engine.subscribe(_log_cart_change)
    return engine


def get_order_submitter(request: Request) -> OrderSubmitter:
    return request.app.state.order_submitter


def get_enquiry_submitter(request: Request) -> EnquirySubmitter:
    return request.app.state.enquiry_submitter
