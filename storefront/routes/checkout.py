"""Checkout routes"""

import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from ..core.deps import get_cart_engine, get_catalog, get_order_submitter
from ..core.flash import flash
from ..core.templating import render_page
from ..database.catalog import CatalogStore
from ..models.forms import CheckoutForm, field_errors
from ..services.cart import CartEngine
from ..services.pages import checkout_page
from ..services.submission import OrderSubmitter, create_order

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/checkout", tags=["Checkout"])


@router.get("", response_class=HTMLResponse)
async def view_checkout(
    request: Request,
    catalog: CatalogStore = Depends(get_catalog),
    cart: CartEngine = Depends(get_cart_engine),
):
    return render_page(request, checkout_page(cart.snapshot()), catalog, cart.item_count)


@router.post("")
async def place_order(
    request: Request,
    name: str = Form(""),
    phone: str = Form(""),
    email: str = Form(""),
    address: str = Form(""),
    catalog: CatalogStore = Depends(get_catalog),
    cart: CartEngine = Depends(get_cart_engine),
    submitter: OrderSubmitter = Depends(get_order_submitter),
):
    """
    Place an order.

    The order goes to the configured submitter; no payment is taken.
    On success the cart is cleared and the customer is sent home.
    """
    if cart.is_empty:
        flash(request, "Your cart is empty.", "info")
        return RedirectResponse("/cart", status_code=303)

    submitted = {"name": name, "phone": phone, "email": email, "address": address}
    try:
        form = CheckoutForm(**submitted)
    except ValidationError as e:
        view = checkout_page(cart.snapshot(), form=submitted, errors=field_errors(e))
        return render_page(request, view, catalog, cart.item_count)

    order = submitter.submit(create_order(cart.snapshot(), form))
    cart.clear()

    logger.info(f"Checkout complete for order {order.order_id}: {order.currency} {order.subtotal}")
    flash(request, "Order placed — we will contact you to confirm.", "success")
    return RedirectResponse("/", status_code=303)
