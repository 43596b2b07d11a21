"""Cart page and cart form routes"""

from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ..core.deps import get_cart_engine, get_catalog
from ..core.flash import flash
from ..core.templating import render_page
from ..database.catalog import CatalogStore
from ..services.cart import CartEngine
from ..services.pages import cart_page

router = APIRouter(prefix="/cart", tags=["Cart"])


def safe_redirect_target(target: str, default: str = "/cart") -> str:
    """Only follow local paths from form input"""
    if target.startswith("/") and not target.startswith("//") and "\\" not in target:
        return target
    return default


def parse_quantity(raw: str) -> Optional[int]:
    """Whole-number quantity from form input, or None when blank or garbled"""
    try:
        return int(raw.strip())
    except ValueError:
        return None


@router.get("", response_class=HTMLResponse)
async def view_cart(
    request: Request,
    catalog: CatalogStore = Depends(get_catalog),
    cart: CartEngine = Depends(get_cart_engine),
):
    """Cart contents with quantities and subtotal"""
    return render_page(request, cart_page(cart.snapshot()), catalog, cart.item_count)


@router.post("/add")
async def add_to_cart(
    request: Request,
    item_id: str = Form(...),
    quantity: str = Form("1"),
    next: str = Form("/cart"),
    catalog: CatalogStore = Depends(get_catalog),
    cart: CartEngine = Depends(get_cart_engine),
):
    """Add an item to the cart and return to the page the form came from"""
    redirect_to = safe_redirect_target(next)

    item = catalog.find_item(item_id)
    if not item:
        flash(request, "Item not found", "error")
        return RedirectResponse(redirect_to, status_code=303)

    count = parse_quantity(quantity)
    if count is None or count < 1:
        flash(request, "Enter a quantity of at least 1", "error")
        return RedirectResponse(redirect_to, status_code=303)

    cart.add(item, count)
    flash(request, f"Added {count}x {item.title} to cart", "success")
    return RedirectResponse(redirect_to, status_code=303)


@router.post("/update")
async def update_cart_item(
    request: Request,
    item_id: str = Form(...),
    quantity: str = Form(""),
    cart: CartEngine = Depends(get_cart_engine),
):
    """Change a line's quantity; zero or less removes it"""
    count = parse_quantity(quantity)
    if count is None:
        flash(request, "Enter a quantity", "error")
        return RedirectResponse("/cart", status_code=303)

    cart.set_quantity(item_id, count)
    return RedirectResponse("/cart", status_code=303)


@router.post("/remove")
async def remove_from_cart(
    item_id: str = Form(...),
    cart: CartEngine = Depends(get_cart_engine),
):
    """Remove an item from the cart"""
    cart.remove(item_id)
    return RedirectResponse("/cart", status_code=303)


@router.post("/clear")
async def clear_cart(
    request: Request,
    cart: CartEngine = Depends(get_cart_engine),
):
    """Clear all items from cart"""
    cart.clear()
    flash(request, "Cart cleared", "info")
    return RedirectResponse("/cart", status_code=303)
