"""Informational and catalog page routes"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from ..core.deps import get_cart_engine, get_catalog
from ..core.templating import render_page
from ..database.catalog import CatalogStore
from ..services.cart import CartEngine
from ..services.pages import (
    course_detail_page,
    home_page,
    parts_page,
    product_detail_page,
    services_page,
    training_page,
    vfd_page,
)

router = APIRouter(tags=["Pages"])


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    catalog: CatalogStore = Depends(get_catalog),
    cart: CartEngine = Depends(get_cart_engine),
):
    """Landing page"""
    return render_page(request, home_page(catalog), catalog, cart.item_count)


@router.get("/services", response_class=HTMLResponse)
async def services(
    request: Request,
    catalog: CatalogStore = Depends(get_catalog),
    cart: CartEngine = Depends(get_cart_engine),
):
    return render_page(request, services_page(catalog), catalog, cart.item_count)


@router.get("/vfd", response_class=HTMLResponse)
async def vfd(
    request: Request,
    catalog: CatalogStore = Depends(get_catalog),
    cart: CartEngine = Depends(get_cart_engine),
):
    return render_page(request, vfd_page(catalog), catalog, cart.item_count)


@router.get("/parts", response_class=HTMLResponse)
async def parts(
    request: Request,
    catalog: CatalogStore = Depends(get_catalog),
    cart: CartEngine = Depends(get_cart_engine),
):
    return render_page(request, parts_page(catalog), catalog, cart.item_count)


@router.get("/parts/{product_id}", response_class=HTMLResponse)
async def product_detail(
    product_id: str,
    request: Request,
    catalog: CatalogStore = Depends(get_catalog),
    cart: CartEngine = Depends(get_cart_engine),
):
    """Product detail; unknown IDs render the not-found page"""
    return render_page(request, product_detail_page(catalog, product_id), catalog, cart.item_count)


@router.get("/training", response_class=HTMLResponse)
async def training(
    request: Request,
    catalog: CatalogStore = Depends(get_catalog),
    cart: CartEngine = Depends(get_cart_engine),
):
    return render_page(request, training_page(catalog), catalog, cart.item_count)


@router.get("/training/{course_id}", response_class=HTMLResponse)
async def course_detail(
    course_id: str,
    request: Request,
    catalog: CatalogStore = Depends(get_catalog),
    cart: CartEngine = Depends(get_cart_engine),
):
    """Course detail; unknown IDs render the not-found page"""
    return render_page(request, course_detail_page(catalog, course_id), catalog, cart.item_count)
