"""
Page renderers

Each renderer maps the catalog, a cart snapshot and route parameters to a
PageView: the template to draw, the page title and the template context.
Renderers hold no state and never raise for a missing catalog entry; the
not-found view is returned instead.
"""

from typing import Any, Optional

from pydantic import BaseModel

from ..database.catalog import SERVICE_FEATURES, CatalogStore
from ..models.cart import CartSnapshot
from ..models.contact import ServiceRequestType


class PageView(BaseModel):
    """Description of a rendered page"""
    template: str
    title: str
    context: dict[str, Any] = {}
    status_code: int = 200


def not_found_page(message: str = "Page not found") -> PageView:
    return PageView(
        template="not_found.html",
        title="Not found",
        context={"message": message},
        status_code=404,
    )


def home_page(catalog: CatalogStore) -> PageView:
    return PageView(
        template="home.html",
        title="Professional EV & Module Repair",
        context={
            "services": catalog.list_services(),
            "vfd_service": catalog.vfd_service,
            "products": catalog.list_products(),
            "courses": catalog.list_courses(),
        },
    )


def services_page(catalog: CatalogStore) -> PageView:
    return PageView(
        template="services.html",
        title="Services & Diagnostics",
        context={
            "services": catalog.list_services(),
            "features": SERVICE_FEATURES,
        },
    )


def vfd_page(catalog: CatalogStore) -> PageView:
    return PageView(
        template="vfd.html",
        title=catalog.vfd_service.title,
        context={"vfd_service": catalog.vfd_service},
    )


def parts_page(catalog: CatalogStore) -> PageView:
    return PageView(
        template="parts.html",
        title="Parts, Scanners & Tools",
        context={"products": catalog.list_products()},
    )


def product_detail_page(catalog: CatalogStore, product_id: str) -> PageView:
    product = catalog.get_product(product_id)
    if product is None:
        return not_found_page("Product not found")
    return PageView(
        template="product_detail.html",
        title=product.title,
        context={"product": product},
    )


def training_page(catalog: CatalogStore) -> PageView:
    return PageView(
        template="training.html",
        title="Training & Certification",
        context={"courses": catalog.list_courses()},
    )


def course_detail_page(catalog: CatalogStore, course_id: str) -> PageView:
    course = catalog.get_course(course_id)
    if course is None:
        return not_found_page("Course not found")
    return PageView(
        template="course_detail.html",
        title=course.title,
        context={"course": course},
    )


def contact_page(
    form: Optional[dict[str, str]] = None,
    errors: Optional[dict[str, str]] = None,
) -> PageView:
    return PageView(
        template="contact.html",
        title="Contact & Book Service",
        context={
            "service_options": list(ServiceRequestType),
            "form": form or {},
            "errors": errors or {},
        },
        status_code=422 if errors else 200,
    )


def cart_page(cart: CartSnapshot) -> PageView:
    return PageView(
        template="cart.html",
        title="Cart",
        context={"cart": cart},
    )


def checkout_page(
    cart: CartSnapshot,
    form: Optional[dict[str, str]] = None,
    errors: Optional[dict[str, str]] = None,
) -> PageView:
    """Checkout form, or an empty-cart notice when there is nothing to buy"""
    if cart.is_empty:
        return PageView(
            template="checkout_empty.html",
            title="Checkout",
            context={"message": "Cart is empty."},
        )
    return PageView(
        template="checkout.html",
        title="Checkout",
        context={
            "cart": cart,
            "form": form or {},
            "errors": errors or {},
        },
        status_code=422 if errors else 200,
    )
