"""Tests for page renderers"""
from storefront.models.cart import CartLine, CartSnapshot
from storefront.services.pages import (
    cart_page,
    checkout_page,
    contact_page,
    course_detail_page,
    home_page,
    not_found_page,
    parts_page,
    product_detail_page,
    services_page,
    training_page,
    vfd_page,
)


def _snapshot(*lines):
    return CartSnapshot(
        lines=list(lines),
        subtotal=sum(line.total_price for line in lines),
        item_count=sum(line.quantity for line in lines),
    )


def test_home_page(catalog):
    view = home_page(catalog)

    assert view.template == "home.html"
    assert view.status_code == 200
    assert len(view.context["services"]) == 3
    assert len(view.context["products"]) == 4
    assert len(view.context["courses"]) == 3


def test_listing_pages(catalog):
    assert services_page(catalog).context["services"] == catalog.list_services()
    assert parts_page(catalog).context["products"] == catalog.list_products()
    assert training_page(catalog).context["courses"] == catalog.list_courses()
    assert vfd_page(catalog).context["vfd_service"].bullets[0] == "Power stage & IGBT replacement"


def test_product_detail(catalog):
    view = product_detail_page(catalog, "p2")

    assert view.template == "product_detail.html"
    assert view.title == "VFD 2.2kW (3ph)"
    assert view.context["product"].price == 24500


def test_product_detail_not_found(catalog):
    view = product_detail_page(catalog, "p404")

    assert view.template == "not_found.html"
    assert view.status_code == 404
    assert view.context["message"] == "Product not found"


def test_course_detail(catalog):
    view = course_detail_page(catalog, "t3")

    assert view.template == "course_detail.html"
    assert view.context["course"].length == "2 days"


def test_course_detail_not_found(catalog):
    view = course_detail_page(catalog, "t9")

    assert view.status_code == 404
    assert view.context["message"] == "Course not found"


def test_course_id_is_not_a_product(catalog):
    assert product_detail_page(catalog, "t1").status_code == 404


def test_not_found_default_message():
    assert not_found_page().context["message"] == "Page not found"


def test_cart_page(vfd_drive):
    snapshot = _snapshot(CartLine(item=vfd_drive, quantity=2))
    view = cart_page(snapshot)

    assert view.context["cart"].subtotal == 49000


def test_checkout_empty_cart():
    view = checkout_page(CartSnapshot())

    assert view.template == "checkout_empty.html"
    assert view.context["message"] == "Cart is empty."


def test_checkout_with_errors(ecm):
    snapshot = _snapshot(CartLine(item=ecm, quantity=1))
    view = checkout_page(snapshot, form={"name": ""}, errors={"name": "required"})

    assert view.template == "checkout.html"
    assert view.status_code == 422
    assert view.context["errors"] == {"name": "required"}


def test_contact_page_options():
    view = contact_page()

    assert [o.value for o in view.context["service_options"]] == [
        "ev-repair", "module-repair", "vfd", "training",
    ]
    assert view.status_code == 200
