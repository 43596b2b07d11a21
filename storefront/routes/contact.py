"""Contact and booking routes"""

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from ..core.deps import get_cart_engine, get_catalog, get_enquiry_submitter
from ..core.flash import flash
from ..core.templating import render_page
from ..database.catalog import CatalogStore
from ..models.forms import ContactForm, field_errors
from ..services.cart import CartEngine
from ..services.pages import contact_page
from ..services.submission import EnquirySubmitter, create_enquiry

router = APIRouter(prefix="/contact", tags=["Contact"])


@router.get("", response_class=HTMLResponse)
async def view_contact(
    request: Request,
    catalog: CatalogStore = Depends(get_catalog),
    cart: CartEngine = Depends(get_cart_engine),
):
    return render_page(request, contact_page(), catalog, cart.item_count)


@router.post("")
async def send_request(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    service: str = Form("ev-repair"),
    details: str = Form(""),
    catalog: CatalogStore = Depends(get_catalog),
    cart: CartEngine = Depends(get_cart_engine),
    submitter: EnquirySubmitter = Depends(get_enquiry_submitter),
):
    """Send a service request; the cart is left untouched"""
    submitted = {"name": name, "email": email, "phone": phone, "service": service, "details": details}
    try:
        form = ContactForm(**submitted)
    except ValidationError as e:
        view = contact_page(form=submitted, errors=field_errors(e))
        return render_page(request, view, catalog, cart.item_count)

    submitter.submit(create_enquiry(form))
    flash(request, "Request sent — we will contact you.", "success")
    return RedirectResponse("/contact", status_code=303)
