# Storefront Models

from .catalog import CatalogItem, CompanyInfo, ItemKind, ServiceHighlight
from .cart import CartLine, CartSnapshot, StoredCartLine
from .checkout import Customer, Order, OrderItem, OrderStatus
from .contact import Enquiry, ServiceRequestType
from .forms import CheckoutForm, ContactForm, field_errors

__all__ = [
    "CatalogItem",
    "CompanyInfo",
    "ItemKind",
    "ServiceHighlight",
    "CartLine",
    "CartSnapshot",
    "StoredCartLine",
    "Customer",
    "Order",
    "OrderItem",
    "OrderStatus",
    "Enquiry",
    "ServiceRequestType",
    "CheckoutForm",
    "ContactForm",
    "field_errors",
]
