"""
Order and enquiry submission

Checkout and contact forms hand their payload to a submitter. The logging
submitters here keep recent submissions in memory and write them to the
log; an order-management backend or payment gateway can replace them
without touching the routes.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional, Protocol

from ..models.cart import CartSnapshot
from ..models.checkout import Customer, Order, OrderItem, OrderStatus
from ..models.contact import Enquiry
from ..models.forms import CheckoutForm, ContactForm

logger = logging.getLogger(__name__)


class OrderSubmitter(Protocol):
    def submit(self, order: Order) -> Order:
        ...


class EnquirySubmitter(Protocol):
    def submit(self, enquiry: Enquiry) -> Enquiry:
        ...


def create_order(cart: CartSnapshot, form: CheckoutForm) -> Order:
    """Create an order from a cart snapshot and the checkout form"""
    order_items = [
        OrderItem(
            item_id=line.item.id,
            title=line.item.title,
            sku=line.item.sku,
            quantity=line.quantity,
            unit_price=line.item.price,
            total_price=line.total_price,
        )
        for line in cart.lines
    ]

    return Order(
        order_id=f"ORD-{uuid.uuid4().hex[:8].upper()}",
        items=order_items,
        subtotal=cart.subtotal,
        customer=Customer(
            name=form.name,
            phone=form.phone,
            email=form.email,
            address=form.address,
        ),
        created_at=datetime.now(timezone.utc),
    )


def create_enquiry(form: ContactForm) -> Enquiry:
    """Create an enquiry from the contact form"""
    return Enquiry(
        enquiry_id=f"ENQ-{uuid.uuid4().hex[:8].upper()}",
        name=form.name,
        email=form.email,
        phone=form.phone,
        service=form.service,
        details=form.details,
        created_at=datetime.now(timezone.utc),
    )


class LoggingOrderSubmitter:
    """Logs orders and keeps the most recent ones in memory"""

    def __init__(self, limit: int = 50):
        self.limit = limit
        self.orders: dict[str, Order] = {}

    def submit(self, order: Order) -> Order:
        order = order.model_copy(update={"status": OrderStatus.SUBMITTED})
        self.orders[order.order_id] = order
        while len(self.orders) > self.limit:
            del self.orders[next(iter(self.orders))]

        logger.info(
            f"Order {order.order_id} submitted: {len(order.items)} line(s), "
            f"{order.currency} {order.subtotal} for {order.customer.name}"
        )
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        return self.orders.get(order_id)

    def list_orders(self, limit: int = 50) -> list[Order]:
        """List recent orders, newest first"""
        orders = sorted(self.orders.values(), key=lambda o: o.created_at, reverse=True)
        return orders[:limit]


class LoggingEnquirySubmitter:
    """Logs contact requests and keeps the most recent ones in memory"""

    def __init__(self, limit: int = 50):
        self.limit = limit
        self.enquiries: dict[str, Enquiry] = {}

    def submit(self, enquiry: Enquiry) -> Enquiry:
        self.enquiries[enquiry.enquiry_id] = enquiry
        while len(self.enquiries) > self.limit:
            del self.enquiries[next(iter(self.enquiries))]

        logger.info(
            f"Enquiry {enquiry.enquiry_id} received: {enquiry.service.value} "
            f"from {enquiry.name} <{enquiry.email}>"
        )
        return enquiry

    def list_enquiries(self, limit: int = 50) -> list[Enquiry]:
        """List recent enquiries, newest first"""
        enquiries = sorted(self.enquiries.values(), key=lambda e: e.created_at, reverse=True)
        return enquiries[:limit]
