# Service modules

from .cart import CartEngine, InvalidQuantityError
from .submission import (
    EnquirySubmitter,
    LoggingEnquirySubmitter,
    LoggingOrderSubmitter,
    OrderSubmitter,
    create_enquiry,
    create_order,
)

__all__ = [
    "CartEngine",
    "InvalidQuantityError",
    "EnquirySubmitter",
    "LoggingEnquirySubmitter",
    "LoggingOrderSubmitter",
    "OrderSubmitter",
    "create_enquiry",
    "create_order",
]
