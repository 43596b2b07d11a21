"""Checkout and order models for the storefront"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class OrderStatus(str, Enum):
    PENDING = "pending"
    SUBMITTED = "submitted"


class OrderItem(BaseModel):
    """Item in an order"""
    item_id: str
    title: str
    sku: Optional[str] = None
    quantity: int
    unit_price: int
    total_price: int


class Customer(BaseModel):
    """Who placed the order and where to reach them"""
    name: str
    phone: str
    email: str
    address: str = ""


class Order(BaseModel):
    """Order placed from the checkout page"""
    order_id: str
    status: OrderStatus = OrderStatus.PENDING
    items: list[OrderItem]
    subtotal: int
    currency: str = "INR"
    customer: Customer
    created_at: datetime
