"""Cart models for the storefront"""

from typing import Optional

from pydantic import BaseModel, Field

from .catalog import CatalogItem, ItemKind


class CartLine(BaseModel):
    """Catalog item and the quantity held in the cart"""
    item: CatalogItem
    quantity: int = Field(gt=0)

    @property
    def item_id(self) -> str:
        return self.item.id

    @property
    def total_price(self) -> int:
        return self.item.price * self.quantity


class CartSnapshot(BaseModel):
    """Read-only view of the cart handed to page renderers"""
    lines: list[CartLine] = []
    subtotal: int = 0
    item_count: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.lines


class StoredCartLine(BaseModel):
    """Cart line as written to the client-side slot.

    Display fields are copied from the catalog when the line is saved;
    only ``id`` and ``quantity`` are trusted on load.
    """
    id: str
    title: str
    price: int
    quantity: int
    kind: Optional[ItemKind] = None
    sku: Optional[str] = None
    stock: Optional[int] = None
    length: Optional[str] = None
