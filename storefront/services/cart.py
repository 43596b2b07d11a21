"""
Cart Engine

Owns the ordered list of cart lines for one client. Every change is
written back to the cart repository and announced to subscribers; the
stored payload is validated against the catalog when the engine starts.
"""

import json
import logging
from typing import Callable, Optional

from pydantic import TypeAdapter, ValidationError

from ..database.carts import CartRepository
from ..database.catalog import CatalogStore
from ..models.cart import CartLine, CartSnapshot, StoredCartLine
from ..models.catalog import CatalogItem

logger = logging.getLogger(__name__)

CartListener = Callable[["CartEngine"], None]

_stored_lines = TypeAdapter(list[StoredCartLine])


class InvalidQuantityError(ValueError):
    """Raised when fewer than one unit is added to the cart"""


class CartEngine:
    """
    Shopping cart backed by a single persistence slot.

    Usage:
        engine = CartEngine(catalog_store, repository)
        engine.add(product, 2)
        engine.set_quantity(product.id, 1)
        engine.subtotal
    """

    def __init__(self, catalog: CatalogStore, repository: CartRepository):
        self.catalog = catalog
        self.repository = repository
        self._listeners: list[CartListener] = []
        self._lines: list[CartLine] = self._rehydrate()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def lines(self) -> list[CartLine]:
        """Copies of the cart lines in insertion order"""
        return [line.model_copy() for line in self._lines]

    @property
    def subtotal(self) -> int:
        return sum(line.total_price for line in self._lines)

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def snapshot(self) -> CartSnapshot:
        return CartSnapshot(
            lines=self.lines,
            subtotal=self.subtotal,
            item_count=self.item_count,
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, item: CatalogItem, quantity: int = 1) -> CartLine:
        """Add units of an item, merging with an existing line"""
        if quantity < 1:
            raise InvalidQuantityError(f"Cannot add {quantity} of {item.id}; quantity must be at least 1")

        line = self._find(item.id)
        if line:
            line.quantity += quantity
        else:
            line = CartLine(item=item, quantity=quantity)
            self._lines.append(line)

        self._commit()
        return line.model_copy()

    def remove(self, item_id: str) -> bool:
        """Remove a line. Returns False when the item was not in the cart."""
        remaining = [line for line in self._lines if line.item_id != item_id]
        if len(remaining) == len(self._lines):
            return False

        self._lines = remaining
        self._commit()
        return True

    def set_quantity(self, item_id: str, quantity: int) -> Optional[CartLine]:
        """
        Replace the quantity of an existing line.

        A quantity of zero or less removes the line. Items not in the cart
        are ignored.

        Returns:
            The updated line, or None if no line remains for the item
        """
        line = self._find(item_id)
        if not line:
            return None

        if quantity <= 0:
            self.remove(item_id)
            return None

        line.quantity = quantity
        self._commit()
        return line.model_copy()

    def clear(self) -> None:
        """Empty the cart"""
        self._lines = []
        self._commit()

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Call ``listener`` with the engine after every change.

        Returns a callable that removes the subscription.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _find(self, item_id: str) -> Optional[CartLine]:
        return next((line for line in self._lines if line.item_id == item_id), None)

    def _commit(self) -> None:
        self.repository.save(self._serialize())
        for listener in list(self._listeners):
            listener(self)

    def _serialize(self) -> str:
        stored = [
            StoredCartLine(
                id=line.item.id,
                title=line.item.title,
                price=line.item.price,
                quantity=line.quantity,
                kind=line.item.kind,
                sku=line.item.sku,
                stock=line.item.stock,
                length=line.item.length,
            ).model_dump(mode="json", exclude_none=True)
            for line in self._lines
        ]
        return json.dumps(stored, ensure_ascii=False)

    def _rehydrate(self) -> list[CartLine]:
        raw = self.repository.load()
        if not raw:
            return []

        try:
            stored = _stored_lines.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                f"Discarding unreadable cart in slot '{self.repository.key}': "
                f"{e.error_count()} validation error(s)"
            )
            return []

        lines: list[CartLine] = []
        by_id: dict[str, CartLine] = {}
        for entry in stored:
            item = self.catalog.find_item(entry.id)
            if item is None:
                logger.warning(f"Dropping stored cart line for unknown item '{entry.id}'")
                continue
            if entry.quantity < 1:
                logger.warning(f"Dropping stored cart line '{entry.id}' with quantity {entry.quantity}")
                continue

            existing = by_id.get(item.id)
            if existing:
                existing.quantity += entry.quantity
            else:
                line = CartLine(item=item, quantity=entry.quantity)
                by_id[item.id] = line
                lines.append(line)

        return lines
