"""The current, uncommitted order."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

import structlog

from pos.config import DEFAULT_CURRENCY
from pos.models import OrderItem, Product
from pos.money import quantize

logger = structlog.get_logger(__name__)


class CartStore:
    """Cart lines keyed by product id, in the order they were first added."""

    def __init__(self) -> None:
        self._lines: list[OrderItem] = []

    def _index_of(self, product_id: str) -> int | None:
        for idx, line in enumerate(self._lines):
            if line.product_id == product_id:
                return idx
        return None

    def add_item(self, item: OrderItem) -> OrderItem:
        """Merge ``item`` into its existing line, or append it as a new line.

        On merge only the quantity grows; the name and unit price already in
        the cart are kept.
        """
        idx = self._index_of(item.product_id)
        if idx is None:
            self._lines.append(item)
            logger.debug("Cart line added", product_id=item.product_id, quantity=item.quantity)
            return item

        merged = replace(self._lines[idx], quantity=self._lines[idx].quantity + item.quantity)
        self._lines[idx] = merged
        logger.debug("Cart line merged", product_id=item.product_id, quantity=merged.quantity)
        return merged

    def add_product(self, product: Product, quantity: int = 1) -> OrderItem:
        return self.add_item(
            OrderItem(
                product_id=product.id,
                product_name=product.name,
                quantity=quantity,
                unit_price=product.price,
            )
        )

    def set_quantity(self, product_id: str, quantity: int) -> bool:
        """Replace a line's quantity.

        Quantities below one are ignored rather than rejected; callers remove
        the line instead of driving it to zero.
        """
        idx = self._index_of(product_id)
        if idx is None:
            return False
        if quantity < 1:
            logger.warning("Cart quantity ignored", product_id=product_id, quantity=quantity)
            return False
        self._lines[idx] = replace(self._lines[idx], quantity=quantity)
        return True

    def increment(self, product_id: str) -> bool:
        idx = self._index_of(product_id)
        if idx is None:
            return False
        return self.set_quantity(product_id, self._lines[idx].quantity + 1)

    def decrement(self, product_id: str) -> bool:
        """Lower the quantity by one, dropping the line when it would reach zero."""
        idx = self._index_of(product_id)
        if idx is None:
            return False
        current = self._lines[idx].quantity
        if current > 1:
            return self.set_quantity(product_id, current - 1)
        return self.remove_item(product_id)

    def remove_item(self, product_id: str) -> bool:
        idx = self._index_of(product_id)
        if idx is None:
            return False
        del self._lines[idx]
        logger.debug("Cart line removed", product_id=product_id)
        return True

    def clear(self) -> None:
        self._lines = []

    def get(self, product_id: str) -> OrderItem | None:
        idx = self._index_of(product_id)
        return None if idx is None else self._lines[idx]

    def items(self) -> list[OrderItem]:
        return list(self._lines)

    def subtotal(self, currency: str = DEFAULT_CURRENCY) -> Decimal:
        return quantize(sum((line.line_total for line in self._lines), Decimal("0")), currency)

    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)
