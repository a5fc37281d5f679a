"""Committed order history and the order status policy."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Iterable

import structlog

from pos.config import DEFAULT_CURRENCY
from pos.errors import EmptyCartError
from pos.ids import new_id
from pos.models import Order, OrderItem, OrderStatus
from pos.money import quantize

logger = structlog.get_logger(__name__)

_ALLOWED_NEXT: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.NEW: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.COMPLETED, OrderStatus.CANCELLED}),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

_FORWARD_STEP: dict[OrderStatus, OrderStatus] = {
    OrderStatus.NEW: OrderStatus.PROCESSING,
    OrderStatus.PROCESSING: OrderStatus.COMPLETED,
}


def allowed_next(status: OrderStatus | str) -> frozenset[OrderStatus]:
    """Statuses an order in ``status`` may move to."""
    return _ALLOWED_NEXT[OrderStatus(status)]


def can_transition(current: OrderStatus | str, target: OrderStatus | str) -> bool:
    return OrderStatus(target) in allowed_next(current)


def next_status(status: OrderStatus | str) -> OrderStatus | None:
    """The forward step offered as the primary action, or None when terminal."""
    return _FORWARD_STEP.get(OrderStatus(status))


def is_terminal(status: OrderStatus | str) -> bool:
    return not allowed_next(status)


def order_total(lines: Iterable[OrderItem], currency: str = DEFAULT_CURRENCY) -> Decimal:
    return quantize(sum((line.line_total for line in lines), Decimal("0")), currency)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class OrderHistory:
    """Committed orders, most recent first.

    ``set_status`` is a data-layer primitive and accepts any status; the
    transition policy above is applied by whoever picks the status.
    """

    def __init__(self, id_factory: Callable[[], str] = new_id) -> None:
        self._orders: list[Order] = []
        self._id_factory = id_factory

    def commit(
        self,
        lines: Iterable[OrderItem],
        currency: str = DEFAULT_CURRENCY,
        notes: str | None = None,
        table_number: str | None = None,
        now: datetime | None = None,
    ) -> Order:
        copied = tuple(lines)
        if not copied:
            logger.info("Order commit rejected", reason="empty_cart")
            raise EmptyCartError()

        order = Order(
            id=self._id_factory(),
            items=copied,
            total=order_total(copied, currency),
            status=OrderStatus.NEW,
            created_at=now or _utc_now(),
            notes=notes or None,
            table_number=table_number or None,
            currency=currency,
        )
        self._orders.insert(0, order)
        logger.info("Order committed", order_id=order.id, lines=len(order.items), total=str(order.total))
        return order

    def set_status(self, order_id: str, status: OrderStatus | str) -> bool:
        status = OrderStatus(status)
        for idx, order in enumerate(self._orders):
            if order.id == order_id:
                self._orders[idx] = replace(order, status=status)
                logger.info("Order status changed", order_id=order_id, previous=order.status.value, status=status.value)
                return True
        logger.debug("Order status change ignored", order_id=order_id, reason="not_found")
        return False

    def get(self, order_id: str) -> Order | None:
        return next((order for order in self._orders if order.id == order_id), None)

    def list(self) -> list[Order]:
        return list(self._orders)

    def by_status(self, status: OrderStatus | str) -> list[Order]:
        status = OrderStatus(status)
        return [order for order in self._orders if order.status is status]

    def __len__(self) -> int:
        return len(self._orders)
