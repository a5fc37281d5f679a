"""Application-root container for all mutable POS state."""

from __future__ import annotations

from typing import Callable

import structlog

from pos.cart import CartStore
from pos.catalog import CatalogStore
from pos.errors import InvalidTransitionError
from pos.ids import new_id
from pos.models import AppSettings, Order, OrderStatus, PrintResult
from pos.orders import OrderHistory, can_transition
from pos.printer import PrinterFactory, print_receipt
from pos.receipt import build_test_order
from pos.settings import SettingsStore

logger = structlog.get_logger(__name__)


class PosContext:
    """
    Catalog, cart, order history and settings for one POS session.

    Built by the application root and handed to whatever needs it; every
    instance starts empty with default settings.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        id_factory: Callable[[], str] = new_id,
        printer_factory: PrinterFactory | None = None,
    ) -> None:
        self.catalog = CatalogStore(id_factory=id_factory)
        self.cart = CartStore()
        self.orders = OrderHistory(id_factory=id_factory)
        self.settings = SettingsStore(settings)
        self._printer_factory = printer_factory

    def commit(self, notes: str | None = None, table_number: str | None = None) -> Order:
        """Turn the cart into a new order and empty the cart.

        Raises EmptyCartError, with both stores untouched, when the cart has
        no lines.
        """
        order = self.orders.commit(
            self.cart.items(),
            currency=self.settings.get().currency,
            notes=notes,
            table_number=table_number,
        )
        self.cart.clear()
        return order

    def transition_order(self, order_id: str, status: OrderStatus | str) -> Order:
        """Apply the status policy, then set the status."""
        order = self.orders.get(order_id)
        if order is None:
            raise KeyError(order_id)
        target = OrderStatus(status)
        if not can_transition(order.status, target):
            raise InvalidTransitionError(order.status.value, target.value)
        self.orders.set_status(order_id, target)
        return self.orders.get(order_id)

    def print_order(self, order: Order, settings: AppSettings | None = None) -> PrintResult:
        """Hand a committed order to the printer; never changes stored state."""
        settings = settings or self.settings.get()
        result = print_receipt(
            order,
            settings.printer,
            settings.shop_name,
            footer=settings.receipt_footer,
            connect=self._printer_factory,
        )
        if not result.success:
            logger.info("Print not delivered", order_id=order.id, message=result.message)
        return result

    def test_print(self) -> PrintResult:
        return self.print_order(build_test_order(currency=self.settings.get().currency))
