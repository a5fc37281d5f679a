"""Order history screen with status actions and receipt printing."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from pos.context import PosContext
from pos.errors import InvalidTransitionError
from pos.models import Order, OrderStatus
from pos.money import format_amount
from pos.orders import allowed_next, next_status
from pos.rendering import format_order_header

_ACTION_LABELS: dict[OrderStatus, str] = {
    OrderStatus.PROCESSING: "Start Processing",
    OrderStatus.COMPLETED: "Complete Order",
}


class OrdersScreen(ModalScreen[None]):
    """Most-recent-first order list. Only transitions the policy allows are offered."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("n", "advance", "Next status"),
        ("c", "cancel_order", "Cancel order"),
        ("p", "print_receipt", "Print receipt"),
    ]

    CSS = """
    OrdersScreen {
        align: center middle;
        background: $background 60%;
    }

    #orders-dialog {
        width: 80;
        height: 80%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #orders-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #orders-body {
        height: 1fr;
        color: white;
    }

    #orders-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(self, store: PosContext, print_callback: Callable[[Order], None]) -> None:
        super().__init__()
        self.store = store
        self.print_callback = print_callback

    def compose(self) -> ComposeResult:
        with Container(id="orders-dialog"):
            yield Static("Order History", id="orders-title")
            yield Static(id="orders-body")
            yield Static(id="orders-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def _selected_order(self) -> Order | None:
        orders = self.store.orders.list()
        if not (0 <= self.cursor_index < len(orders)):
            return None
        return orders[self.cursor_index]

    def action_move_cursor(self, delta: int) -> None:
        total = len(self.store.orders)
        if not total:
            return
        self.cursor_index = (self.cursor_index + delta) % total
        self._refresh_content()

    def _transition(self, target: OrderStatus) -> None:
        order = self._selected_order()
        if order is None:
            return
        try:
            self.store.transition_order(order.id, target)
        except InvalidTransitionError as exc:
            self.app.notify(str(exc), severity="warning")
            return
        self._refresh_content()

    def action_advance(self) -> None:
        order = self._selected_order()
        if order is None:
            return
        target = next_status(order.status)
        if target is None:
            return
        self._transition(target)

    def action_cancel_order(self) -> None:
        order = self._selected_order()
        if order is None or OrderStatus.CANCELLED not in allowed_next(order.status):
            return
        self._transition(OrderStatus.CANCELLED)

    def action_print_receipt(self) -> None:
        order = self._selected_order()
        if order is None:
            return
        if not self.store.settings.get().printer.is_enabled:
            self.app.notify("Please configure your printer in Settings.", title="Printer Not Configured", severity="warning")
            return
        self.print_callback(order)

    def action_close(self) -> None:
        self.dismiss()

    def _help_text(self, order: Order | None) -> str:
        parts = ["j/k move"]
        if order is not None:
            target = next_status(order.status)
            if target is not None:
                parts.append(f"n {_ACTION_LABELS[target]}")
            if OrderStatus.CANCELLED in allowed_next(order.status):
                parts.append("c Cancel")
            parts.append("p Print")
        parts.append("Esc close")
        return " · ".join(parts)

    def _refresh_content(self) -> None:
        body = self.query_one("#orders-body", Static)
        help_widget = self.query_one("#orders-help", Static)
        orders = self.store.orders.list()
        if not orders:
            body.update("No Orders Yet\nOrders you create will appear here.")
            help_widget.update("Esc close")
            return

        self.cursor_index = min(self.cursor_index, len(orders) - 1)
        lines = Text()
        for idx, order in enumerate(orders):
            if idx > 0:
                lines.append("\n")
            lines.append("➤ " if idx == self.cursor_index else "  ")
            lines.append_text(format_order_header(order))
            if idx != self.cursor_index:
                continue
            for item in order.items:
                lines.append(
                    f"\n      {item.quantity} x {item.product_name}  {format_amount(item.line_total, order.currency)}",
                    style="dim",
                )
            if order.notes:
                lines.append(f"\n      notes: {order.notes}", style="italic")

        body.update(lines)
        help_widget.update(self._help_text(self._selected_order()))
