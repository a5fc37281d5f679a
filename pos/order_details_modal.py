"""Table number and notes prompt shown before an order is created."""

from __future__ import annotations

from dataclasses import dataclass

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Input, Static


@dataclass(frozen=True)
class OrderDetails:
    table_number: str | None = None
    notes: str | None = None


class OrderDetailsModal(ModalScreen[OrderDetails | None]):
    """Collect optional table number and notes, then confirm the order."""

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        Binding("ctrl+s", "confirm", "Create order", priority=True),
    ]

    CSS = """
    OrderDetailsModal {
        align: center middle;
        background: $background 60%;
    }

    #order-details-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #order-details-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #order-details-help {
        color: #dddddd;
        margin-top: 1;
    }
    """

    def compose(self) -> ComposeResult:
        with Container(id="order-details-dialog"):
            yield Static("Create Order", id="order-details-title")
            yield Input(placeholder="Table number (optional)", id="table-number")
            yield Input(placeholder="Notes (optional)", id="order-notes")
            yield Static("Enter or Ctrl+S create. Esc cancel.", id="order-details-help")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_confirm()

    def action_confirm(self) -> None:
        table_number = self.query_one("#table-number", Input).value.strip()
        notes = self.query_one("#order-notes", Input).value.strip()
        self.dismiss(OrderDetails(table_number=table_number or None, notes=notes or None))

    def action_cancel(self) -> None:
        self.dismiss(None)
