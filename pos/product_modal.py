"""Add / edit product modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Input, Static, Switch

from pos.errors import FormError
from pos.forms import parse_product_form
from pos.models import Product, ProductDraft


class ProductModal(ModalScreen[ProductDraft | None]):
    """Form for a catalog product; dismisses with a validated ProductDraft."""

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        Binding("ctrl+s", "save", "Save", priority=True),
    ]

    CSS = """
    ProductModal {
        align: center middle;
        background: $background 60%;
    }

    #product-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #product-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #product-available-row {
        height: auto;
    }

    #product-error {
        color: #ffb3b3;
        margin-top: 1;
    }

    #product-help {
        color: #dddddd;
    }
    """

    def __init__(self, product: Product | None = None) -> None:
        super().__init__()
        self.product = product

    def compose(self) -> ComposeResult:
        product = self.product
        title = "Edit Product" if product else "Add Product"
        with Container(id="product-dialog"):
            yield Static(title, id="product-title")
            yield Input(value=product.name if product else "", placeholder="Name", id="product-name")
            yield Input(value=str(product.price) if product else "", placeholder="Price", id="product-price")
            yield Input(value=product.category if product else "", placeholder="Category", id="product-category")
            yield Input(
                value=(product.description or "") if product else "",
                placeholder="Description (optional)",
                id="product-description",
            )
            yield Input(value=(product.image or "") if product else "", placeholder="Image URL (optional)", id="product-image")
            with Horizontal(id="product-available-row"):
                yield Static("Available ")
                yield Switch(value=product.is_available if product else True, id="product-available")
            yield Static(id="product-error")
            yield Static("Ctrl+S save. Esc cancel.", id="product-help")

    def _value(self, widget_id: str) -> str:
        return self.query_one(f"#{widget_id}", Input).value

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_save()

    def action_save(self) -> None:
        try:
            draft = parse_product_form(
                name=self._value("product-name"),
                price=self._value("product-price"),
                category=self._value("product-category"),
                description=self._value("product-description"),
                image=self._value("product-image"),
                is_available=self.query_one("#product-available", Switch).value,
            )
        except FormError as exc:
            self.query_one("#product-error", Static).update(str(exc))
            return
        self.dismiss(draft)

    def action_cancel(self) -> None:
        self.dismiss(None)
