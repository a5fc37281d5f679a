"""Main Textual app class."""

from __future__ import annotations

from dataclasses import replace

import structlog
from rich.text import Text
from textual import work
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Footer, Header, Static

from pos.context import PosContext
from pos.errors import EmptyCartError
from pos.forms import apply_product_form
from pos.models import AppSettings, Order, OrderItem, PrintResult, Product, ProductDraft
from pos.money import format_amount
from pos.order_details_modal import OrderDetails, OrderDetailsModal
from pos.orders_screen import OrdersScreen
from pos.printer import check_printer_dependencies
from pos.product_modal import ProductModal
from pos.receipt import short_order_id
from pos.rendering import format_cart_line, format_product_label
from pos.settings_modal import SettingsModal

logger = structlog.get_logger(__name__)

CATALOG_PANE = "catalog"
CART_PANE = "cart"


class PosApp(App):
    """A Textual app for building carts from the catalog and committing orders."""

    TITLE = "Driwich POS"
    SUB_TITLE = "Order"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #catalog-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #cart-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #catalog-list, #cart-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-summary {
        height: 2;
        padding: 0 1;
        text-style: bold;
    }

    #status-bar {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    active_pane = reactive(CATALOG_PANE)
    catalog_index = reactive(0)
    cart_index = reactive(0)

    BINDINGS = [
        ("up", "move(-1)", "Up"),
        ("down", "move(1)", "Down"),
        ("k", "move(-1)", "Up"),
        ("j", "move(1)", "Down"),
        ("left", "focus_pane('catalog')", "Menu"),
        ("right", "focus_pane('cart')", "Cart"),
        ("h", "focus_pane('catalog')", "Menu"),
        ("l", "focus_pane('cart')", "Cart"),
        ("enter", "add_selected", "Add to cart"),
        ("d", "remove_line", "Remove line"),
        ("x", "clear_cart", "Clear cart"),
        ("ctrl+s", "commit_order", "Create order"),
        ("a", "add_product", "New product"),
        ("e", "edit_product", "Edit product"),
        ("v", "toggle_available", "Toggle availability"),
        ("delete", "delete_product", "Delete product"),
        ("o", "show_orders", "Orders"),
        ("s", "show_settings", "Settings"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, store: PosContext | None = None) -> None:
        super().__init__()
        self.store = store or PosContext()
        self.system_status = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="catalog-pane"):
                yield Static("Menu", classes="pane-title")
                yield Static(id="catalog-list")
            with Vertical(id="cart-pane"):
                yield Static("Order Summary", classes="pane-title")
                yield Static(id="cart-list")
                yield Static(id="cart-summary")
        yield Static(id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        _, msg = check_printer_dependencies()
        self.system_status = msg
        logger.info("App mounted", printer_status=msg)
        self._refresh_all()

    @property
    def currency(self) -> str:
        return self.store.settings.get().currency

    def _modal_open(self) -> bool:
        return isinstance(self.screen, ModalScreen)

    def _set_status(self, message: str) -> None:
        self.system_status = message
        self._refresh_status()

    def on_key(self, event: Key) -> None:
        if self._modal_open() or self.active_pane != CART_PANE:
            return
        if event.character in {"+", "="}:
            self._change_quantity(1)
            event.stop()
        elif event.character == "-":
            self._change_quantity(-1)
            event.stop()

    # Navigation

    def action_focus_pane(self, pane: str) -> None:
        if self._modal_open():
            return
        self.active_pane = pane
        self._refresh_all()

    def action_move(self, delta: int) -> None:
        if self._modal_open():
            return
        if self.active_pane == CATALOG_PANE:
            total = len(self.store.catalog)
            if total:
                self.catalog_index = (self.catalog_index + delta) % total
            self._refresh_catalog()
        else:
            total = len(self.store.cart)
            if total:
                self.cart_index = (self.cart_index + delta) % total
            self._refresh_cart()

    # Cart

    def action_add_selected(self) -> None:
        if self._modal_open() or self.active_pane != CATALOG_PANE:
            return
        product = self._selected_product()
        if product is None:
            return
        if not product.is_available:
            self._set_status(f"{product.name} is not available")
            return
        line = self.store.cart.add_product(product)
        self._set_status(f"{line.product_name} x{line.quantity}")
        self._refresh_cart()

    def _change_quantity(self, delta: int) -> None:
        line = self._selected_line()
        if line is None:
            return
        if delta > 0:
            self.store.cart.increment(line.product_id)
        else:
            self.store.cart.decrement(line.product_id)
        self._refresh_cart()

    def action_remove_line(self) -> None:
        if self._modal_open() or self.active_pane != CART_PANE:
            return
        line = self._selected_line()
        if line is None:
            return
        self.store.cart.remove_item(line.product_id)
        self._refresh_cart()

    def action_clear_cart(self) -> None:
        if self._modal_open():
            return
        self.store.cart.clear()
        self.cart_index = 0
        self._set_status("Cart cleared")
        self._refresh_cart()

    # Orders

    def action_commit_order(self) -> None:
        if self._modal_open():
            return
        if self.store.cart.is_empty():
            self.notify("Cannot create an empty order", title="Error", severity="error")
            return
        self.push_screen(OrderDetailsModal(), self._commit_with_details)

    def _commit_with_details(self, details: OrderDetails | None) -> None:
        if details is None:
            self._set_status("Order not created")
            return
        try:
            order = self.store.commit(notes=details.notes, table_number=details.table_number)
        except EmptyCartError as exc:
            self.notify(str(exc), title="Error", severity="error")
            return

        self.cart_index = 0
        self._set_status(f"Order created: #{short_order_id(order.id)}")
        self._refresh_cart()

        settings = self.store.settings.get()
        if settings.printer.is_enabled:
            self.print_order(order)

    def print_order(self, order: Order) -> None:
        """Print in a worker thread with a settings snapshot taken now."""
        self._print_worker(order, self.store.settings.get())

    @work(thread=True, group="printer")
    def _print_worker(self, order: Order, settings: AppSettings) -> None:
        result = self.store.print_order(order, settings)
        self.call_from_thread(self._report_print_result, result)

    def _report_print_result(self, result: PrintResult) -> None:
        if result.success:
            self.notify(result.message, title="Printed")
        else:
            self.notify(result.message, title="Print Error", severity="error")
        self._set_status(result.message)

    def action_show_orders(self) -> None:
        if self._modal_open():
            return
        self.push_screen(OrdersScreen(self.store, print_callback=self.print_order))

    # Products

    def action_add_product(self) -> None:
        if self._modal_open():
            return
        self.push_screen(ProductModal(), self._store_new_product)

    def _store_new_product(self, draft: ProductDraft | None) -> None:
        if draft is None:
            return
        product = self.store.catalog.add(draft)
        self.catalog_index = len(self.store.catalog) - 1
        self._set_status(f"Added {product.name}")
        self._refresh_catalog()

    def action_edit_product(self) -> None:
        if self._modal_open():
            return
        product = self._selected_product()
        if product is None:
            return

        def store_edit(draft: ProductDraft | None) -> None:
            if draft is None:
                return
            self.store.catalog.update(apply_product_form(product, draft))
            self._set_status(f"Updated {draft.name}")
            self._refresh_catalog()

        self.push_screen(ProductModal(product), store_edit)

    def action_toggle_available(self) -> None:
        if self._modal_open():
            return
        product = self._selected_product()
        if product is None:
            return
        self.store.catalog.update(replace(product, is_available=not product.is_available))
        self._refresh_catalog()

    def action_delete_product(self) -> None:
        if self._modal_open():
            return
        product = self._selected_product()
        if product is None:
            return
        self.store.catalog.remove(product.id)
        self.catalog_index = max(0, min(self.catalog_index, len(self.store.catalog) - 1))
        self._set_status(f"Deleted {product.name}")
        self._refresh_catalog()

    # Settings

    def action_show_settings(self) -> None:
        if self._modal_open():
            return
        self.push_screen(
            SettingsModal(self.store.settings.get(), request_test_print=self._test_print),
            self._store_settings,
        )

    def _store_settings(self, changes: dict | None) -> None:
        if changes is None:
            return
        self.store.settings.update(**changes)
        self._set_status("Settings saved successfully")
        self._refresh_all()

    def _test_print(self) -> None:
        settings = self.store.settings.get()
        if not settings.printer.is_enabled:
            self.notify("Printer is not enabled", title="Error", severity="error")
            return
        self._test_print_worker()

    @work(thread=True, group="printer")
    def _test_print_worker(self) -> None:
        result = self.store.test_print()
        self.call_from_thread(self._report_print_result, result)

    # Rendering

    def _selected_product(self) -> Product | None:
        products = self.store.catalog.list()
        if not (0 <= self.catalog_index < len(products)):
            return None
        return products[self.catalog_index]

    def _selected_line(self) -> OrderItem | None:
        lines = self.store.cart.items()
        if not (0 <= self.cart_index < len(lines)):
            return None
        return lines[self.cart_index]

    def _refresh_all(self) -> None:
        self._refresh_catalog()
        self._refresh_cart()
        self._refresh_status()

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            start = max(0, selected - rows // 2)
            start = min(start, total - rows)

        return (start, start + rows)

    def _render_rows(self, widget: Static, rows: list[Text], selected: int, active: bool) -> None:
        start, end = self._window_bounds(len(rows), self._visible_rows(widget), selected)
        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if active and idx == selected else "  "
            lines.append(pointer)
            lines.append_text(rows[idx])
        if end < len(rows):
            lines.append("\n⋮", style="dim")
        widget.update(lines)

    def _refresh_catalog(self) -> None:
        try:
            widget = self.query_one("#catalog-list", Static)
        except NoMatches:
            return
        products = self.store.catalog.list()
        if not products:
            widget.update("No products available. Press A to add one.")
            return
        self.catalog_index = min(self.catalog_index, len(products) - 1)
        rows = [format_product_label(product, self.currency) for product in products]
        self._render_rows(widget, rows, self.catalog_index, self.active_pane == CATALOG_PANE)

    def _refresh_cart(self) -> None:
        try:
            widget = self.query_one("#cart-list", Static)
            summary = self.query_one("#cart-summary", Static)
        except NoMatches:
            return
        lines = self.store.cart.items()
        if not lines:
            widget.update("Your cart is empty\nAdd items from the menu to create an order")
            summary.update("")
            return
        self.cart_index = min(self.cart_index, len(lines) - 1)
        rows = [format_cart_line(line, self.currency) for line in lines]
        self._render_rows(widget, rows, self.cart_index, self.active_pane == CART_PANE)
        subtotal = format_amount(self.store.cart.subtotal(self.currency), self.currency)
        summary.update(f"Items ({len(lines)})  Subtotal {subtotal}")

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        shop = self.store.settings.get().shop_name
        bar.update(f"{shop} · {self.system_status or 'Ready'}")
