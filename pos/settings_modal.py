"""Shop and printer settings modal screen."""

from __future__ import annotations

from typing import Any, Callable

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Input, Static, Switch

from pos.errors import FormError
from pos.forms import parse_settings_form
from pos.models import AppSettings


class SettingsModal(ModalScreen[dict[str, Any] | None]):
    """Edit shop and printer settings; dismisses with SettingsStore.update kwargs."""

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        Binding("ctrl+s", "save", "Save", priority=True),
        Binding("ctrl+t", "test_print", "Test print", priority=True),
    ]

    CSS = """
    SettingsModal {
        align: center middle;
        background: $background 60%;
    }

    #settings-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    .settings-section {
        text-style: bold;
        margin-top: 1;
        color: white;
    }

    #printer-enabled-row {
        height: auto;
    }

    #settings-error {
        color: #ffb3b3;
        margin-top: 1;
    }

    #settings-help {
        color: #dddddd;
    }
    """

    def __init__(self, settings: AppSettings, request_test_print: Callable[[], None]) -> None:
        super().__init__()
        self.app_settings = settings
        self.request_test_print = request_test_print

    def compose(self) -> ComposeResult:
        settings = self.app_settings
        printer = settings.printer
        with Container(id="settings-dialog"):
            yield Static("General", classes="settings-section")
            yield Input(value=settings.shop_name, placeholder="Shop name", id="shop-name")
            yield Input(value=settings.currency, placeholder="Currency", id="currency")
            yield Input(value=settings.receipt_footer or "", placeholder="Receipt footer", id="receipt-footer")
            yield Input(value=str(settings.tax_rate), placeholder="Tax rate", id="tax-rate")
            yield Static("Printer", classes="settings-section")
            yield Input(value=printer.ip_address, placeholder="IP address", id="printer-ip")
            yield Input(value=str(printer.port), placeholder="Port", id="printer-port")
            with Horizontal(id="printer-enabled-row"):
                yield Static("Enabled ")
                yield Switch(value=printer.is_enabled, id="printer-enabled")
            yield Static(id="settings-error")
            yield Static("Ctrl+S save. Ctrl+T test print (saved settings). Esc cancel.", id="settings-help")

    def _value(self, widget_id: str) -> str:
        return self.query_one(f"#{widget_id}", Input).value

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_save()

    def action_save(self) -> None:
        try:
            changes = parse_settings_form(
                shop_name=self._value("shop-name"),
                currency=self._value("currency"),
                receipt_footer=self._value("receipt-footer"),
                tax_rate=self._value("tax-rate"),
                ip_address=self._value("printer-ip"),
                port=self._value("printer-port"),
                is_enabled=self.query_one("#printer-enabled", Switch).value,
            )
        except FormError as exc:
            self.query_one("#settings-error", Static).update(str(exc))
            return
        self.dismiss(changes)

    def action_test_print(self) -> None:
        self.request_test_print()

    def action_cancel(self) -> None:
        self.dismiss(None)
