"""Delivery of receipts to a network ESC/POS printer."""

from __future__ import annotations

from typing import Any, Callable

import structlog

from pos.config import PRINTER_TIMEOUT_SECONDS
from pos.models import Order, PrinterSettings, PrintResult
from pos.receipt import render_receipt, short_order_id

logger = structlog.get_logger(__name__)

PrinterFactory = Callable[..., Any]

PRINTER_DISABLED_MESSAGE = "Printer is not enabled in settings"
PRINTER_SUCCESS_MESSAGE = "Order successfully sent to printer"

# Blank lines fed before the cut so the footer clears the tear bar.
_FEED_LINES_BEFORE_CUT = 3


def check_printer_dependencies() -> tuple[bool, str]:
    """Check whether the ESC/POS backend is importable."""
    try:
        from escpos.printer import Network  # noqa: F401
    except Exception as exc:
        return (False, f"Printer deps unavailable: {exc}")
    return (True, "Printer ready")


def _network_printer(host: str, port: int, timeout: int) -> Any:
    try:
        from escpos.printer import Network
    except Exception as exc:
        raise RuntimeError(f"Printer dependencies unavailable: {exc}") from exc
    return Network(host, port=port, timeout=timeout)


def print_receipt(
    order: Order,
    printer_settings: PrinterSettings,
    shop_name: str,
    footer: str | None = None,
    connect: PrinterFactory | None = None,
) -> PrintResult:
    """
    Send the order's receipt to the configured printer.

    Never raises: delivery problems come back as an unsuccessful PrintResult,
    and the order itself is not touched either way. A disabled printer is
    declined without opening a connection.
    """
    if not printer_settings.is_enabled:
        return PrintResult(success=False, message=PRINTER_DISABLED_MESSAGE)

    factory = connect or _network_printer
    log = logger.bind(
        order_id=short_order_id(order.id),
        host=printer_settings.ip_address,
        port=printer_settings.port,
    )

    printer = None
    try:
        receipt = render_receipt(order, shop_name, footer=footer)
        printer = factory(printer_settings.ip_address, port=printer_settings.port, timeout=PRINTER_TIMEOUT_SECONDS)
        printer.text(receipt)
        printer.text("\n" * _FEED_LINES_BEFORE_CUT)
        printer.cut()
    except Exception as exc:
        log.warning("Receipt print failed", error=repr(exc))
        return PrintResult(success=False, message=f"Failed to print: {exc}")
    finally:
        if printer is not None:
            try:
                printer.close()
            except Exception as exc:
                log.debug("Printer close failed", error=repr(exc))

    log.info("Receipt printed", lines=receipt.count("\n"))
    return PrintResult(success=True, message=PRINTER_SUCCESS_MESSAGE)
