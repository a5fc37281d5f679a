"""Validation of operator input before it reaches the stores."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pos.config import DEFAULT_PRINTER_PORT, MAX_PRODUCT_PRICE
from pos.errors import FormError
from pos.models import PrinterSettings, Product, ProductDraft
from pos.money import to_decimal


def _required(field: str, value: str, label: str) -> str:
    cleaned = value.strip()
    if not cleaned:
        raise FormError(field, f"{label} is required.")
    return cleaned


def _optional(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def parse_price(raw: str) -> Decimal:
    cleaned = _required("price", raw, "Price")
    try:
        price = to_decimal(cleaned)
    except ValueError as exc:
        raise FormError("price", "Price must be a number.") from exc
    if not price.is_finite():
        raise FormError("price", "Price must be a number.")
    if price < 0:
        raise FormError("price", "Price cannot be negative.")
    if price > to_decimal(MAX_PRODUCT_PRICE):
        raise FormError("price", f"Price cannot exceed {MAX_PRODUCT_PRICE}.")
    return price


def parse_product_form(
    name: str,
    price: str,
    category: str,
    description: str | None = None,
    image: str | None = None,
    is_available: bool = True,
) -> ProductDraft:
    """Build a ProductDraft, raising FormError on the first invalid field."""
    return ProductDraft(
        name=_required("name", name, "Name"),
        price=parse_price(price),
        category=_required("category", category, "Category"),
        is_available=is_available,
        description=_optional(description),
        image=_optional(image),
    )


def apply_product_form(product: Product, draft: ProductDraft) -> Product:
    """Edited copy of ``product`` keeping its id."""
    return draft.with_id(product.id)


def _lenient_decimal(raw: str, fallback: Decimal) -> Decimal:
    try:
        value = to_decimal(raw)
    except ValueError:
        return fallback
    return value if value.is_finite() else fallback


def _lenient_int(raw: str, fallback: int) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        return fallback


def parse_settings_form(
    shop_name: str,
    currency: str,
    receipt_footer: str,
    tax_rate: str,
    ip_address: str,
    port: str,
    is_enabled: bool,
) -> dict[str, Any]:
    """
    Turn the settings screen fields into keyword arguments for SettingsStore.update.

    Unparsable tax rate and port fall back to 0 and 9100, the same defaults
    the screen starts from. Values that parse but are out of range are errors.
    """
    tax = _lenient_decimal(tax_rate, Decimal("0"))
    if tax < 0:
        raise FormError("tax_rate", "Tax rate cannot be negative.")

    port_number = _lenient_int(port, DEFAULT_PRINTER_PORT)
    if not (1 <= port_number <= 65535):
        raise FormError("port", "Port must be between 1 and 65535.")

    return {
        "shop_name": _required("shop_name", shop_name, "Shop name"),
        "currency": _required("currency", currency, "Currency").upper(),
        "receipt_footer": _optional(receipt_footer),
        "tax_rate": tax,
        "printer": PrinterSettings(
            ip_address=_required("ip_address", ip_address, "Printer IP address"),
            port=port_number,
            is_enabled=is_enabled,
        ),
    }
