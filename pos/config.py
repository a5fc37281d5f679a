"""Runtime configuration defaults for settings, receipts and printing."""

from __future__ import annotations

DEFAULT_SHOP_NAME = "Driwich"
DEFAULT_RECEIPT_FOOTER = "Thank you for your order!"
DEFAULT_CURRENCY = "USD"
DEFAULT_TAX_RATE = "0"

# Upper bound accepted by the product form.
MAX_PRODUCT_PRICE = "1000000"

DEFAULT_PRINTER_IP = "192.168.1.1"
DEFAULT_PRINTER_PORT = 9100
PRINTER_TIMEOUT_SECONDS = 10

RECEIPT_WIDTH_CHARS = 32
RECEIPT_ORDER_ID_CHARS = 8

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "KRW": "₩",
    "VND": "₫",
}

# Currencies without a minor unit; everything else rounds to cents.
CURRENCY_MINOR_UNITS: dict[str, int] = {
    "JPY": 0,
    "KRW": 0,
    "VND": 0,
}
DEFAULT_MINOR_UNITS = 2

LOG_PATH = "/tmp/driwich-pos.log"
LOG_LEVEL = "INFO"
LOG_PATH_ENV = "POS_LOG_PATH"
LOG_LEVEL_ENV = "POS_LOG_LEVEL"
