"""Shop configuration store."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

import structlog

from pos.config import (
    DEFAULT_CURRENCY,
    DEFAULT_PRINTER_IP,
    DEFAULT_PRINTER_PORT,
    DEFAULT_RECEIPT_FOOTER,
    DEFAULT_SHOP_NAME,
    DEFAULT_TAX_RATE,
)
from pos.models import AppSettings, PrinterSettings

logger = structlog.get_logger(__name__)


def default_settings() -> AppSettings:
    return AppSettings(
        printer=PrinterSettings(ip_address=DEFAULT_PRINTER_IP, port=DEFAULT_PRINTER_PORT, is_enabled=False),
        shop_name=DEFAULT_SHOP_NAME,
        currency=DEFAULT_CURRENCY,
        tax_rate=DEFAULT_TAX_RATE,
        receipt_footer=DEFAULT_RECEIPT_FOOTER,
    )


class SettingsStore:
    """Holds the single AppSettings instance for one POS context."""

    def __init__(self, initial: AppSettings | None = None) -> None:
        self._settings = initial or default_settings()

    def get(self) -> AppSettings:
        return self._settings

    def update(self, **changes: Any) -> AppSettings:
        """Shallow-merge ``changes`` into the current settings.

        Top-level fields not named are kept. ``printer`` is swapped as a whole,
        so it must be a complete PrinterSettings. Unknown fields raise
        TypeError and invalid values raise ValueError; either way the stored
        settings stay as they were.
        """
        updated = replace(self._settings, **changes)
        self._settings = updated
        logger.info("Settings updated", fields=sorted(changes))
        return updated

    def reset(self) -> AppSettings:
        self._settings = default_settings()
        return self._settings
