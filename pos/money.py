"""Decimal helpers for prices and totals."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from pos.config import CURRENCY_MINOR_UNITS, CURRENCY_SYMBOLS, DEFAULT_CURRENCY, DEFAULT_MINOR_UNITS

Amount = Decimal | int | float | str


def to_decimal(value: Amount) -> Decimal:
    """Convert a price-like value to Decimal without float artefacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not an amount: {value!r}")
    try:
        # str() first so 3.5 becomes Decimal("3.5"), not its binary expansion.
        return Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Not an amount: {value!r}") from exc


def minor_units(currency: str) -> int:
    return CURRENCY_MINOR_UNITS.get(currency.upper(), DEFAULT_MINOR_UNITS)


def quantize(value: Amount, currency: str = DEFAULT_CURRENCY) -> Decimal:
    """Round half-up to the currency's minor unit."""
    exponent = Decimal(1).scaleb(-minor_units(currency))
    try:
        return to_decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"Amount out of range: {value!r}") from exc


def format_amount(value: Amount, currency: str = DEFAULT_CURRENCY) -> str:
    """Format an amount with the currency symbol, e.g. ``$13.50`` or ``CHF 4.00``."""
    amount = quantize(value, currency)
    symbol = CURRENCY_SYMBOLS.get(currency.upper())
    if symbol is None:
        return f"{currency.upper()} {amount}"
    if amount < 0:
        return f"-{symbol}{-amount}"
    return f"{symbol}{amount}"
