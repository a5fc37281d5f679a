"""Plain-text receipt assembly for the network printer."""

from __future__ import annotations

from datetime import datetime, timezone

from pos.config import DEFAULT_CURRENCY, RECEIPT_ORDER_ID_CHARS, RECEIPT_WIDTH_CHARS
from pos.models import Order, OrderItem, OrderStatus
from pos.money import format_amount
from pos.orders import order_total

_RULE = "-" * RECEIPT_WIDTH_CHARS


def short_order_id(order_id: str) -> str:
    return order_id[:RECEIPT_ORDER_ID_CHARS]


def _fit(text: str, width: int = RECEIPT_WIDTH_CHARS) -> str:
    if len(text) <= width:
        return text
    return f"{text[: width - 3]}..."


def _two_columns(left: str, right: str, width: int = RECEIPT_WIDTH_CHARS) -> str:
    gap = width - len(left) - len(right)
    if gap < 1:
        return f"{left} {right}"
    return f"{left}{' ' * gap}{right}"


def _item_lines(item: OrderItem, currency: str) -> list[str]:
    detail = f"  {item.quantity} x {format_amount(item.unit_price, currency)}"
    return [
        _fit(item.product_name),
        _two_columns(detail, format_amount(item.line_total, currency)),
    ]


def render_receipt(order: Order, shop_name: str, footer: str | None = None) -> str:
    """
    Render ``order`` as fixed-width receipt text.

    The output depends only on the arguments: the timestamp printed is the
    order's commit time, not the time of printing, and amounts use the
    currency the order was committed in.
    """
    currency = order.currency
    lines = [
        _fit(shop_name),
        _RULE,
        f"ORDER #{short_order_id(order.id)}",
        order.created_at.strftime("%Y-%m-%d %H:%M"),
    ]
    if order.table_number:
        lines.append(_fit(f"TABLE: {order.table_number}"))
    if order.notes:
        lines.append(_fit(f"NOTES: {order.notes}"))
    lines.append(_RULE)

    for item in order.items:
        lines.extend(_item_lines(item, currency))

    lines.append(_RULE)
    lines.append(f"TOTAL: {format_amount(order.total, currency)}")
    lines.append(_RULE)

    if footer:
        lines.append("")
        lines.append(footer)

    return "\n".join(lines) + "\n"


def build_test_order(now: datetime | None = None, currency: str = DEFAULT_CURRENCY) -> Order:
    """Sample order used by the settings screen's test print."""
    created_at = now or datetime.now(timezone.utc)
    items = (
        OrderItem(product_id="test1", product_name="Test Product 1", quantity=1, unit_price="9.99"),
        OrderItem(product_id="test2", product_name="Test Product 2", quantity=2, unit_price="4.99"),
    )
    return Order(
        id=f"TEST-{int(created_at.timestamp() * 1000)}",
        items=items,
        total=order_total(items, currency),
        status=OrderStatus.NEW,
        created_at=created_at,
        currency=currency,
    )
