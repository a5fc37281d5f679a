"""Rich text helpers for the terminal screens."""

from __future__ import annotations

from rich.text import Text

from pos.models import Order, OrderItem, OrderStatus, Product
from pos.money import format_amount
from pos.receipt import short_order_id


def badge_style(status: OrderStatus) -> str:
    """Return a consistent badge style for order statuses."""
    if status is OrderStatus.NEW:
        return "bold #ffffff on #2f6db5"
    if status is OrderStatus.PROCESSING:
        return "bold #0b1f0f on #e0b341"
    if status is OrderStatus.COMPLETED:
        return "bold #0b1f0f on #5fbf72"
    return "bold #ffffff on #b23a48"


def format_status_badge(status: OrderStatus) -> Text:
    return Text(f" {status.label} ", style=badge_style(status))


def format_product_label(product: Product, currency: str) -> Text:
    """Render a catalog row; unavailable products are dimmed."""
    text = Text()
    style = "" if product.is_available else "dim strike"
    text.append(product.name, style=style)
    text.append(f"  {format_amount(product.price, currency)}", style="dim" if not product.is_available else "")
    text.append(f"  [{product.category}]", style="italic dim")
    return text


def format_cart_line(item: OrderItem, currency: str) -> Text:
    text = Text()
    text.append(f"{item.quantity} x ", style="bold")
    text.append(item.product_name)
    text.append(f"  @ {format_amount(item.unit_price, currency)}", style="dim")
    text.append(f"  = {format_amount(item.line_total, currency)}")
    return text


def format_order_header(order: Order) -> Text:
    text = Text()
    text.append(f"#{short_order_id(order.id)} ", style="bold")
    text.append_text(format_status_badge(order.status))
    text.append(f"  {order.created_at.strftime('%Y-%m-%d %H:%M')}")
    text.append(f"  {format_amount(order.total, order.currency)}", style="bold")
    if order.table_number:
        text.append(f"  table {order.table_number}", style="italic")
    return text
