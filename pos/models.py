"""Domain models for the point-of-sale stores."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

from pos.config import DEFAULT_CURRENCY
from pos.money import to_decimal


def _freeze_amount(instance: object, name: str) -> Decimal:
    value = to_decimal(getattr(instance, name))
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    object.__setattr__(instance, name, value)
    return value


@dataclass(frozen=True)
class ProductDraft:
    """Operator input for a new catalog product, before an id is assigned."""

    name: str
    price: Decimal
    category: str
    is_available: bool = True
    description: str | None = None
    image: str | None = None

    def __post_init__(self) -> None:
        _freeze_amount(self, "price")

    def with_id(self, product_id: str) -> Product:
        return Product(
            id=product_id,
            name=self.name,
            price=self.price,
            category=self.category,
            is_available=self.is_available,
            description=self.description,
            image=self.image,
        )


@dataclass(frozen=True)
class Product:
    """A sellable catalog product."""

    id: str
    name: str
    price: Decimal
    category: str
    is_available: bool = True
    description: str | None = None
    image: str | None = None

    def __post_init__(self) -> None:
        _freeze_amount(self, "price")


@dataclass(frozen=True)
class OrderItem:
    """A cart or order line with the product name and price copied at add time."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: Decimal

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("quantity must be at least 1")
        _freeze_amount(self, "unit_price")

    @property
    def line_total(self) -> Decimal:
        return self.quantity * self.unit_price


class OrderStatus(str, Enum):
    NEW = "new"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        return self.value.title()


@dataclass(frozen=True)
class Order:
    """A committed order. Only ``status`` ever changes, by replacement.

    ``currency`` is the shop currency at commit time; the frozen total is
    always shown in it.
    """

    id: str
    items: tuple[OrderItem, ...]
    total: Decimal
    status: OrderStatus
    created_at: datetime
    notes: str | None = None
    table_number: str | None = None
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "currency", self.currency.upper())
        if not self.items:
            raise ValueError("an order needs at least one item")
        object.__setattr__(self, "status", OrderStatus(self.status))
        _freeze_amount(self, "total")

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)


@dataclass(frozen=True)
class PrinterSettings:
    """Network receipt printer address."""

    ip_address: str
    port: int
    is_enabled: bool = False

    def __post_init__(self) -> None:
        if not (1 <= self.port <= 65535):
            raise ValueError("port must be between 1 and 65535")


@dataclass(frozen=True)
class AppSettings:
    """Shop-wide configuration."""

    printer: PrinterSettings
    shop_name: str
    currency: str
    tax_rate: Decimal = field(default=Decimal("0"))
    receipt_footer: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.printer, PrinterSettings):
            raise TypeError("printer must be a complete PrinterSettings")
        _freeze_amount(self, "tax_rate")


@dataclass(frozen=True)
class PrintResult:
    """Outcome reported by the printer collaborator."""

    success: bool
    message: str
