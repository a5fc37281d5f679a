"""Exceptions raised by the POS stores and forms."""

from __future__ import annotations


class PosError(Exception):
    """Base class for POS errors."""


class EmptyCartError(PosError, ValueError):
    """Raised when committing a cart without lines."""

    def __init__(self, message: str = "Cannot create an empty order") -> None:
        super().__init__(message)


class InvalidTransitionError(PosError, ValueError):
    """Raised by callers that enforce the order status policy."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(f"Cannot move order from {current} to {target}")
        self.current = current
        self.target = target


class FormError(PosError, ValueError):
    """Invalid operator input, tied to the offending field."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
