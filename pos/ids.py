"""Opaque identifiers for products and orders."""

from __future__ import annotations

from uuid import uuid4

ID_LENGTH = 12


def new_id() -> str:
    """Return a short random hex id, unique in practice within one process."""
    return uuid4().hex[:ID_LENGTH]
