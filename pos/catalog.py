"""In-memory product catalog."""

from __future__ import annotations

from typing import Callable

import structlog

from pos.ids import new_id
from pos.models import Product, ProductDraft

logger = structlog.get_logger(__name__)


class CatalogStore:
    """Owns the sellable products, kept in insertion order.

    Updates and removals that reference an unknown id change nothing and
    report ``False``; removing a product leaves cart lines and historical
    orders alone since they carry their own copies of name and price.
    """

    def __init__(self, id_factory: Callable[[], str] = new_id) -> None:
        self._products: list[Product] = []
        self._issued_ids: set[str] = set()
        self._id_factory = id_factory

    def _next_id(self) -> str:
        # Ids are never reused, not even those of deleted products.
        while True:
            candidate = self._id_factory()
            if candidate not in self._issued_ids:
                self._issued_ids.add(candidate)
                return candidate

    def add(self, draft: ProductDraft) -> Product:
        product = draft.with_id(self._next_id())
        self._products.append(product)
        logger.info("Product added", product_id=product.id, name=product.name, price=str(product.price))
        return product

    def update(self, product: Product) -> bool:
        for idx, existing in enumerate(self._products):
            if existing.id == product.id:
                self._products[idx] = product
                logger.info("Product updated", product_id=product.id)
                return True
        logger.debug("Product update ignored", product_id=product.id, reason="not_found")
        return False

    def remove(self, product_id: str) -> bool:
        remaining = [product for product in self._products if product.id != product_id]
        if len(remaining) == len(self._products):
            logger.debug("Product removal ignored", product_id=product_id, reason="not_found")
            return False
        self._products = remaining
        logger.info("Product removed", product_id=product_id)
        return True

    def get(self, product_id: str) -> Product | None:
        return next((product for product in self._products if product.id == product_id), None)

    def list(self) -> list[Product]:
        return list(self._products)

    def available(self) -> list[Product]:
        return [product for product in self._products if product.is_available]

    def __len__(self) -> int:
        return len(self._products)
