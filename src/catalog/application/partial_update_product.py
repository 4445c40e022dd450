"""Application service: Partial Update Product use case.

Copies only the fields the candidate carries onto the stored product.
No validation rules are applied: a patch can store values that create
or full update would reject.
"""

from __future__ import annotations

from catalog.application.logs import get_logger
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = get_logger(__name__)


class PartialUpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product: Product) -> Product | None:
        """Merge *product* into the stored record.

        Returns None when no record has the candidate's ID; that is not
        an error at this layer.
        """
        if product.id is None:
            return None

        existing = self._product_repo.get_by_id(product.id)
        if existing is None:
            logger.info("product.not_found", product_id=product.id)
            return None

        existing.merge_present(product)
        saved = self._product_repo.save(existing)
        logger.info("product.patched", product_id=saved.id)
        return saved
