"""Application service: Update Product use case (full replace).

Only the title is re-validated. Fields like ``date_added`` describe
the original creation and are not expected to satisfy the create-time
rules any more, so the full rule set is not re-run here.
"""

from __future__ import annotations

from datetime import date
from typing import Callable

from catalog.application.logs import get_logger
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.product_validator import TITLE_RULES, validate

logger = get_logger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, product: Product) -> Product:
        """Overwrite every mutable field of the stored product.

        ``id`` and ``date_added`` of the stored record survive unchanged.
        """
        validate(product, self._clock(), rules=TITLE_RULES)

        existing = None
        if product.id is not None:
            existing = self._product_repo.get_by_id(product.id)
        if existing is None:
            logger.info("product.not_found", product_id=product.id)
            raise EntityNotFoundError(f"Product not found with ID: {product.id}")

        existing.overwrite_from(product)
        saved = self._product_repo.save(existing)
        logger.info("product.updated", product_id=saved.id)
        return saved
