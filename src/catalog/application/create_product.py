"""Application service: Create Product use case."""

from __future__ import annotations

from datetime import date
from typing import Callable

from catalog.application.logs import get_logger
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.product_validator import find_violation

logger = get_logger(__name__)


class CreateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, product: Product) -> Product:
        """Validate a new product against every rule and persist it.

        Nothing is written when a rule fails; the first failing rule's
        error is raised.
        """
        logger.debug("product.save_requested", title=product.title)

        error = find_violation(product, self._clock())
        if error is not None:
            logger.info("product.validation_failed", field=error.field, reason=str(error))
            raise error

        saved = self._product_repo.save(product)
        logger.info("product.created", product_id=saved.id)
        return saved
