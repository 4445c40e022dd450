"""Application service: Delete Product use case."""

from __future__ import annotations

from catalog.application.logs import get_logger
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository

logger = get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> None:
        if not self._product_repo.exists_by_id(product_id):
            logger.info("product.not_found", product_id=product_id)
            raise EntityNotFoundError(f"Product not found with ID: {product_id}")

        self._product_repo.delete_by_id(product_id)
        logger.info("product.deleted", product_id=product_id)
