"""Application service: List Products use case (query)."""

from __future__ import annotations

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Page, PageRequest
from catalog.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, page_request: PageRequest | None = None) -> Page[Product]:
        return self._product_repo.list_page(page_request or PageRequest())
