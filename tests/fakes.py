"""In-memory fake repository for testing.

Implements the same abstract interface as the JSON repository but
keeps everything in a dict. No file I/O, no side effects. Every write
is recorded so tests can assert how often the store was touched.
"""

from __future__ import annotations

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Page, PageRequest
from catalog.domain.repository.product_repository import ProductRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1
        self.saved: list[Product] = []
        self.deleted: list[int] = []
        for p in products or []:
            self._store[p.id] = p.copy()
            self._next_id = max(self._next_id, p.id + 1)

    def save(self, product: Product) -> Product:
        if product.id is None:
            product.id = self._next_id
            self._next_id += 1
        self._store[product.id] = product.copy()
        self.saved.append(product)
        return product.copy()

    def get_by_id(self, product_id: int) -> Product | None:
        stored = self._store.get(product_id)
        return stored.copy() if stored is not None else None

    def exists_by_id(self, product_id: int) -> bool:
        return product_id in self._store

    def delete_by_id(self, product_id: int) -> None:
        del self._store[product_id]
        self.deleted.append(product_id)

    def list_page(self, page_request: PageRequest) -> Page[Product]:
        ordered = [self._store[k] for k in sorted(self._store)]
        start = page_request.offset
        return Page(
            items=ordered[start:start + page_request.size],
            page=page_request.page,
            size=page_request.size,
            total=len(ordered),
        )
