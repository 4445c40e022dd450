"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Page, PageRequest


class ProductRepository(ABC):

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Insert or update a product and return the stored form.

        A product without an ID is assigned a fresh one.
        """

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def exists_by_id(self, product_id: int) -> bool:
        """Return True if a product with this ID is stored."""

    @abstractmethod
    def delete_by_id(self, product_id: int) -> None:
        """Remove a product. The caller has already checked it exists."""

    @abstractmethod
    def list_page(self, page_request: PageRequest) -> Page[Product]:
        """Return one page of products ordered by ID."""
