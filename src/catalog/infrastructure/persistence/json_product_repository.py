"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from catalog.domain.exceptions import StorageError
from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.model.value_objects import Page, PageRequest
from catalog.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def save(self, product: Product) -> Product:
        products = self._load()

        if product.id is None:
            product.id = max(products, default=0) + 1

        products[product.id] = product
        self._persist(products)
        return product.copy()

    def get_by_id(self, product_id: int) -> Product | None:
        return self._load().get(product_id)

    def exists_by_id(self, product_id: int) -> bool:
        return product_id in self._load()

    def delete_by_id(self, product_id: int) -> None:
        products = self._load()
        if products.pop(product_id, None) is None:
            raise StorageError(f"Cannot delete product {product_id}: no such record")
        self._persist(products)

    def list_page(self, page_request: PageRequest) -> Page[Product]:
        ordered = [p for _, p in sorted(self._load().items())]
        start = page_request.offset
        return Page(
            items=ordered[start:start + page_request.size],
            page=page_request.page,
            size=page_request.size,
            total=len(ordered),
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "title": product.title,
            "keywords": product.keywords,
            "description": product.description,
            "rating": product.rating,
            "price": _decimal_to_raw(product.price),
            "quantity_in_stock": product.quantity_in_stock,
            "status": getattr(product.status, "value", product.status),
            "weight": _decimal_to_raw(product.weight),
            "dimensions": product.dimensions,
            "date_added": _datetime_to_raw(product.date_added),
            "date_modified": _datetime_to_raw(product.date_modified),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            title=raw.get("title"),
            keywords=raw.get("keywords"),
            description=raw.get("description"),
            rating=raw.get("rating"),
            price=_decimal_from_raw(raw.get("price")),
            quantity_in_stock=raw.get("quantity_in_stock"),
            status=_status_from_raw(raw.get("status")),
            weight=_decimal_from_raw(raw.get("weight")),
            dimensions=raw.get("dimensions"),
            date_added=_datetime_from_raw(raw.get("date_added")),
            date_modified=_datetime_from_raw(raw.get("date_modified")),
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[int, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return {item["id"]: self._to_domain(item) for item in raw}
        except (OSError, ValueError, ArithmeticError, KeyError, TypeError) as exc:
            raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc

    def _persist(self, products: dict[int, Product]) -> None:
        raw = [self._to_raw(p) for _, p in sorted(products.items())]
        try:
            text = json.dumps(raw, indent=2) + "\n"
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Cannot serialise products: {exc}") from exc
        try:
            self._file_path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _decimal_to_raw(value: Decimal | None) -> str | None:
    return None if value is None else str(value)


def _decimal_from_raw(value: str | None) -> Decimal | None:
    return None if value is None else Decimal(value)


def _datetime_to_raw(value: datetime | None) -> str | None:
    return None if value is None else value.isoformat()


def _datetime_from_raw(value: str | None) -> datetime | None:
    return None if value is None else datetime.fromisoformat(value)


def _status_from_raw(value: str | None) -> ProductStatus | str | None:
    # Partial updates are unvalidated, so a stored status may be off-list.
    if value is None:
        return None
    try:
        return ProductStatus(value)
    except ValueError:
        return value
