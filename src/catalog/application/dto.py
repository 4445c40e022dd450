"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from catalog.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user. Absent values are None."""

    id: int | None
    title: str | None
    keywords: str | None
    description: str | None
    rating: str | None
    price: str | None
    quantity_in_stock: int | None
    status: str | None
    weight: str | None
    dimensions: str | None
    date_added: str | None
    date_modified: str | None


def to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        title=product.title,
        keywords=product.keywords,
        description=product.description,
        rating=_str_or_none(product.rating),
        price=_str_or_none(product.price),
        quantity_in_stock=product.quantity_in_stock,
        status=_str_or_none(getattr(product.status, "value", product.status)),
        weight=_str_or_none(product.weight),
        dimensions=product.dimensions,
        date_added=_format_date(product.date_added),
        date_modified=_format_date(product.date_modified),
    )


def _str_or_none(value: object) -> str | None:
    return None if value is None else str(value)


def _format_date(moment: datetime | None) -> str | None:
    return None if moment is None else moment.strftime("%Y-%m-%d %H:%M")
