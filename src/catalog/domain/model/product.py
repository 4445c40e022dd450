"""Product aggregate.

The sole entity of the catalog. Invariants (title length, price sign,
status membership, ...) are enforced by the validator at the moment of
persistence, not by the dataclass itself: a Product may be built up
field by field and only has to be valid when it reaches the store.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from decimal import Decimal
from enum import Enum


class ProductStatus(str, Enum):
    IN_STOCK = "IN_STOCK"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    DISCONTINUED = "DISCONTINUED"


# Fields a full update copies from the candidate. ``id`` is immutable and
# ``date_added`` records creation, so neither is ever overwritten here.
FULL_UPDATE_FIELDS = (
    "title",
    "keywords",
    "description",
    "rating",
    "price",
    "quantity_in_stock",
    "status",
    "weight",
    "dimensions",
    "date_modified",
)


@dataclass
class Product:
    """A product record.

    ``None`` means "absent" for every attribute. Zero values, empty
    strings and ``Decimal("0")`` are present values.
    """

    title: str | None = None
    id: int | None = None
    keywords: str | None = None
    description: str | None = None
    rating: int | float | None = None
    price: Decimal | None = None
    quantity_in_stock: int | None = None
    status: ProductStatus | None = None
    weight: Decimal | None = None
    dimensions: str | None = None
    date_added: datetime | None = None
    date_modified: datetime | None = None

    # --- Mutation modes -------------------------------------------------------

    def overwrite_from(self, candidate: Product) -> None:
        """Full replace: copy every mutable field, absent or not."""
        for name in FULL_UPDATE_FIELDS:
            setattr(self, name, getattr(candidate, name))

    def merge_present(self, candidate: Product) -> None:
        """Selective overwrite: copy only the fields the candidate carries."""
        for name in mergeable_fields():
            value = getattr(candidate, name)
            if value is not None:
                setattr(self, name, value)

    def copy(self) -> Product:
        return Product(**{f.name: getattr(self, f.name) for f in fields(self)})


def mergeable_fields() -> tuple[str, ...]:
    """Every field except the identifier."""
    return tuple(f.name for f in fields(Product) if f.name != "id")
