"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Generic, TypeVar

from catalog.domain.exceptions import ValidationError

T = TypeVar("T")

MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index plus page size."""

    page: int = 0
    size: int = 20

    def __post_init__(self) -> None:
        if not isinstance(self.page, int) or self.page < 0:
            raise ValidationError(f"Page index must be a non-negative integer, got {self.page!r}")
        if not isinstance(self.size, int) or not 1 <= self.size <= MAX_PAGE_SIZE:
            raise ValidationError(
                f"Page size must be between 1 and {MAX_PAGE_SIZE}, got {self.size!r}"
            )

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """One slice of a listing plus the size of the whole listing."""

    items: list[T] = field(default_factory=list)
    page: int = 0
    size: int = 20
    total: int = 0

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.size) if self.size else 0

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages


def to_decimal(value: str | float | int | Decimal) -> Decimal:
    """Coerce to Decimal through ``str`` so floats keep their printed form."""
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid decimal amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValidationError(f"Invalid decimal amount: {value!r}")
    return amount
