"""Domain service: Product validation.

The rule set every write path is checked against. Rules are evaluated
in table order and the first failure wins, so when a candidate breaks
several rules at once the caller always sees the same error.

Every check is a pure function of the field value (plus today's date
for ``date_added``); nothing here touches a repository.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable

from catalog.domain.exceptions import (
    InvalidDateAddedError,
    InvalidDescriptionError,
    InvalidDimensionsError,
    InvalidKeywordsError,
    InvalidPriceError,
    InvalidRatingError,
    InvalidStatusError,
    InvalidStockQuantityError,
    InvalidTitleError,
    InvalidWeightError,
    ValidationError,
)
from catalog.domain.model.product import Product, ProductStatus

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 100
KEYWORDS_MAX_LENGTH = 200
DESCRIPTION_MIN_LENGTH = 10
RATING_MIN = 0
RATING_MAX = 5
DIMENSIONS_MAX_LENGTH = 50


@dataclass(frozen=True)
class Rule:
    """One validation rule: which field, how to check it, what to raise."""

    field: str
    check: Callable[[Any, date], bool]
    error: type[ValidationError]
    message: str

    def violation(self, product: Product, today: date) -> ValidationError | None:
        if self.check(getattr(product, self.field), today):
            return None
        return self.error(self.message)


# --- Checks ------------------------------------------------------------------


def _optional(check: Callable[[Any], bool]) -> Callable[[Any, date], bool]:
    """Absent values pass; present values must satisfy *check*."""
    return lambda value, _today: value is None or check(value)


def _finite(value: Any) -> bool:
    # NaN and Infinity are never valid amounts.
    return not isinstance(value, Decimal) or value.is_finite()


def _non_negative(value: Any) -> bool:
    return _finite(value) and value >= 0


def _title_ok(value: Any, _today: date) -> bool:
    return value is not None and TITLE_MIN_LENGTH <= len(value) <= TITLE_MAX_LENGTH


def _status_ok(value: Any, _today: date) -> bool:
    return value is not None and value in list(ProductStatus)


def _date_added_ok(value: Any, today: date) -> bool:
    return value is not None and local_date(value) == today


def local_date(moment: datetime) -> date:
    """Calendar date of *moment* in the local time zone.

    Naive datetimes are taken to already be local time.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.date()


# Order matters: it decides which error surfaces first.
PRODUCT_RULES: tuple[Rule, ...] = (
    Rule(
        "title",
        _title_ok,
        InvalidTitleError,
        f"Invalid title: must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters",
    ),
    Rule(
        "keywords",
        _optional(lambda v: len(v) <= KEYWORDS_MAX_LENGTH),
        InvalidKeywordsError,
        f"Invalid keywords: at most {KEYWORDS_MAX_LENGTH} characters",
    ),
    Rule(
        "description",
        _optional(lambda v: len(v) >= DESCRIPTION_MIN_LENGTH),
        InvalidDescriptionError,
        f"Invalid description: must be at least {DESCRIPTION_MIN_LENGTH} characters",
    ),
    Rule(
        "rating",
        _optional(lambda v: _finite(v) and RATING_MIN <= v <= RATING_MAX),
        InvalidRatingError,
        f"Invalid rating: must be between {RATING_MIN} and {RATING_MAX}",
    ),
    Rule(
        "price",
        _optional(_non_negative),
        InvalidPriceError,
        "Invalid price: must be greater than or equal to 0",
    ),
    Rule(
        "quantity_in_stock",
        _optional(_non_negative),
        InvalidStockQuantityError,
        "Invalid stock quantity: must be greater than or equal to 0",
    ),
    Rule(
        "status",
        _status_ok,
        InvalidStatusError,
        "Invalid status: must be one of "
        + ", ".join(s.value for s in ProductStatus),
    ),
    Rule(
        "weight",
        _optional(_non_negative),
        InvalidWeightError,
        "Invalid weight: must be greater than or equal to 0",
    ),
    Rule(
        "dimensions",
        _optional(lambda v: len(v) <= DIMENSIONS_MAX_LENGTH),
        InvalidDimensionsError,
        f"Invalid dimensions: at most {DIMENSIONS_MAX_LENGTH} characters",
    ),
    Rule(
        "date_added",
        _date_added_ok,
        InvalidDateAddedError,
        "Invalid date added: must be today's date",
    ),
)

# Full update only re-checks the title.
TITLE_RULES: tuple[Rule, ...] = PRODUCT_RULES[:1]


def find_violation(
    product: Product,
    today: date,
    rules: tuple[Rule, ...] = PRODUCT_RULES,
) -> ValidationError | None:
    """Return the error for the first rule *product* breaks, or None."""
    for rule in rules:
        error = rule.violation(product, today)
        if error is not None:
            return error
    return None


def validate(
    product: Product,
    today: date,
    rules: tuple[Rule, ...] = PRODUCT_RULES,
) -> None:
    """Raise the first violation found, if any."""
    error = find_violation(product, today, rules)
    if error is not None:
        raise error
