"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each product validation rule has its own ValidationError subclass, so callers
can tell exactly which rule rejected a candidate.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    # Name of the offending Product attribute, set by each subclass.
    field: str | None = None


class InvalidTitleError(ValidationError):
    field = "title"


class InvalidKeywordsError(ValidationError):
    field = "keywords"


class InvalidDescriptionError(ValidationError):
    field = "description"


class InvalidRatingError(ValidationError):
    field = "rating"


class InvalidPriceError(ValidationError):
    field = "price"


class InvalidStockQuantityError(ValidationError):
    field = "quantity_in_stock"


class InvalidStatusError(ValidationError):
    field = "status"


class InvalidWeightError(ValidationError):
    field = "weight"


class InvalidDimensionsError(ValidationError):
    field = "dimensions"


class InvalidDateAddedError(ValidationError):
    field = "date_added"


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(Exception):
    """The backing store could not complete a read or write.

    Not a DomainException: handlers let it propagate unchanged.
    """
