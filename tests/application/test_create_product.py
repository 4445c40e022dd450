"""Integration tests for the CreateProduct use case."""

from datetime import date, datetime
from decimal import Decimal

import pytest
import structlog

from catalog.application.create_product import CreateProductHandler
from catalog.domain.exceptions import (
    InvalidDateAddedError,
    InvalidPriceError,
    InvalidRatingError,
    InvalidStatusError,
    InvalidTitleError,
    InvalidWeightError,
    ValidationError,
)
from catalog.domain.model.product import Product, ProductStatus
from tests.fakes import FakeProductRepository

TODAY = date(2026, 3, 14)


def _candidate(**overrides) -> Product:
    fields = dict(
        title="Resin figure",
        price=Decimal("99.90"),
        quantity_in_stock=3,
        status=ProductStatus.IN_STOCK,
        date_added=datetime(2026, 3, 14, 10, 15),
        date_modified=datetime(2026, 3, 14, 10, 15),
    )
    fields.update(overrides)
    return Product(**fields)


def _handler(repo: FakeProductRepository) -> CreateProductHandler:
    return CreateProductHandler(repo, clock=lambda: TODAY)


class TestCreateProductHappyPath:

    def test_create_assigns_id_and_persists(self):
        repo = FakeProductRepository()
        saved = _handler(repo).handle(_candidate())

        assert saved.id == 1
        assert repo.get_by_id(1) == saved

    def test_create_writes_exactly_once(self):
        repo = FakeProductRepository()
        _handler(repo).handle(_candidate())
        assert len(repo.saved) == 1

    @pytest.mark.parametrize("status", list(ProductStatus))
    def test_each_status_accepted(self, status):
        repo = FakeProductRepository()
        saved = _handler(repo).handle(_candidate(status=status))
        assert saved.status == status

    def test_ids_are_sequential(self):
        repo = FakeProductRepository()
        handler = _handler(repo)
        first = handler.handle(_candidate())
        second = handler.handle(_candidate(title="Plush toy"))
        assert (first.id, second.id) == (1, 2)


class TestCreateProductValidation:

    def test_invalid_title_rejected_without_write(self):
        repo = FakeProductRepository()
        with pytest.raises(InvalidTitleError):
            _handler(repo).handle(_candidate(title="Al"))
        assert repo.saved == []

    def test_title_reported_before_rating(self):
        repo = FakeProductRepository()
        with pytest.raises(InvalidTitleError):
            _handler(repo).handle(_candidate(title="x" * 101, rating=6))

    def test_invalid_rating_rejected(self):
        repo = FakeProductRepository()
        with pytest.raises(InvalidRatingError):
            _handler(repo).handle(_candidate(rating=-1))

    def test_missing_status_rejected(self):
        repo = FakeProductRepository()
        with pytest.raises(InvalidStatusError):
            _handler(repo).handle(_candidate(status=None))
        assert repo.saved == []

    def test_yesterday_rejected(self):
        repo = FakeProductRepository()
        with pytest.raises(InvalidDateAddedError, match="today"):
            _handler(repo).handle(_candidate(date_added=datetime(2026, 3, 13, 23, 59)))

    def test_all_rule_errors_are_validation_errors(self):
        repo = FakeProductRepository()
        with pytest.raises(ValidationError):
            _handler(repo).handle(_candidate(price=Decimal("-1")))

    def test_nan_price_rejected_without_write(self):
        repo = FakeProductRepository()
        with pytest.raises(InvalidPriceError):
            _handler(repo).handle(_candidate(price=Decimal("NaN")))
        assert repo.saved == []

    def test_infinite_weight_rejected(self):
        repo = FakeProductRepository()
        with pytest.raises(InvalidWeightError):
            _handler(repo).handle(_candidate(weight=Decimal("Infinity")))


class TestCreateProductLogging:

    def test_events_stay_off_stdout(self, capsys):
        repo = FakeProductRepository()
        _handler(repo).handle(_candidate())
        assert structlog.is_configured()
        assert capsys.readouterr().out == ""
