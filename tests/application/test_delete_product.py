"""Integration tests for the DeleteProduct use case."""

import pytest

from catalog.application.delete_product import DeleteProductHandler
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import Product
from tests.fakes import FakeProductRepository


def _setup():
    repo = FakeProductRepository([Product(id=1, title="Resin figure")])
    return repo, DeleteProductHandler(repo)


class TestDeleteProduct:

    def test_delete_existing(self):
        repo, handler = _setup()
        handler.handle(1)
        assert repo.deleted == [1]
        assert not repo.exists_by_id(1)

    def test_delete_unknown_rejected(self):
        repo, handler = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            handler.handle(999)
        assert repo.deleted == []

    def test_delete_twice_rejected(self):
        repo, handler = _setup()
        handler.handle(1)
        with pytest.raises(EntityNotFoundError):
            handler.handle(1)
        assert repo.deleted == [1]
