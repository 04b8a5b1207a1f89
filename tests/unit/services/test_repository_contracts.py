"""SQLAlchemy repositories implement exactly the operations their interfaces declare"""

import pytest
from unittest.mock import MagicMock

from src.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyInvoiceCounterRepository,
    SqlAlchemyInvoiceItemRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyProductRepository,
)
from src.app.repositories.invoice_repository import InvoiceRepository


class TestRepositoryContracts:
    @pytest.mark.parametrize(
        "repository_class",
        [
            SqlAlchemyClientRepository,
            SqlAlchemyProductRepository,
            SqlAlchemyInvoiceRepository,
            SqlAlchemyInvoiceItemRepository,
            SqlAlchemyInvoiceCounterRepository,
        ],
    )
    def test_adapter_is_concrete(self, repository_class):
        assert not repository_class.__abstractmethods__
        repository_class(MagicMock())

    def test_invoice_repository_operations(self):
        assert InvoiceRepository.__abstractmethods__ == {
            "create",
            "get_by_id",
            "get_by_ids",
            "find",
            "update",
            "delete",
            "count_by_client",
            "get_stats",
            "get_recent",
            "get_top_clients",
            "get_monthly_revenue",
            "get_status_distribution",
        }
