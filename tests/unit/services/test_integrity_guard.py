"""Unit tests for delete guards"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.services.integrity_guard import ReferentialIntegrityGuard
from src.domain.errors import ImmutableStateError, ReferencedEntityError
from src.domain.invoice import Invoice, InvoiceStatus


@pytest.fixture
def mock_invoice_repo():
    return MagicMock()


@pytest.fixture
def mock_invoice_item_repo():
    return MagicMock()


@pytest.fixture
def guard(mock_invoice_repo, mock_invoice_item_repo):
    return ReferentialIntegrityGuard(mock_invoice_repo, mock_invoice_item_repo)


@pytest.mark.asyncio
class TestClientAndProductGuards:
    async def test_unreferenced_client_passes(self, guard, mock_invoice_repo):
        mock_invoice_repo.count_by_client = AsyncMock(return_value=0)

        await guard.ensure_client_deletable(1)

        mock_invoice_repo.count_by_client.assert_awaited_once_with(1)

    async def test_referenced_client_reports_count(self, guard, mock_invoice_repo):
        mock_invoice_repo.count_by_client = AsyncMock(return_value=3)

        with pytest.raises(ReferencedEntityError) as exc_info:
            await guard.ensure_client_deletable(1)

        assert exc_info.value.count == 3
        assert exc_info.value.code == "CLIENT_REFERENCED"

    async def test_referenced_product_reports_distinct_invoices(self, guard, mock_invoice_item_repo):
        mock_invoice_item_repo.count_invoices_by_product = AsyncMock(return_value=2)

        with pytest.raises(ReferencedEntityError) as exc_info:
            await guard.ensure_product_deletable(5)

        assert exc_info.value.to_error().details == {"referenced_invoices": 2}
        assert exc_info.value.code == "PRODUCT_REFERENCED"


class TestInvoiceGuard:
    def test_paid_invoice_is_immutable(self, guard):
        invoice = Invoice(id=1, invoice_number="INV-2024-0001", status=InvoiceStatus.PAID)

        with pytest.raises(ImmutableStateError):
            guard.ensure_invoice_deletable(invoice)

    @pytest.mark.parametrize("status", [InvoiceStatus.DRAFT, InvoiceStatus.SENT, InvoiceStatus.OVERDUE])
    def test_unpaid_invoice_is_deletable(self, guard, status):
        invoice = Invoice(id=1, invoice_number="INV-2024-0001", status=status)

        guard.ensure_invoice_deletable(invoice)
