"""Unit tests for ChangeInvoiceStatus use case"""

import pytest
from unittest.mock import AsyncMock

from src.app.use_cases.invoicing.change_invoice_status import ChangeInvoiceStatus
from src.app.use_cases.invoicing.dtos import ChangeInvoiceStatusCommandDTO
from src.domain.invoice import InvoiceStatus
from tests.factories import make_invoice


@pytest.fixture
def change_status_use_case(
    mock_uow, mock_invoice_repo, mock_invoice_item_repo, mock_client_repo, mock_product_repo
):
    return ChangeInvoiceStatus(
        uow=mock_uow,
        invoice_repo=mock_invoice_repo,
        invoice_item_repo=mock_invoice_item_repo,
        client_repo=mock_client_repo,
        product_repo=mock_product_repo,
    )


@pytest.mark.asyncio
class TestChangeInvoiceStatus:
    async def test_draft_to_sent(self, change_status_use_case, mock_invoice_repo, mock_uow):
        invoice = make_invoice(1, InvoiceStatus.DRAFT)
        mock_invoice_repo.get_by_id = AsyncMock(return_value=invoice)

        result = await change_status_use_case.execute(
            1, ChangeInvoiceStatusCommandDTO(status=InvoiceStatus.SENT)
        )

        assert result.is_ok()
        assert result.value.status == "sent"
        mock_invoice_repo.update.assert_awaited_once_with(invoice)
        mock_uow.commit.assert_awaited_once()

    async def test_paid_to_sent_is_rejected_and_nothing_changes(
        self, change_status_use_case, mock_invoice_repo, mock_uow
    ):
        """
        Given: A paid invoice
        When: A change to sent is requested
        Then: INVALID_STATUS_TRANSITION from paid to sent, invoice stays paid
        """
        invoice = make_invoice(1, InvoiceStatus.PAID)
        mock_invoice_repo.get_by_id = AsyncMock(return_value=invoice)

        result = await change_status_use_case.execute(
            1, ChangeInvoiceStatusCommandDTO(status=InvoiceStatus.SENT)
        )

        assert result.is_err()
        assert result.error.code == "INVALID_STATUS_TRANSITION"
        assert result.error.details == {"from": "paid", "to": "sent"}
        assert invoice.status == InvoiceStatus.PAID
        mock_invoice_repo.update.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_repeating_current_status_is_rejected(self, change_status_use_case, mock_invoice_repo):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=make_invoice(1, InvoiceStatus.SENT))

        result = await change_status_use_case.execute(
            1, ChangeInvoiceStatusCommandDTO(status=InvoiceStatus.SENT)
        )

        assert result.error.code == "INVALID_STATUS_TRANSITION"

    async def test_overdue_to_paid(self, change_status_use_case, mock_invoice_repo):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=make_invoice(1, InvoiceStatus.OVERDUE))

        result = await change_status_use_case.execute(
            1, ChangeInvoiceStatusCommandDTO(status=InvoiceStatus.PAID)
        )

        assert result.is_ok()
        assert result.value.status == "paid"

    async def test_missing_invoice(self, change_status_use_case, mock_invoice_repo):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await change_status_use_case.execute(
            9, ChangeInvoiceStatusCommandDTO(status=InvoiceStatus.SENT)
        )

        assert result.error.code == "INVOICE_NOT_FOUND"
