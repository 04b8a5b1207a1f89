"""Unit tests for BulkUpdateInvoices use case

Tests cover:
- All-or-nothing resolution of invoice IDs
- Patch validation against every invoice before any write
- Matched and modified counts
"""

import pytest
from datetime import date
from unittest.mock import AsyncMock

from src.app.use_cases.invoicing.bulk_update_invoices import BulkUpdateInvoices
from src.app.use_cases.invoicing.dtos import BulkUpdateInvoicesCommandDTO
from src.domain.invoice import InvoiceStatus
from tests.factories import make_invoice


@pytest.fixture
def bulk_update_use_case(mock_uow, mock_invoice_repo):
    return BulkUpdateInvoices(mock_uow, mock_invoice_repo)


@pytest.mark.asyncio
class TestBulkUpdateInvoices:
    async def test_all_invoices_updated(self, bulk_update_use_case, mock_invoice_repo, mock_uow):
        invoices = [make_invoice(1), make_invoice(2), make_invoice(3)]
        mock_invoice_repo.get_by_ids = AsyncMock(return_value=invoices)

        result = await bulk_update_use_case.execute(
            BulkUpdateInvoicesCommandDTO(invoice_ids=[1, 2, 3], patch={"status": "sent"})
        )

        assert result.is_ok()
        assert result.value.matched_count == 3
        assert result.value.modified_count == 3
        assert all(invoice.status == InvoiceStatus.SENT for invoice in invoices)
        mock_uow.commit.assert_awaited_once()

    async def test_unchanged_invoices_not_counted_as_modified(
        self, bulk_update_use_case, mock_invoice_repo
    ):
        invoices = [make_invoice(1, InvoiceStatus.SENT), make_invoice(2, InvoiceStatus.DRAFT)]
        mock_invoice_repo.get_by_ids = AsyncMock(return_value=invoices)

        result = await bulk_update_use_case.execute(
            BulkUpdateInvoicesCommandDTO(invoice_ids=[1, 2], patch={"status": "sent"})
        )

        assert result.value.matched_count == 2
        assert result.value.modified_count == 1
        assert mock_invoice_repo.update.await_count == 1

    async def test_missing_id_aborts_everything(self, bulk_update_use_case, mock_invoice_repo, mock_uow):
        """
        Given: IDs [1, 2, 99] where 99 does not exist
        When: A bulk status update is requested
        Then: INVOICE_NOT_FOUND names 99 and invoices 1 and 2 are untouched
        """
        invoices = [make_invoice(1), make_invoice(2)]
        mock_invoice_repo.get_by_ids = AsyncMock(return_value=invoices)

        result = await bulk_update_use_case.execute(
            BulkUpdateInvoicesCommandDTO(invoice_ids=[1, 2, 99], patch={"status": "sent"})
        )

        assert result.error.code == "INVOICE_NOT_FOUND"
        assert result.error.details == {"missing_ids": [99]}
        assert all(invoice.status == InvoiceStatus.DRAFT for invoice in invoices)
        mock_invoice_repo.update.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_due_date_validated_against_each_invoice(
        self, bulk_update_use_case, mock_invoice_repo, mock_uow
    ):
        invoices = [
            make_invoice(1, invoice_date=date(2024, 1, 1)),
            make_invoice(2, invoice_date=date(2024, 3, 1)),
        ]
        mock_invoice_repo.get_by_ids = AsyncMock(return_value=invoices)

        result = await bulk_update_use_case.execute(
            BulkUpdateInvoicesCommandDTO(invoice_ids=[1, 2], patch={"due_date": "2024-02-01"})
        )

        assert result.error.code == "VALIDATION_ERROR"
        assert invoices[0].due_date == date(2024, 2, 14)
        mock_invoice_repo.update.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_empty_patch_rejected(self, bulk_update_use_case, mock_invoice_repo):
        mock_invoice_repo.get_by_ids = AsyncMock(return_value=[make_invoice(1)])

        result = await bulk_update_use_case.execute(
            BulkUpdateInvoicesCommandDTO(invoice_ids=[1], patch={})
        )

        assert result.error.code == "VALIDATION_ERROR"
        mock_invoice_repo.get_by_ids.assert_not_called()

    async def test_empty_id_list_rejected(self, bulk_update_use_case):
        result = await bulk_update_use_case.execute(
            BulkUpdateInvoicesCommandDTO(invoice_ids=[], patch={"notes": "x"})
        )

        assert result.error.code == "VALIDATION_ERROR"

    async def test_null_notes_clears_them(self, bulk_update_use_case, mock_invoice_repo):
        invoices = [make_invoice(1, notes="Call before delivery"), make_invoice(2)]
        mock_invoice_repo.get_by_ids = AsyncMock(return_value=invoices)

        result = await bulk_update_use_case.execute(
            BulkUpdateInvoicesCommandDTO(invoice_ids=[1, 2], patch={"notes": None})
        )

        assert result.is_ok()
        assert result.value.matched_count == 2
        assert result.value.modified_count == 1
        assert all(invoice.notes is None for invoice in invoices)

    async def test_null_status_alone_is_an_empty_patch(self, bulk_update_use_case):
        result = await bulk_update_use_case.execute(
            BulkUpdateInvoicesCommandDTO(invoice_ids=[1], patch={"status": None})
        )

        assert result.error.code == "VALIDATION_ERROR"
