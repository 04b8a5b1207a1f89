"""Unit tests for CreateInvoice use case

Tests cover:
- Invoice number allocation and tax computation
- Jurisdiction derived from the client's state or supplied explicitly
- Date, item, client and product validation
- Unique violations mapped to DUPLICATE_ENTRY
"""

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import IntegrityError

from src.app.use_cases.invoicing.create_invoice import CreateInvoice
from src.app.use_cases.invoicing.dtos import CreateInvoiceCommandDTO, InvoiceItemInputDTO
from src.domain.invoice import InvoiceStatus, TaxJurisdiction
from tests.factories import make_client


@pytest.fixture
def mock_allocator():
    allocator = MagicMock()
    allocator.next_invoice_number = AsyncMock(return_value="INV-2024-0001")
    return allocator


@pytest.fixture
def stored(mock_invoice_repo, mock_invoice_item_repo):
    """Capture what the use case persists and serve it back to the read-back"""
    captured = {"invoice": None, "items": []}

    async def create(invoice):
        invoice.id = 1
        captured["invoice"] = invoice
        return invoice

    async def create_many(items):
        captured["items"] = items
        return items

    async def get_by_invoice_id(invoice_id):
        return captured["items"]

    mock_invoice_repo.create = AsyncMock(side_effect=create)
    mock_invoice_item_repo.create_many = AsyncMock(side_effect=create_many)
    mock_invoice_item_repo.get_by_invoice_id = AsyncMock(side_effect=get_by_invoice_id)
    return captured


@pytest.fixture
def create_invoice_use_case(
    mock_uow, mock_invoice_repo, mock_invoice_item_repo, mock_client_repo, mock_product_repo, mock_allocator
):
    return CreateInvoice(
        uow=mock_uow,
        invoice_repo=mock_invoice_repo,
        invoice_item_repo=mock_invoice_item_repo,
        client_repo=mock_client_repo,
        product_repo=mock_product_repo,
        sequence_allocator=mock_allocator,
        home_state="Maharashtra",
    )


def command(**overrides):
    values = dict(
        client_id=1,
        invoice_date=date(2024, 1, 15),
        due_date=date(2024, 2, 14),
        items=[
            InvoiceItemInputDTO(product_id=3, size="medium", quantity=2, unit_price=Decimal("100")),
            InvoiceItemInputDTO(product_id=4, size="large", quantity=3, unit_price=Decimal("150")),
        ],
    )
    values.update(overrides)
    return CreateInvoiceCommandDTO(**values)


@pytest.mark.asyncio
class TestCreateInvoiceSuccess:
    async def test_create_in_state_invoice(
        self, create_invoice_use_case, stored, mock_uow, mock_allocator
    ):
        """
        Given: A client in the home state and two line items
        When: The invoice is created
        Then: CGST and SGST are each 2.5% of 650 and the number is allocated
        """
        result = await create_invoice_use_case.execute(command())

        assert result.is_ok()
        invoice = result.value
        assert invoice.invoice_number == "INV-2024-0001"
        assert invoice.status == "draft"
        assert invoice.tax_jurisdiction == "in-state"
        assert invoice.subtotal == Decimal("650")
        assert invoice.cgst == Decimal("16.25")
        assert invoice.sgst == Decimal("16.25")
        assert invoice.igst == Decimal("0")
        assert invoice.total_amount == Decimal("682.50")

        assert [item.product_name for item in invoice.items] == ["Knee Brace", "Wrist Splint"]
        assert [item.line_total for item in invoice.items] == [Decimal("200"), Decimal("450")]
        assert invoice.client.name == "Sunrise Orthopaedics"

        mock_allocator.next_invoice_number.assert_awaited_once()
        mock_uow.commit.assert_awaited_once()

    async def test_items_keep_their_order(self, create_invoice_use_case, stored):
        await create_invoice_use_case.execute(command())

        assert [item.position for item in stored["items"]] == [0, 1]
        assert all(item.invoice_id == 1 for item in stored["items"])

    async def test_out_of_state_client_is_charged_igst(
        self, create_invoice_use_case, stored, mock_client_repo
    ):
        mock_client_repo.get_by_id = AsyncMock(return_value=make_client(state="Karnataka"))

        result = await create_invoice_use_case.execute(command())

        assert result.is_ok()
        assert result.value.tax_jurisdiction == "out-state"
        assert result.value.igst == Decimal("32.50")
        assert result.value.cgst == Decimal("0")

    async def test_explicit_jurisdiction_wins(self, create_invoice_use_case, stored):
        result = await create_invoice_use_case.execute(
            command(tax_jurisdiction=TaxJurisdiction.OUT_STATE)
        )

        assert result.value.tax_jurisdiction == "out-state"

    async def test_status_is_taken_as_given(self, create_invoice_use_case, stored):
        result = await create_invoice_use_case.execute(command(status=InvoiceStatus.SENT))

        assert stored["invoice"].status == InvoiceStatus.SENT
        assert result.value.status == "sent"

    async def test_invoice_date_defaults_to_today(self, create_invoice_use_case, stored):
        result = await create_invoice_use_case.execute(
            command(invoice_date=None, due_date=date(2999, 1, 1))
        )

        assert result.is_ok()
        assert stored["invoice"].invoice_date is not None


@pytest.mark.asyncio
class TestCreateInvoiceValidation:
    async def test_due_date_must_follow_invoice_date(
        self, create_invoice_use_case, mock_uow, mock_allocator
    ):
        result = await create_invoice_use_case.execute(command(due_date=date(2024, 1, 15)))

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.details == {"field": "due_date"}
        mock_allocator.next_invoice_number.assert_not_called()
        mock_uow.commit.assert_not_called()
        mock_uow.rollback.assert_awaited_once()

    async def test_items_required(self, create_invoice_use_case, mock_uow):
        result = await create_invoice_use_case.execute(command(items=[]))

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        mock_uow.commit.assert_not_called()

    async def test_unknown_client(self, create_invoice_use_case, mock_client_repo, mock_allocator):
        mock_client_repo.get_by_id = AsyncMock(return_value=None)

        result = await create_invoice_use_case.execute(command())

        assert result.error.code == "CLIENT_NOT_FOUND"
        mock_allocator.next_invoice_number.assert_not_called()

    async def test_missing_products_reported_together(
        self, create_invoice_use_case, mock_product_repo, mock_allocator
    ):
        """
        Given: Items referencing products 3 and 4, only 3 exists
        When: The invoice is created
        Then: PRODUCT_NOT_FOUND lists 4 and nothing is allocated
        """
        from tests.factories import make_product

        mock_product_repo.get_by_ids = AsyncMock(return_value=[make_product(3)])

        result = await create_invoice_use_case.execute(command())

        assert result.error.code == "PRODUCT_NOT_FOUND"
        assert result.error.details == {"missing_ids": [4]}
        mock_product_repo.get_by_ids.assert_awaited_once()
        mock_allocator.next_invoice_number.assert_not_called()

    async def test_duplicate_invoice_number(
        self, create_invoice_use_case, mock_invoice_repo, mock_uow
    ):
        mock_invoice_repo.create = AsyncMock(
            side_effect=IntegrityError(
                "INSERT INTO invoices", {}, Exception("UNIQUE constraint failed: invoices.invoice_number")
            )
        )

        result = await create_invoice_use_case.execute(command())

        assert result.error.code == "DUPLICATE_ENTRY"
        assert result.error.details == {"field": "invoice_number"}
        mock_uow.rollback.assert_awaited_once()

    async def test_unexpected_failure(self, create_invoice_use_case, mock_allocator, mock_uow):
        mock_allocator.next_invoice_number = AsyncMock(side_effect=RuntimeError("db down"))

        result = await create_invoice_use_case.execute(command())

        assert result.error.code == "CREATE_INVOICE_FAILED"
        assert result.error.reason == "db down"
        mock_uow.rollback.assert_awaited_once()
