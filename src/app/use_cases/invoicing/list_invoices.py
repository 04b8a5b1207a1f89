"""ListInvoices Use Case

Retrieves a page of invoices with optional filters.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.errors import ValidationError
from src.domain.invoice import InvoiceStatus
from .dtos import ListInvoicesQueryDTO, ListInvoicesResponseDTO, InvoiceSummaryDTO

logger = logging.getLogger(__name__)


class ListInvoices:
    """
    Use Case: List invoices

    Filters by client, status and an inclusive invoice_date range.
    Results are ordered newest invoice_date first.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, query: ListInvoicesQueryDTO) -> Result[ListInvoicesResponseDTO]:
        """
        Execute invoice listing

        Args:
            query: ListInvoicesQueryDTO with filters and pagination

        Returns:
            Result[ListInvoicesResponseDTO]: Page of invoice summaries
        """
        try:
            if query.start_date and query.end_date and query.start_date > query.end_date:
                return Return.err(
                    ValidationError("start_date must not be after end_date", field="start_date").to_error()
                )

            invoices = await self.invoice_repo.find(
                client_id=query.client_id,
                status=query.status,
                start_date=query.start_date,
                end_date=query.end_date,
                limit=query.limit,
                offset=query.offset,
            )

            summaries = [
                InvoiceSummaryDTO(
                    invoice_id=invoice.id,
                    invoice_number=invoice.invoice_number,
                    client_id=invoice.client_id,
                    status=InvoiceStatus(invoice.status).value,
                    invoice_date=invoice.invoice_date,
                    due_date=invoice.due_date,
                    total_amount=invoice.total_amount,
                )
                for invoice in invoices
            ]

            return Return.ok(
                ListInvoicesResponseDTO(invoices=summaries, limit=query.limit, offset=query.offset)
            )

        except Exception as e:
            logger.error(f"Failed to list invoices: {e}")
            return Return.err(
                Error(
                    code="LIST_INVOICES_FAILED",
                    message="Failed to list invoices",
                    reason=str(e),
                )
            )
