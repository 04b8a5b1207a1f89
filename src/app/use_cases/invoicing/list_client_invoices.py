"""ListClientInvoices Use Case

One client's invoices together with that client's billing summary.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.errors import InvoicingError, ValidationError
from src.domain.invoice import InvoiceStatus
from .dtos import (
    ClientInvoicesQueryDTO,
    ClientInvoicesResponseDTO,
    ClientInvoiceSummaryDTO,
    InvoiceSummaryDTO,
)
from .validation import resolve_client

logger = logging.getLogger(__name__)


class ListClientInvoices:
    """
    Use Case: List a client's invoices

    Business Rules:
    1. The client must exist
    2. status and invoice_date range filter the page only; the summary
       always covers every invoice of the client
    3. pending_invoices counts everything not yet paid
    """

    def __init__(self, client_repo: ClientRepository, invoice_repo: InvoiceRepository):
        self.client_repo = client_repo
        self.invoice_repo = invoice_repo

    async def execute(self, client_id: int, query: ClientInvoicesQueryDTO) -> Result[ClientInvoicesResponseDTO]:
        """
        Execute client invoice listing

        Args:
            client_id: Client whose invoices are listed
            query: ClientInvoicesQueryDTO with filters and pagination

        Returns:
            Result[ClientInvoicesResponseDTO]: Page of invoices and summary, or error
        """
        try:
            if query.start_date and query.end_date and query.start_date > query.end_date:
                raise ValidationError("start_date must not be after end_date", field="start_date")

            client = await resolve_client(self.client_repo, client_id)

            invoices = await self.invoice_repo.find(
                client_id=client.id,
                status=query.status,
                start_date=query.start_date,
                end_date=query.end_date,
                limit=query.limit,
                offset=query.offset,
            )
            stats = await self.invoice_repo.get_stats(client_id=client.id)

            return Return.ok(
                ClientInvoicesResponseDTO(
                    client_id=client.id,
                    client_name=client.name,
                    invoices=[
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
                    ],
                    summary=ClientInvoiceSummaryDTO(
                        total_invoices=stats["total_invoices"],
                        total_amount=stats["total_amount"],
                        paid_invoices=stats["paid_invoices"],
                        pending_invoices=stats["total_invoices"] - stats["paid_invoices"],
                        pending_amount=stats["pending_amount"],
                    ),
                    limit=query.limit,
                    offset=query.offset,
                )
            )

        except InvoicingError as e:
            return Return.err(e.to_error())

        except Exception as e:
            logger.error(f"Failed to list invoices of client {client_id}: {e}")
            return Return.err(
                Error(
                    code="LIST_CLIENT_INVOICES_FAILED",
                    message="Failed to list client invoices",
                    reason=str(e),
                )
            )
