"""DeleteInvoice Use Case

Deletes an invoice and its items unless it has been paid.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.integrity_guard import ReferentialIntegrityGuard
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.errors import InvoicingError, NotFoundError
from .dtos import DeletedInvoiceDTO

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete invoice

    Business Rules:
    1. Invoice must exist
    2. Paid invoices cannot be deleted
    3. Items are removed together with the invoice
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        invoice_item_repo: InvoiceItemRepository,
        guard: ReferentialIntegrityGuard,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.invoice_item_repo = invoice_item_repo
        self.guard = guard

    async def execute(self, invoice_id: int) -> Result[DeletedInvoiceDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            if not invoice:
                raise NotFoundError("invoice", [invoice_id])

            self.guard.ensure_invoice_deletable(invoice)

            invoice_number = invoice.invoice_number
            await self.invoice_item_repo.delete_by_invoice_id(invoice.id)
            await self.invoice_repo.delete(invoice)
            await self.uow.commit()
            logger.info(f"Deleted invoice {invoice_number}")

            return Return.ok(DeletedInvoiceDTO(invoice_id=invoice_id, invoice_number=invoice_number))

        except InvoicingError as e:
            await self.uow.rollback()
            return Return.err(e.to_error())

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Invoice deletion failed for {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_INVOICE_FAILED",
                    message="Failed to delete invoice",
                    reason=str(e),
                )
            )
