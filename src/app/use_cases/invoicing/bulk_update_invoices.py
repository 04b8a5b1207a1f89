"""BulkUpdateInvoices Use Case

Applies one patch to a set of invoices, all or nothing.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.errors import InvoicingError, NotFoundError, ValidationError
from .dtos import BulkUpdateInvoicesCommandDTO, BulkUpdateResultDTO
from .validation import ensure_due_after_invoice_date

logger = logging.getLogger(__name__)

PATCHABLE_FIELDS = ("status", "due_date", "notes")
NULLABLE_FIELDS = ("notes",)


class BulkUpdateInvoices:
    """
    Use Case: Bulk update invoices

    Business Rules:
    1. Every requested invoice must exist; missing IDs fail the whole request
    2. The patch must carry at least one of status, due_date, notes;
       an explicit null clears notes
    3. A new due_date must be after each invoice's own invoice_date
    4. status is written as given, without the transition table

    Flow:
    1. Resolve all invoices and validate the patch against each (no writes)
    2. Apply the patch to each invoice
    3. Commit once
    """

    def __init__(self, uow: UnitOfWork, invoice_repo: InvoiceRepository):
        self.uow = uow
        self.invoice_repo = invoice_repo

    async def execute(self, command: BulkUpdateInvoicesCommandDTO) -> Result[BulkUpdateResultDTO]:
        """
        Execute bulk update

        Args:
            command: BulkUpdateInvoicesCommandDTO with invoice IDs and patch

        Returns:
            Result[BulkUpdateResultDTO]: matched and modified counts, or error
        """
        try:
            # Phase 1: resolve and validate
            requested_ids = set(command.invoice_ids)
            if not requested_ids:
                raise ValidationError("At least one invoice ID is required", field="invoice_ids")

            patch = {
                name: getattr(command.patch, name)
                for name in PATCHABLE_FIELDS
                if name in command.patch.model_fields_set
                and (name in NULLABLE_FIELDS or getattr(command.patch, name) is not None)
            }
            if not patch:
                raise ValidationError("Patch must set at least one field", field="patch")

            invoices = await self.invoice_repo.get_by_ids(requested_ids)
            missing = requested_ids - {invoice.id for invoice in invoices}
            if missing:
                raise NotFoundError("invoice", missing)

            if "due_date" in patch:
                for invoice in invoices:
                    ensure_due_after_invoice_date(invoice.invoice_date, patch["due_date"])

            # Phase 2: apply
            modified = 0
            for invoice in invoices:
                changed = False
                for name, value in patch.items():
                    if getattr(invoice, name) != value:
                        setattr(invoice, name, value)
                        changed = True
                if changed:
                    await self.invoice_repo.update(invoice)
                    modified += 1

            await self.uow.commit()
            logger.info(
                f"Bulk update of {len(invoices)} invoice(s), {modified} modified: {sorted(patch)}"
            )

            return Return.ok(
                BulkUpdateResultDTO(matched_count=len(invoices), modified_count=modified)
            )

        except InvoicingError as e:
            await self.uow.rollback()
            return Return.err(e.to_error())

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Bulk invoice update failed: {e}")
            return Return.err(
                Error(
                    code="BULK_UPDATE_INVOICES_FAILED",
                    message="Failed to update invoices",
                    reason=str(e),
                )
            )
