"""UpdateInvoice Use Case

Applies a partial update to an invoice and keeps derived fields consistent.
"""

import logging
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.product_repository import ProductRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.errors import DuplicateError, InvoicingError, NotFoundError
from src.domain.invoice_item import InvoiceItem
from src.domain.tax import calculate_tax, derive_jurisdiction, line_total, validate_line_items
from .dtos import UpdateInvoiceCommandDTO, InvoiceDetailDTO
from .materializer import InvoiceMaterializer
from .validation import ensure_due_after_invoice_date, ensure_products_exist, resolve_client

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = ("notes",)


class UpdateInvoice:
    """
    Use Case: Update invoice fields

    Business Rules:
    1. Only fields present in the command are touched; an explicit null
       clears notes and is ignored elsewhere
    2. A changed client must exist; jurisdiction is re-derived from it
       unless tax_jurisdiction is part of the same update
    3. Replacement items are validated and their products checked in one batch
    4. Taxes are recomputed whenever items or jurisdiction change
    5. due_date > invoice_date is checked on the merged values
    6. status is written as given; the transition table is only enforced by
       ChangeInvoiceStatus. Updates on paid invoices are not blocked here.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        invoice_item_repo: InvoiceItemRepository,
        client_repo: ClientRepository,
        product_repo: ProductRepository,
        home_state: str,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.invoice_item_repo = invoice_item_repo
        self.client_repo = client_repo
        self.product_repo = product_repo
        self.home_state = home_state
        self.materializer = InvoiceMaterializer(client_repo, product_repo, invoice_item_repo)

    async def execute(self, invoice_id: int, command: UpdateInvoiceCommandDTO) -> Result[InvoiceDetailDTO]:
        """
        Execute invoice update

        Args:
            invoice_id: Invoice to update
            command: UpdateInvoiceCommandDTO; unset fields are left alone

        Returns:
            Result[InvoiceDetailDTO]: Success with the materialized invoice or error
        """
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            if not invoice:
                raise NotFoundError("invoice", [invoice_id])

            # notes is nullable; every other field treats an explicit null as unset
            fields = {
                name for name in command.model_fields_set
                if name in NULLABLE_FIELDS or getattr(command, name) is not None
            }
            jurisdiction_changed = False

            if "client_id" in fields and command.client_id != invoice.client_id:
                client = await resolve_client(self.client_repo, command.client_id)
                invoice.client_id = client.id
                if "tax_jurisdiction" not in fields:
                    derived = derive_jurisdiction(client.state, self.home_state)
                    jurisdiction_changed = derived != invoice.tax_jurisdiction
                    invoice.tax_jurisdiction = derived

            if "tax_jurisdiction" in fields:
                jurisdiction_changed = command.tax_jurisdiction != invoice.tax_jurisdiction
                invoice.tax_jurisdiction = command.tax_jurisdiction

            if "items" in fields:
                validate_line_items(command.items)
                await ensure_products_exist(
                    self.product_repo, [item.product_id for item in command.items]
                )

            if "invoice_date" in fields:
                invoice.invoice_date = command.invoice_date
            if "due_date" in fields:
                invoice.due_date = command.due_date
            ensure_due_after_invoice_date(invoice.invoice_date, invoice.due_date)

            if "status" in fields:
                invoice.status = command.status
            if "notes" in fields:
                invoice.notes = command.notes

            if "items" in fields:
                await self.invoice_item_repo.delete_by_invoice_id(invoice.id)
                await self.invoice_item_repo.create_many(
                    [
                        InvoiceItem(
                            invoice_id=invoice.id,
                            product_id=item.product_id,
                            position=position,
                            size=item.size,
                            quantity=item.quantity,
                            unit_price=item.unit_price,
                            line_total=line_total(item.quantity, item.unit_price),
                        )
                        for position, item in enumerate(command.items)
                    ]
                )
                invoice.apply_tax(calculate_tax(command.items, invoice.tax_jurisdiction))
            elif jurisdiction_changed or "tax_jurisdiction" in fields:
                current_items = await self.invoice_item_repo.get_by_invoice_id(invoice.id)
                invoice.apply_tax(calculate_tax(current_items, invoice.tax_jurisdiction))

            updated_invoice = await self.invoice_repo.update(invoice)
            await self.uow.commit()
            logger.info(f"Updated invoice {updated_invoice.invoice_number}: {sorted(fields)}")

            return Return.ok(await self.materializer.materialize(updated_invoice))

        except InvoicingError as e:
            await self.uow.rollback()
            return Return.err(e.to_error())

        except IntegrityError as e:
            await self.uow.rollback()
            return Return.err(DuplicateError.from_integrity_error(e).to_error())

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Invoice update failed for {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_INVOICE_FAILED",
                    message="Failed to update invoice",
                    reason=str(e),
                )
            )
