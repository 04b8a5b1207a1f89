"""CreateInvoice Use Case

Creates an invoice with an allocated number and a computed tax breakdown.
"""

import logging
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.sequence_allocator import SequenceAllocator
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.product_repository import ProductRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.base import utcnow
from src.domain.errors import DuplicateError, InvoicingError
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem
from src.domain.tax import calculate_tax, derive_jurisdiction, line_total, validate_line_items
from .dtos import CreateInvoiceCommandDTO, InvoiceDetailDTO
from .materializer import InvoiceMaterializer
from .validation import ensure_due_after_invoice_date, ensure_products_exist, resolve_client

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create an invoice

    Business Rules:
    1. due_date must be strictly after invoice_date (invoice_date defaults to today)
    2. At least one item; quantity >= 1 and unit_price >= 0
    3. Client and every referenced product must exist (products checked in one batch)
    4. Tax jurisdiction is derived from the client's state when not supplied
    5. Invoice number comes from the atomic per-year counter (INV-YYYY-NNNN)
    6. Derived money fields are computed here, never taken from input

    Flow:
    1. Validate dates and items
    2. Resolve client and products
    3. Determine jurisdiction and compute taxes
    4. Allocate invoice number
    5. Persist invoice and items, commit
    6. Return materialized invoice
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        invoice_item_repo: InvoiceItemRepository,
        client_repo: ClientRepository,
        product_repo: ProductRepository,
        sequence_allocator: SequenceAllocator,
        home_state: str,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.invoice_item_repo = invoice_item_repo
        self.client_repo = client_repo
        self.product_repo = product_repo
        self.sequence_allocator = sequence_allocator
        self.home_state = home_state
        self.materializer = InvoiceMaterializer(client_repo, product_repo, invoice_item_repo)

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceDetailDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with client, dates and items

        Returns:
            Result[InvoiceDetailDTO]: Success with the materialized invoice or error
        """
        try:
            # Step 1: Validate input shape
            invoice_date = command.invoice_date or utcnow().date()
            ensure_due_after_invoice_date(invoice_date, command.due_date)
            validate_line_items(command.items)

            # Step 2: Resolve references
            client = await resolve_client(self.client_repo, command.client_id)
            await ensure_products_exist(
                self.product_repo, [item.product_id for item in command.items]
            )

            # Step 3: Jurisdiction and taxes
            jurisdiction = command.tax_jurisdiction or derive_jurisdiction(
                client.state, self.home_state
            )
            breakdown = calculate_tax(command.items, jurisdiction)

            # Step 4: Allocate number
            invoice_number = await self.sequence_allocator.next_invoice_number()

            # Step 5: Persist
            invoice = Invoice(
                invoice_number=invoice_number,
                client_id=client.id,
                invoice_date=invoice_date,
                due_date=command.due_date,
                status=command.status,
                tax_jurisdiction=jurisdiction,
                notes=command.notes,
            )
            invoice.apply_tax(breakdown)
            created_invoice = await self.invoice_repo.create(invoice)

            await self.invoice_item_repo.create_many(
                [
                    InvoiceItem(
                        invoice_id=created_invoice.id,
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

            await self.uow.commit()
            logger.info(
                f"Created invoice {created_invoice.invoice_number} for client {client.id} "
                f"({jurisdiction.value}, total={breakdown.total_amount})"
            )

            # Step 6: Read back joined view
            return Return.ok(await self.materializer.materialize(created_invoice))

        except InvoicingError as e:
            await self.uow.rollback()
            return Return.err(e.to_error())

        except IntegrityError as e:
            await self.uow.rollback()
            logger.error(f"Unique constraint violated while creating invoice: {e}")
            return Return.err(DuplicateError.from_integrity_error(e).to_error())

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Invoice creation failed: {e}")
            return Return.err(
                Error(
                    code="CREATE_INVOICE_FAILED",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )
