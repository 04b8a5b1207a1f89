"""ChangeInvoiceStatus Use Case

Moves an invoice through the status state machine.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.product_repository import ProductRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.errors import InvoicingError, NotFoundError, StateTransitionError
from src.domain.invoice import InvoiceStatus
from src.domain.invoice_state import ensure_transition
from .dtos import ChangeInvoiceStatusCommandDTO, InvoiceDetailDTO
from .materializer import InvoiceMaterializer

logger = logging.getLogger(__name__)


class ChangeInvoiceStatus:
    """
    Use Case: Change invoice status

    Business Rules:
    1. draft -> sent | paid
    2. sent -> paid | overdue
    3. overdue -> paid
    4. paid is terminal (no transition out, including paid -> paid)
    5. An illegal request changes nothing
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        invoice_item_repo: InvoiceItemRepository,
        client_repo: ClientRepository,
        product_repo: ProductRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.materializer = InvoiceMaterializer(client_repo, product_repo, invoice_item_repo)

    async def execute(
        self, invoice_id: int, command: ChangeInvoiceStatusCommandDTO
    ) -> Result[InvoiceDetailDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            if not invoice:
                raise NotFoundError("invoice", [invoice_id])

            current = InvoiceStatus(invoice.status)
            ensure_transition(current, command.status)

            invoice.status = command.status
            updated_invoice = await self.invoice_repo.update(invoice)
            await self.uow.commit()
            logger.info(
                f"Invoice {updated_invoice.invoice_number} status {current.value} -> {command.status.value}"
            )

            return Return.ok(await self.materializer.materialize(updated_invoice))

        except StateTransitionError as e:
            logger.warning(f"Rejected status change for invoice {invoice_id}: {e.message}")
            await self.uow.rollback()
            return Return.err(e.to_error())

        except InvoicingError as e:
            await self.uow.rollback()
            return Return.err(e.to_error())

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Status change failed for invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="CHANGE_INVOICE_STATUS_FAILED",
                    message="Failed to change invoice status",
                    reason=str(e),
                )
            )
