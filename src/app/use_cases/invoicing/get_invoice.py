import logging
from libs.result import Result, Return, Error
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.product_repository import ProductRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.errors import InvoicingError, NotFoundError
from .dtos import InvoiceDetailDTO
from .materializer import InvoiceMaterializer

logger = logging.getLogger(__name__)


class GetInvoice:
    """Use Case: Get a single invoice with client and products expanded"""

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        invoice_item_repo: InvoiceItemRepository,
        client_repo: ClientRepository,
        product_repo: ProductRepository,
    ):
        self.invoice_repo = invoice_repo
        self.materializer = InvoiceMaterializer(client_repo, product_repo, invoice_item_repo)

    async def execute(self, invoice_id: int) -> Result[InvoiceDetailDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            if not invoice:
                raise NotFoundError("invoice", [invoice_id])
            return Return.ok(await self.materializer.materialize(invoice))

        except InvoicingError as e:
            return Return.err(e.to_error())

        except Exception as e:
            logger.error(f"Failed to load invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="GET_INVOICE_FAILED",
                    message="Failed to retrieve invoice",
                    reason=str(e),
                )
            )
