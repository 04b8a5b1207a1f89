"""Referential integrity checks for deletes

Checks run against the persisted state at request time and the delete
follows in the same transaction. There is no lock spanning the check
and the delete: an invoice created concurrently for the same client or
product can slip in between. That race is accepted.
"""

import logging
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.errors import ImmutableStateError, ReferencedEntityError
from src.domain.invoice import Invoice, InvoiceStatus

logger = logging.getLogger(__name__)


class ReferentialIntegrityGuard:
    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        invoice_item_repo: InvoiceItemRepository,
    ):
        self.invoice_repo = invoice_repo
        self.invoice_item_repo = invoice_item_repo

    async def ensure_client_deletable(self, client_id: int) -> None:
        count = await self.invoice_repo.count_by_client(client_id)
        if count:
            logger.warning(f"Delete of client {client_id} blocked: {count} invoice(s) reference it")
            raise ReferencedEntityError("client", client_id, count)

    async def ensure_product_deletable(self, product_id: int) -> None:
        count = await self.invoice_item_repo.count_invoices_by_product(product_id)
        if count:
            logger.warning(f"Delete of product {product_id} blocked: {count} invoice(s) reference it")
            raise ReferencedEntityError("product", product_id, count)

    def ensure_invoice_deletable(self, invoice: Invoice) -> None:
        if invoice.status == InvoiceStatus.PAID:
            logger.warning(f"Delete of paid invoice {invoice.invoice_number} blocked")
            raise ImmutableStateError(invoice.invoice_number, InvoiceStatus(invoice.status).value)
