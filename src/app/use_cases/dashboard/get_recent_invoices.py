import logging
from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import RecentInvoicesQueryDTO, RecentInvoiceDTO

logger = logging.getLogger(__name__)


class GetRecentInvoices:
    """Use Case: Latest created invoices with their client's name and email"""

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, query: RecentInvoicesQueryDTO) -> Result[List[RecentInvoiceDTO]]:
        try:
            rows = await self.invoice_repo.get_recent(limit=query.limit)
            return Return.ok([RecentInvoiceDTO(**row) for row in rows])

        except Exception as e:
            logger.error(f"Failed to load recent invoices: {e}")
            return Return.err(
                Error(
                    code="GET_RECENT_INVOICES_FAILED",
                    message="Failed to retrieve recent invoices",
                    reason=str(e),
                )
            )
