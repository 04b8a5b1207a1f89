import logging
from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import StatusDistributionDTO

logger = logging.getLogger(__name__)


class GetInvoiceStatusDistribution:
    """Use Case: Invoice count and amount per status, every status listed"""

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self) -> Result[List[StatusDistributionDTO]]:
        try:
            rows = await self.invoice_repo.get_status_distribution()
            return Return.ok([StatusDistributionDTO(**row) for row in rows])

        except Exception as e:
            logger.error(f"Failed to compute invoice status distribution: {e}")
            return Return.err(
                Error(
                    code="GET_INVOICE_STATUS_FAILED",
                    message="Failed to compute invoice status distribution",
                    reason=str(e),
                )
            )
