import logging
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.errors import ValidationError
from .dtos import InvoiceStatsQueryDTO, InvoiceStatsDTO

logger = logging.getLogger(__name__)


class GetInvoiceStats:
    """Use Case: Aggregate invoice totals and status counts"""

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, query: InvoiceStatsQueryDTO) -> Result[InvoiceStatsDTO]:
        try:
            if query.start_date and query.end_date and query.start_date > query.end_date:
                return Return.err(
                    ValidationError("start_date must not be after end_date", field="start_date").to_error()
                )

            stats = await self.invoice_repo.get_stats(
                client_id=query.client_id,
                start_date=query.start_date,
                end_date=query.end_date,
            )
            return Return.ok(InvoiceStatsDTO(**stats))

        except Exception as e:
            logger.error(f"Failed to compute invoice stats: {e}")
            return Return.err(
                Error(
                    code="GET_INVOICE_STATS_FAILED",
                    message="Failed to compute invoice statistics",
                    reason=str(e),
                )
            )
