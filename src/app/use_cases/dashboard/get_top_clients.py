"""GetTopClients Use Case

Ranks clients by the revenue of their paid invoices.
"""

import logging
from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.base import utcnow
from .dtos import TopClientsQueryDTO, TopClientDTO
from .periods import period_start

logger = logging.getLogger(__name__)


class GetTopClients:
    """
    Use Case: Top clients by paid revenue

    Business Rules:
    1. Only paid invoices count towards revenue
    2. month, quarter and year windows start on the first day of the current
       calendar period (UTC) and filter on invoice_date
    3. average_invoice is revenue divided by the number of paid invoices
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, query: TopClientsQueryDTO) -> Result[List[TopClientDTO]]:
        """
        Execute top client ranking

        Args:
            query: TopClientsQueryDTO with limit and period

        Returns:
            Result[List[TopClientDTO]]: Clients, highest revenue first
        """
        try:
            since = period_start(query.period, utcnow().date())
            rows = await self.invoice_repo.get_top_clients(limit=query.limit, since=since)

            return Return.ok(
                [
                    TopClientDTO(
                        **row,
                        average_invoice=row["total_revenue"] / row["invoice_count"],
                    )
                    for row in rows
                ]
            )

        except Exception as e:
            logger.error(f"Failed to rank clients for {query.period.value}: {e}")
            return Return.err(
                Error(
                    code="GET_TOP_CLIENTS_FAILED",
                    message="Failed to retrieve top clients",
                    reason=str(e),
                )
            )
