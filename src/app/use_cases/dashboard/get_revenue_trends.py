"""GetRevenueTrends Use Case

Paid revenue per calendar month over a trailing window.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.base import utcnow
from .dtos import RevenueTrendsQueryDTO, RevenueTrendDTO
from .periods import trailing_months

logger = logging.getLogger(__name__)


class GetRevenueTrends:
    """
    Use Case: Monthly revenue trend

    The window covers the current month and the months - 1 before it.
    Months without paid invoices are reported with zero revenue.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, query: RevenueTrendsQueryDTO) -> Result[List[RevenueTrendDTO]]:
        try:
            today = utcnow().date()
            months = trailing_months(today, query.months)
            first_year, first_month = months[0]

            rows = await self.invoice_repo.get_monthly_revenue(
                start_date=date(first_year, first_month, 1),
                end_date=today,
            )
            by_month = {(row["year"], row["month"]): row for row in rows}

            trend = []
            for year, month in months:
                row = by_month.get((year, month))
                trend.append(
                    RevenueTrendDTO(
                        month=f"{year:04d}-{month:02d}",
                        revenue=row["revenue"] if row else Decimal("0"),
                        invoice_count=row["invoice_count"] if row else 0,
                    )
                )

            return Return.ok(trend)

        except Exception as e:
            logger.error(f"Failed to compute revenue trends: {e}")
            return Return.err(
                Error(
                    code="GET_REVENUE_TRENDS_FAILED",
                    message="Failed to compute revenue trends",
                    reason=str(e),
                )
            )
