"""Invoice number allocation

Numbers are partitioned by calendar year and come from an atomic
per-year counter, so concurrent creates can never observe the same value.
"""

from datetime import date
from typing import Optional
from src.app.repositories.invoice_counter_repository import InvoiceCounterRepository
from src.domain.base import utcnow

INVOICE_NUMBER_PREFIX = "INV"


def format_invoice_number(year: int, sequence: int) -> str:
    # zero padding is cosmetic: 10000 renders as INV-2024-10000
    return f"{INVOICE_NUMBER_PREFIX}-{year}-{sequence:04d}"


class SequenceAllocator:
    def __init__(self, counter_repo: InvoiceCounterRepository):
        self.counter_repo = counter_repo

    async def next_sequence(self, year: int) -> int:
        return await self.counter_repo.increment(year)

    async def next_invoice_number(self, today: Optional[date] = None) -> str:
        """
        Allocate the next invoice number for the current numbering year

        Args:
            today: Override for the current date (defaults to UTC today)

        Returns:
            Invoice number formatted as INV-YYYY-NNNN
        """
        year = (today or utcnow().date()).year
        sequence = await self.next_sequence(year)
        return format_invoice_number(year, sequence)
