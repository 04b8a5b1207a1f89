"""Invoice Counter Repository Interface

Defines the contract for the per-year invoice numbering sequence.
"""

from abc import ABC, abstractmethod


class InvoiceCounterRepository(ABC):
    """
    Repository interface for InvoiceCounter

    increment() must be a single indivisible operation at the store.
    Implementations must never read the current value, add one and write
    it back from the application.
    """

    @abstractmethod
    async def increment(self, year: int) -> int:
        """
        Atomically increment and return the counter for a year

        The counter row is created on first use, so the first call for a
        year returns 1.

        Args:
            year: Numbering epoch

        Returns:
            The new sequence number
        """
        pass
