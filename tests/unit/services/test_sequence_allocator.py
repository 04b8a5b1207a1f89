"""Unit tests for invoice number allocation"""

import pytest
from datetime import date
from unittest.mock import AsyncMock, MagicMock

from src.app.services.sequence_allocator import SequenceAllocator, format_invoice_number


class TestFormatInvoiceNumber:
    def test_pads_to_four_digits(self):
        assert format_invoice_number(2024, 7) == "INV-2024-0007"

    def test_large_sequences_grow_past_padding(self):
        assert format_invoice_number(2024, 10000) == "INV-2024-10000"


@pytest.mark.asyncio
class TestSequenceAllocator:
    async def test_uses_year_of_given_date(self):
        counter_repo = MagicMock()
        counter_repo.increment = AsyncMock(return_value=42)
        allocator = SequenceAllocator(counter_repo)

        number = await allocator.next_invoice_number(today=date(2025, 3, 1))

        assert number == "INV-2025-0042"
        counter_repo.increment.assert_awaited_once_with(2025)

    async def test_each_call_takes_a_new_value(self):
        counter_repo = MagicMock()
        counter_repo.increment = AsyncMock(side_effect=[1, 2, 3])
        allocator = SequenceAllocator(counter_repo)

        numbers = [await allocator.next_invoice_number(today=date(2024, 6, 1)) for _ in range(3)]

        assert numbers == ["INV-2024-0001", "INV-2024-0002", "INV-2024-0003"]
