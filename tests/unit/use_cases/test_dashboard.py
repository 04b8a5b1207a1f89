"""Unit tests for dashboard aggregates

Tests cover:
- Calendar windows for top clients and revenue trends
- Average invoice value per ranked client
- Zero-filled monthly revenue
- Every status present in the distribution
"""

import pytest
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

from src.app.use_cases.dashboard import (
    GetInvoiceStatusDistribution,
    GetRecentInvoices,
    GetRevenueTrends,
    GetTopClients,
    RecentInvoicesQueryDTO,
    RevenuePeriod,
    RevenueTrendsQueryDTO,
    TopClientsQueryDTO,
)
from src.app.use_cases.dashboard.periods import period_start, trailing_months
from src.domain.base import utcnow


class TestPeriods:
    @pytest.mark.parametrize(
        "period, expected",
        [
            (RevenuePeriod.ALL, None),
            (RevenuePeriod.MONTH, date(2024, 8, 1)),
            (RevenuePeriod.QUARTER, date(2024, 7, 1)),
            (RevenuePeriod.YEAR, date(2024, 1, 1)),
        ],
    )
    def test_period_start(self, period, expected):
        assert period_start(period, date(2024, 8, 19)) == expected

    @pytest.mark.parametrize(
        "today, expected",
        [
            (date(2024, 3, 31), date(2024, 1, 1)),
            (date(2024, 6, 1), date(2024, 4, 1)),
            (date(2024, 12, 15), date(2024, 10, 1)),
        ],
    )
    def test_quarter_boundaries(self, today, expected):
        assert period_start(RevenuePeriod.QUARTER, today) == expected

    def test_trailing_months_cross_year(self):
        assert trailing_months(date(2024, 2, 10), 4) == [(2023, 11), (2023, 12), (2024, 1), (2024, 2)]

    def test_single_trailing_month_is_current(self):
        assert trailing_months(date(2024, 2, 10), 1) == [(2024, 2)]


@pytest.mark.asyncio
class TestGetTopClients:
    async def test_average_is_revenue_per_paid_invoice(self, mock_invoice_repo):
        mock_invoice_repo.get_top_clients = AsyncMock(
            return_value=[
                {
                    "client_id": 1,
                    "name": "Sunrise Orthopaedics",
                    "email": "accounts@sunrise-ortho.in",
                    "total_revenue": Decimal("1942.50"),
                    "invoice_count": 2,
                    "last_invoice_date": date(2024, 3, 15),
                }
            ]
        )

        result = await GetTopClients(mock_invoice_repo).execute(TopClientsQueryDTO(limit=5))

        assert result.is_ok()
        assert result.value[0].average_invoice == Decimal("971.25")
        mock_invoice_repo.get_top_clients.assert_awaited_once_with(limit=5, since=None)

    async def test_period_becomes_invoice_date_bound(self, mock_invoice_repo):
        mock_invoice_repo.get_top_clients = AsyncMock(return_value=[])

        result = await GetTopClients(mock_invoice_repo).execute(
            TopClientsQueryDTO(period=RevenuePeriod.YEAR)
        )

        assert result.value == []
        mock_invoice_repo.get_top_clients.assert_awaited_once_with(
            limit=10, since=date(utcnow().year, 1, 1)
        )

    async def test_repository_failure(self, mock_invoice_repo):
        mock_invoice_repo.get_top_clients = AsyncMock(side_effect=RuntimeError("timeout"))

        result = await GetTopClients(mock_invoice_repo).execute(TopClientsQueryDTO())

        assert result.error.code == "GET_TOP_CLIENTS_FAILED"


@pytest.mark.asyncio
class TestGetRevenueTrends:
    async def test_missing_months_reported_as_zero(self, mock_invoice_repo):
        """
        Given: Paid revenue only in the current month
        When: A three month trend is requested
        Then: Three entries come back, oldest first, the first two at zero
        """
        today = utcnow().date()
        mock_invoice_repo.get_monthly_revenue = AsyncMock(
            return_value=[
                {"year": today.year, "month": today.month, "revenue": Decimal("971.25"), "invoice_count": 1}
            ]
        )

        result = await GetRevenueTrends(mock_invoice_repo).execute(RevenueTrendsQueryDTO(months=3))

        assert result.is_ok()
        trend = result.value
        assert len(trend) == 3
        assert trend[-1].month == f"{today.year:04d}-{today.month:02d}"
        assert trend[-1].revenue == Decimal("971.25")
        assert [point.invoice_count for point in trend] == [0, 0, 1]
        assert trend[0].revenue == Decimal("0")

        first_year, first_month = trailing_months(today, 3)[0]
        mock_invoice_repo.get_monthly_revenue.assert_awaited_once_with(
            start_date=date(first_year, first_month, 1), end_date=today
        )


@pytest.mark.asyncio
class TestRecentAndStatus:
    async def test_recent_invoices_carry_client_contact(self, mock_invoice_repo):
        mock_invoice_repo.get_recent = AsyncMock(
            return_value=[
                {
                    "invoice_id": 3,
                    "invoice_number": "INV-2024-0003",
                    "client_id": 1,
                    "client_name": "Sunrise Orthopaedics",
                    "client_email": "accounts@sunrise-ortho.in",
                    "status": "sent",
                    "invoice_date": date(2024, 1, 15),
                    "due_date": date(2024, 2, 14),
                    "total_amount": Decimal("971.25"),
                    "created_at": datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc),
                }
            ]
        )

        result = await GetRecentInvoices(mock_invoice_repo).execute(RecentInvoicesQueryDTO(limit=3))

        assert result.value[0].client_email == "accounts@sunrise-ortho.in"
        mock_invoice_repo.get_recent.assert_awaited_once_with(limit=3)

    async def test_status_distribution(self, mock_invoice_repo):
        mock_invoice_repo.get_status_distribution = AsyncMock(
            return_value=[
                {"status": "draft", "count": 2, "total_amount": Decimal("1942.50")},
                {"status": "sent", "count": 0, "total_amount": Decimal("0")},
                {"status": "paid", "count": 1, "total_amount": Decimal("210")},
                {"status": "overdue", "count": 0, "total_amount": Decimal("0")},
            ]
        )

        result = await GetInvoiceStatusDistribution(mock_invoice_repo).execute()

        assert [row.status for row in result.value] == ["draft", "sent", "paid", "overdue"]
        assert result.value[2].total_amount == Decimal("210")
