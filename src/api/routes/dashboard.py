"""Dashboard API Routes

Read-only aggregates over invoices: latest activity, best clients,
monthly revenue and the status mix.
"""

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.dashboard import (
    GetInvoiceStatusDistribution,
    GetRecentInvoices,
    GetRevenueTrends,
    GetTopClients,
    RecentInvoiceDTO,
    RecentInvoicesQueryDTO,
    RevenuePeriod,
    RevenueTrendDTO,
    RevenueTrendsQueryDTO,
    StatusDistributionDTO,
    TopClientDTO,
    TopClientsQueryDTO,
)
from src.adapter.repositories import SqlAlchemyInvoiceRepository
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/recent-invoices", response_model=List[RecentInvoiceDTO])
async def get_recent_invoices(
    limit: int = Query(default=10, ge=1, le=50),
    session: AsyncSession = Depends(get_session)
):
    use_case = GetRecentInvoices(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(RecentInvoicesQueryDTO(limit=limit))

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/top-clients", response_model=List[TopClientDTO])
async def get_top_clients(
    limit: int = Query(default=10, ge=1, le=50),
    period: RevenuePeriod = Query(default=RevenuePeriod.ALL),
    session: AsyncSession = Depends(get_session)
):
    """
    Clients ranked by the total of their paid invoices.

    **period** narrows the ranking to invoices dated in the current
    month, quarter or year.
    """
    use_case = GetTopClients(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(TopClientsQueryDTO(limit=limit, period=period))

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/revenue-trends", response_model=List[RevenueTrendDTO])
async def get_revenue_trends(
    months: int = Query(default=12, ge=1, le=60),
    session: AsyncSession = Depends(get_session)
):
    """Paid revenue per month, oldest first, one entry per month of the window."""
    use_case = GetRevenueTrends(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(RevenueTrendsQueryDTO(months=months))

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/invoice-status", response_model=List[StatusDistributionDTO])
async def get_invoice_status_distribution(
    session: AsyncSession = Depends(get_session)
):
    use_case = GetInvoiceStatusDistribution(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute()

    if result.is_err():
        raise ClientError(result.error)

    return result.value
