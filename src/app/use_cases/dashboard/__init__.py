"""Dashboard aggregate use cases"""
from .get_recent_invoices import GetRecentInvoices
from .get_top_clients import GetTopClients
from .get_revenue_trends import GetRevenueTrends
from .get_invoice_status_distribution import GetInvoiceStatusDistribution
from .dtos import (
    RevenuePeriod,
    RecentInvoicesQueryDTO,
    TopClientsQueryDTO,
    RevenueTrendsQueryDTO,
    RecentInvoiceDTO,
    TopClientDTO,
    RevenueTrendDTO,
    StatusDistributionDTO,
)

__all__ = [
    "GetRecentInvoices",
    "GetTopClients",
    "GetRevenueTrends",
    "GetInvoiceStatusDistribution",
    "RevenuePeriod",
    "RecentInvoicesQueryDTO",
    "TopClientsQueryDTO",
    "RevenueTrendsQueryDTO",
    "RecentInvoiceDTO",
    "TopClientDTO",
    "RevenueTrendDTO",
    "StatusDistributionDTO",
]
