"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from decimal import Decimal
from typing import Iterable, Optional, List
from datetime import date
from sqlalchemy import extract
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.base import utcnow
from src.domain.client import Client
from src.domain.invoice import Invoice, InvoiceStatus

ZERO = Decimal("0")


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID
        """
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        statement = select(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_ids(self, invoice_ids: Iterable[int]) -> List[Invoice]:
        ids = list(set(invoice_ids))
        if not ids:
            return []
        statement = select(Invoice).where(Invoice.id.in_(ids)).order_by(Invoice.id)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def find(
        self,
        client_id: Optional[int] = None,
        status: Optional[InvoiceStatus] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Invoice]:
        """
        List invoices, newest invoice_date first

        Args:
            client_id: Optional filter by client
            status: Optional filter by status
            start_date: Optional lower bound on invoice_date (inclusive)
            end_date: Optional upper bound on invoice_date (inclusive)
            limit: Maximum number of invoices to return
            offset: Offset for pagination

        Returns:
            List of invoices
        """
        statement = self._filtered(select(Invoice), client_id, start_date, end_date)

        if status:
            statement = statement.where(Invoice.status == status)

        statement = statement.order_by(Invoice.invoice_date.desc(), Invoice.id.desc())
        statement = statement.limit(limit).offset(offset)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        invoice.updated_at = utcnow()
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def delete(self, invoice: Invoice) -> None:
        await self.session.delete(invoice)
        await self.session.flush()

    async def count_by_client(self, client_id: int) -> int:
        statement = (
            select(func.count())
            .select_from(Invoice)
            .where(Invoice.client_id == client_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def get_stats(
        self,
        client_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> dict:
        """
        Aggregate invoice figures per status, then fold into totals

        Args:
            client_id: Optional filter by client
            start_date: Optional lower bound on invoice_date (inclusive)
            end_date: Optional upper bound on invoice_date (inclusive)

        Returns:
            Dict matching InvoiceStatsDTO fields
        """
        statement = self._filtered(
            select(
                Invoice.status,
                func.count(Invoice.id),
                func.sum(Invoice.total_amount),
                func.sum(Invoice.total_tax),
            ),
            client_id,
            start_date,
            end_date,
        ).group_by(Invoice.status)
        result = await self.session.execute(statement)

        counts = {status: 0 for status in InvoiceStatus}
        amounts = {status: ZERO for status in InvoiceStatus}
        total_tax = ZERO
        for status, count, amount, tax in result.all():
            status = InvoiceStatus(status)
            counts[status] = count
            amounts[status] = _decimal(amount)
            total_tax += _decimal(tax)

        total_invoices = sum(counts.values())
        total_amount = sum(amounts.values(), ZERO)
        paid_amount = amounts[InvoiceStatus.PAID]

        return {
            "total_invoices": total_invoices,
            "total_amount": total_amount,
            "total_tax": total_tax,
            "draft_invoices": counts[InvoiceStatus.DRAFT],
            "sent_invoices": counts[InvoiceStatus.SENT],
            "paid_invoices": counts[InvoiceStatus.PAID],
            "overdue_invoices": counts[InvoiceStatus.OVERDUE],
            "paid_amount": paid_amount,
            "pending_amount": total_amount - paid_amount,
            "average_amount": total_amount / total_invoices if total_invoices else ZERO,
        }

    async def get_recent(self, limit: int = 10) -> List[dict]:
        statement = (
            select(Invoice, Client.name, Client.email)
            .join(Client, Client.id == Invoice.client_id)
            .order_by(Invoice.created_at.desc(), Invoice.id.desc())
            .limit(limit)
        )
        result = await self.session.execute(statement)

        return [
            {
                "invoice_id": invoice.id,
                "invoice_number": invoice.invoice_number,
                "client_id": invoice.client_id,
                "client_name": name,
                "client_email": email,
                "status": InvoiceStatus(invoice.status).value,
                "invoice_date": invoice.invoice_date,
                "due_date": invoice.due_date,
                "total_amount": invoice.total_amount,
                "created_at": invoice.created_at,
            }
            for invoice, name, email in result.all()
        ]

    async def get_top_clients(self, limit: int = 10, since: Optional[date] = None) -> List[dict]:
        revenue = func.sum(Invoice.total_amount)
        statement = (
            select(
                Invoice.client_id,
                Client.name,
                Client.email,
                revenue,
                func.count(Invoice.id),
                func.max(Invoice.invoice_date),
            )
            .join(Client, Client.id == Invoice.client_id)
            .where(Invoice.status == InvoiceStatus.PAID)
        )
        if since:
            statement = statement.where(Invoice.invoice_date >= since)
        statement = (
            statement.group_by(Invoice.client_id, Client.name, Client.email)
            .order_by(revenue.desc(), Invoice.client_id)
            .limit(limit)
        )
        result = await self.session.execute(statement)

        return [
            {
                "client_id": client_id,
                "name": name,
                "email": email,
                "total_revenue": _decimal(total),
                "invoice_count": count,
                "last_invoice_date": last_invoice_date,
            }
            for client_id, name, email, total, count, last_invoice_date in result.all()
        ]

    async def get_monthly_revenue(self, start_date: date, end_date: date) -> List[dict]:
        year = extract("year", Invoice.invoice_date)
        month = extract("month", Invoice.invoice_date)
        statement = (
            select(year, month, func.sum(Invoice.total_amount), func.count(Invoice.id))
            .where(
                Invoice.status == InvoiceStatus.PAID,
                Invoice.invoice_date >= start_date,
                Invoice.invoice_date <= end_date,
            )
            .group_by(year, month)
            .order_by(year, month)
        )
        result = await self.session.execute(statement)

        return [
            {
                "year": int(row_year),
                "month": int(row_month),
                "revenue": _decimal(total),
                "invoice_count": count,
            }
            for row_year, row_month, total, count in result.all()
        ]

    async def get_status_distribution(self) -> List[dict]:
        statement = select(
            Invoice.status, func.count(Invoice.id), func.sum(Invoice.total_amount)
        ).group_by(Invoice.status)
        result = await self.session.execute(statement)

        rows = {InvoiceStatus(status): (count, _decimal(total)) for status, count, total in result.all()}
        return [
            {
                "status": status.value,
                "count": rows.get(status, (0, ZERO))[0],
                "total_amount": rows.get(status, (0, ZERO))[1],
            }
            for status in InvoiceStatus
        ]

    @staticmethod
    def _filtered(statement, client_id, start_date, end_date):
        if client_id is not None:
            statement = statement.where(Invoice.client_id == client_id)
        if start_date:
            statement = statement.where(Invoice.invoice_date >= start_date)
        if end_date:
            statement = statement.where(Invoice.invoice_date <= end_date)
        return statement


def _decimal(value) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))
