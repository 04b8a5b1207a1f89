"""SQLAlchemy Invoice Item Repository Implementation

Line items are stored in their own table and removed explicitly with
their invoice (SQLite does not enforce the ON DELETE CASCADE).
"""

from typing import List
from sqlalchemy import delete
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.invoice_item import InvoiceItem


class SqlAlchemyInvoiceItemRepository(InvoiceItemRepository):
    """
    SQLAlchemy implementation of InvoiceItemRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceItem]:
        """
        Retrieve all items of an invoice in their original order

        Args:
            invoice_id: Invoice ID

        Returns:
            List of invoice items ordered by position
        """
        statement = (
            select(InvoiceItem)
            .where(InvoiceItem.invoice_id == invoice_id)
            .order_by(InvoiceItem.position, InvoiceItem.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def create_many(self, items: List[InvoiceItem]) -> List[InvoiceItem]:
        """
        Persist several items in one flush

        Args:
            items: Invoice items to persist

        Returns:
            Created items with generated IDs
        """
        self.session.add_all(items)
        await self.session.flush()
        for item in items:
            await self.session.refresh(item)
        return items

    async def delete_by_invoice_id(self, invoice_id: int) -> None:
        statement = delete(InvoiceItem).where(InvoiceItem.invoice_id == invoice_id)
        await self.session.execute(statement)
        await self.session.flush()

    async def count_invoices_by_product(self, product_id: int) -> int:
        """
        Count distinct invoices that carry the product on any line

        Args:
            product_id: Product ID

        Returns:
            Number of distinct invoices referencing the product
        """
        statement = (
            select(func.count(func.distinct(InvoiceItem.invoice_id)))
            .where(InvoiceItem.product_id == product_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one()
