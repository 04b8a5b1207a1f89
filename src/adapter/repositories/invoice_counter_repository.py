"""SQLAlchemy Invoice Counter Repository Implementation

The increment is a single upsert with RETURNING, so two sessions can never
observe the same value. On PostgreSQL the conflicting row stays locked until
the surrounding transaction ends.
"""

from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_counter_repository import InvoiceCounterRepository
from src.domain.invoice_counter import InvoiceCounter

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SqlAlchemyInvoiceCounterRepository(InvoiceCounterRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def increment(self, year: int) -> int:
        """
        Atomically advance the counter for a year

        Args:
            year: Numbering year

        Returns:
            The new last_number (1 for the first invoice of the year)
        """
        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)
        if insert is None:
            raise RuntimeError(f"Atomic invoice counter is not supported on {dialect}")

        table = InvoiceCounter.__table__
        statement = (
            insert(table)
            .values(year=year, last_number=1)
            .on_conflict_do_update(
                index_elements=[table.c.year],
                set_={"last_number": table.c.last_number + 1},
            )
            .returning(table.c.last_number)
        )
        result = await self.session.execute(statement)
        return result.scalar_one()
