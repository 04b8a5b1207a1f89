"""SQLAlchemy Client Repository Implementation"""

from typing import List, Optional
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.client_repository import ClientRepository
from src.domain.base import utcnow
from src.domain.client import Client


class SqlAlchemyClientRepository(ClientRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, client: Client) -> Client:
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client

    async def get_by_id(self, client_id: int) -> Optional[Client]:
        statement = select(Client).where(Client.id == client_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[Client]:
        statement = select(Client).where(Client.email == email.lower())
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def update(self, client: Client) -> Client:
        client.updated_at = utcnow()
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client

    async def delete(self, client: Client) -> None:
        await self.session.delete(client)
        await self.session.flush()

    async def find(
        self,
        state: Optional[str] = None,
        is_active: Optional[bool] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Client]:
        statement = self._filtered(select(Client), state, is_active)
        statement = statement.order_by(Client.name, Client.id).limit(limit).offset(offset)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def count(self, state: Optional[str] = None, is_active: Optional[bool] = None) -> int:
        statement = self._filtered(select(func.count()).select_from(Client), state, is_active)
        result = await self.session.execute(statement)
        return result.scalar_one()

    @staticmethod
    def _filtered(statement, state, is_active):
        if state:
            statement = statement.where(
                func.lower(Client.address["state"].as_string()) == state.strip().lower()
            )
        if is_active is not None:
            statement = statement.where(Client.is_active == is_active)
        return statement
