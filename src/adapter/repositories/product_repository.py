"""SQLAlchemy Product Repository Implementation"""

from typing import Iterable, List, Optional
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.product_repository import ProductRepository
from src.domain.base import utcnow
from src.domain.product import Product


class SqlAlchemyProductRepository(ProductRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, product: Product) -> Product:
        self.session.add(product)
        await self.session.flush()
        await self.session.refresh(product)
        return product

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        statement = select(Product).where(Product.id == product_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_ids(self, product_ids: Iterable[int]) -> List[Product]:
        ids = list(set(product_ids))
        if not ids:
            return []
        statement = select(Product).where(Product.id.in_(ids))
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_sku(self, sku: str) -> Optional[Product]:
        statement = select(Product).where(Product.sku == sku.upper())
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def update(self, product: Product) -> Product:
        product.updated_at = utcnow()
        self.session.add(product)
        await self.session.flush()
        await self.session.refresh(product)
        return product

    async def delete(self, product: Product) -> None:
        await self.session.delete(product)
        await self.session.flush()

    async def find(
        self,
        category: Optional[str] = None,
        is_active: Optional[bool] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Product]:
        statement = self._filtered(select(Product), category, is_active)
        statement = statement.order_by(Product.created_at.desc(), Product.id.desc())
        result = await self.session.execute(statement.limit(limit).offset(offset))
        return list(result.scalars().all())

    async def count(self, category: Optional[str] = None, is_active: Optional[bool] = None) -> int:
        statement = self._filtered(select(func.count()).select_from(Product), category, is_active)
        result = await self.session.execute(statement)
        return result.scalar_one()

    @staticmethod
    def _filtered(statement, category, is_active):
        if category:
            statement = statement.where(func.lower(Product.category) == category.strip().lower())
        if is_active is not None:
            statement = statement.where(Product.is_active == is_active)
        return statement
