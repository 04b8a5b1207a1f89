"""Product Repository Interface

Defines the contract for product persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from src.domain.product import Product


class ProductRepository(ABC):
    """
    Repository interface for Product persistence
    """

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """
        Create a new product

        Args:
            product: Product entity to persist

        Returns:
            Created Product with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Optional[Product]:
        """
        Retrieve product by ID

        Args:
            product_id: Product ID

        Returns:
            Product if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_ids(self, product_ids: Iterable[int]) -> List[Product]:
        """
        Retrieve every product whose ID is in product_ids (single query)

        Args:
            product_ids: Product IDs

        Returns:
            Products found; missing IDs are simply absent
        """
        pass

    @abstractmethod
    async def get_by_sku(self, sku: str) -> Optional[Product]:
        """
        Retrieve product by (upper-cased) SKU

        Args:
            sku: Stock keeping unit

        Returns:
            Product if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, product: Product) -> Product:
        """
        Update an existing product

        Args:
            product: Product entity with updated values

        Returns:
            Updated Product
        """
        pass

    @abstractmethod
    async def delete(self, product: Product) -> None:
        """
        Delete a product

        Args:
            product: Product entity to remove
        """
        pass

    @abstractmethod
    async def find(
        self,
        category: Optional[str] = None,
        is_active: Optional[bool] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Product]:
        """
        List products, newest first

        Args:
            category: Optional category filter (case-insensitive)
            is_active: Optional active flag filter
            limit: Maximum number of products to return
            offset: Offset for pagination

        Returns:
            List of products
        """
        pass

    @abstractmethod
    async def count(self, category: Optional[str] = None, is_active: Optional[bool] = None) -> int:
        """Count products matching the same filters as find"""
        pass
