"""Client Repository Interface

Defines the contract for client persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.client import Client


class ClientRepository(ABC):
    """
    Repository interface for Client persistence
    """

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """
        Create a new client

        Args:
            client: Client entity to persist

        Returns:
            Created Client with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, client_id: int) -> Optional[Client]:
        """
        Retrieve client by ID

        Args:
            client_id: Client ID

        Returns:
            Client if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Client]:
        """
        Retrieve client by (lower-cased) email

        Args:
            email: Contact email

        Returns:
            Client if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, client: Client) -> Client:
        """
        Update an existing client

        Args:
            client: Client entity with updated values

        Returns:
            Updated Client
        """
        pass

    @abstractmethod
    async def delete(self, client: Client) -> None:
        """
        Delete a client

        Args:
            client: Client entity to remove
        """
        pass

    @abstractmethod
    async def find(
        self,
        state: Optional[str] = None,
        is_active: Optional[bool] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Client]:
        """
        List clients ordered by name

        Args:
            state: Optional address state filter (case-insensitive)
            is_active: Optional active flag filter
            limit: Maximum number of clients to return
            offset: Offset for pagination

        Returns:
            List of clients
        """
        pass

    @abstractmethod
    async def count(self, state: Optional[str] = None, is_active: Optional[bool] = None) -> int:
        """Count clients matching the same filters as find"""
        pass
