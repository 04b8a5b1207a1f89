"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional, List
from datetime import date
from src.domain.invoice import Invoice, InvoiceStatus


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Provides access to invoice data for lifecycle operations.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_ids(self, invoice_ids: Iterable[int]) -> List[Invoice]:
        """
        Retrieve every invoice whose ID is in invoice_ids (single query)

        Args:
            invoice_ids: Invoice IDs

        Returns:
            Invoices found; missing IDs are simply absent
        """
        pass

    @abstractmethod
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
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        pass

    @abstractmethod
    async def delete(self, invoice: Invoice) -> None:
        """
        Delete an invoice (its items must already be removed)

        Args:
            invoice: Invoice entity to remove
        """
        pass

    @abstractmethod
    async def count_by_client(self, client_id: int) -> int:
        """
        Count invoices billed to a client

        Args:
            client_id: Client ID

        Returns:
            Number of invoices referencing the client
        """
        pass

    @abstractmethod
    async def get_stats(
        self,
        client_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> dict:
        """
        Aggregate invoice figures

        Args:
            client_id: Optional filter by client
            start_date: Optional lower bound on invoice_date (inclusive)
            end_date: Optional upper bound on invoice_date (inclusive)

        Returns:
            Dict with total_invoices, total_amount, total_tax, per-status
            counts (draft/sent/paid/overdue), paid_amount, pending_amount
            and average_amount
        """
        pass

    @abstractmethod
    async def get_recent(self, limit: int = 10) -> List[dict]:
        """
        Most recently created invoices with their client's name and email

        Returns:
            Dicts with invoice_id, invoice_number, client_id, client_name,
            client_email, status, invoice_date, due_date, total_amount
            and created_at, newest first
        """
        pass

    @abstractmethod
    async def get_top_clients(self, limit: int = 10, since: Optional[date] = None) -> List[dict]:
        """
        Clients ranked by paid revenue

        Args:
            limit: Maximum number of clients
            since: Optional lower bound on invoice_date (inclusive)

        Returns:
            Dicts with client_id, name, email, total_revenue, invoice_count
            and last_invoice_date, highest revenue first
        """
        pass

    @abstractmethod
    async def get_monthly_revenue(self, start_date: date, end_date: date) -> List[dict]:
        """
        Paid revenue per calendar month of invoice_date

        Returns:
            Dicts with year, month, revenue and invoice_count, oldest first;
            months without paid invoices are absent
        """
        pass

    @abstractmethod
    async def get_status_distribution(self) -> List[dict]:
        """
        Invoice count and total amount for every status

        Returns:
            One dict per InvoiceStatus (status, count, total_amount),
            zero-filled for statuses with no invoices
        """
        pass
