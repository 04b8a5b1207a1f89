"""Invoice Item Repository Interface

Defines the contract for invoice line item persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.invoice_item import InvoiceItem


class InvoiceItemRepository(ABC):
    """
    Repository interface for InvoiceItem persistence

    Items belong to exactly one invoice and are always written as a set.
    """

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceItem]:
        """
        Retrieve all line items for an invoice, in position order

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceItem
        """
        pass

    @abstractmethod
    async def create_many(self, items: List[InvoiceItem]) -> List[InvoiceItem]:
        """
        Persist line items

        Args:
            items: InvoiceItem entities (invoice_id already set)

        Returns:
            Created items with generated IDs
        """
        pass

    @abstractmethod
    async def delete_by_invoice_id(self, invoice_id: int) -> None:
        """
        Remove all line items of an invoice

        Args:
            invoice_id: Invoice ID
        """
        pass

    @abstractmethod
    async def count_invoices_by_product(self, product_id: int) -> int:
        """
        Count distinct invoices with at least one line for a product

        Args:
            product_id: Product ID

        Returns:
            Number of invoices referencing the product
        """
        pass
