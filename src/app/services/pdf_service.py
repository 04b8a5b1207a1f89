"""PDF Generation Service Interface

Defines the contract for rendering invoice documents.
"""

from abc import ABC, abstractmethod


class PdfService(ABC):
    """
    Service interface for PDF generation

    Renders a fully materialized invoice (client and product fields
    expanded). Read-only: rendering never writes back to the invoice.
    """

    @abstractmethod
    def generate_invoice(
        self,
        invoice,
        company_name: str,
        company_address: str,
    ) -> bytes:
        """
        Generate a tax invoice PDF

        Args:
            invoice: InvoiceDetailDTO with client and item details
            company_name: Issuer name to display on the invoice
            company_address: Issuer address to display on the invoice

        Returns:
            PDF document as bytes
        """
        pass
