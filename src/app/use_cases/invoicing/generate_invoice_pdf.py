"""GenerateInvoicePdf Use Case

Renders a tax invoice PDF for any invoice.
"""

import base64
import logging
from libs.result import Result, Return, Error
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.product_repository import ProductRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.services.pdf_service import PdfService
from src.domain.base import utcnow
from src.domain.errors import InvoicingError, NotFoundError
from .dtos import InvoicePdfResponseDTO
from .materializer import InvoiceMaterializer

logger = logging.getLogger(__name__)


class GenerateInvoicePdf:
    """
    Use Case: Generate invoice PDF

    Business Rules:
    1. Invoice must exist
    2. Rendering reads the materialized invoice and never modifies it
    3. Returns the PDF as a base64-encoded string

    Flow:
    1. Retrieve and materialize the invoice
    2. Render PDF with the configured company header
    3. Return response with PDF as base64
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        invoice_item_repo: InvoiceItemRepository,
        client_repo: ClientRepository,
        product_repo: ProductRepository,
        pdf_service: PdfService,
        company_name: str,
        company_address: str,
    ):
        self.invoice_repo = invoice_repo
        self.materializer = InvoiceMaterializer(client_repo, product_repo, invoice_item_repo)
        self.pdf_service = pdf_service
        self.company_name = company_name
        self.company_address = company_address

    async def execute(self, invoice_id: int) -> Result[InvoicePdfResponseDTO]:
        """
        Execute invoice PDF generation

        Args:
            invoice_id: Invoice ID to render

        Returns:
            Result[InvoicePdfResponseDTO]: Success with PDF or error
        """
        try:
            # Step 1: Retrieve invoice
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            if not invoice:
                raise NotFoundError("invoice", [invoice_id])
            detail = await self.materializer.materialize(invoice)

            # Step 2: Render
            pdf_bytes = self.pdf_service.generate_invoice(
                detail,
                company_name=self.company_name,
                company_address=self.company_address,
            )

            # Step 3: Build response
            return Return.ok(
                InvoicePdfResponseDTO(
                    invoice_id=detail.invoice_id,
                    invoice_number=detail.invoice_number,
                    pdf_base64=base64.b64encode(pdf_bytes).decode("utf-8"),
                    generated_at=utcnow(),
                )
            )

        except InvoicingError as e:
            return Return.err(e.to_error())

        except Exception as e:
            logger.error(f"PDF generation failed for invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="GENERATE_INVOICE_PDF_FAILED",
                    message="Failed to generate invoice PDF",
                    reason=str(e),
                )
            )
