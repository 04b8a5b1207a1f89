"""Invoice materialization

Joins an invoice with its client and the products of its line items
for display and PDF rendering.
"""

from typing import Dict, Optional
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.product_repository import ProductRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.client import Client
from src.domain.invoice import Invoice, InvoiceStatus, TaxJurisdiction
from src.domain.product import Product
from .dtos import InvoiceClientDTO, InvoiceDetailDTO, InvoiceItemDTO


class InvoiceMaterializer:
    def __init__(
        self,
        client_repo: ClientRepository,
        product_repo: ProductRepository,
        invoice_item_repo: InvoiceItemRepository,
    ):
        self.client_repo = client_repo
        self.product_repo = product_repo
        self.invoice_item_repo = invoice_item_repo

    async def materialize(self, invoice: Invoice) -> InvoiceDetailDTO:
        items = await self.invoice_item_repo.get_by_invoice_id(invoice.id)
        client = await self.client_repo.get_by_id(invoice.client_id)
        product_ids = {item.product_id for item in items}
        products: Dict[int, Product] = {}
        if product_ids:
            products = {p.id: p for p in await self.product_repo.get_by_ids(product_ids)}

        item_dtos = []
        for item in items:
            product = products.get(item.product_id)
            item_dtos.append(
                InvoiceItemDTO(
                    product_id=item.product_id,
                    product_name=product.name if product else None,
                    product_description=product.description if product else None,
                    category=product.category if product else None,
                    base_price=product.base_price if product else None,
                    hsn_code=product.hsn_code if product else None,
                    size=_enum_value(item.size),
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    line_total=item.line_total,
                )
            )

        return InvoiceDetailDTO(
            invoice_id=invoice.id,
            invoice_number=invoice.invoice_number,
            status=InvoiceStatus(invoice.status).value,
            invoice_date=invoice.invoice_date,
            due_date=invoice.due_date,
            tax_jurisdiction=TaxJurisdiction(invoice.tax_jurisdiction).value,
            client=_client_dto(client),
            items=item_dtos,
            subtotal=invoice.subtotal,
            cgst=invoice.cgst,
            sgst=invoice.sgst,
            igst=invoice.igst,
            total_tax=invoice.total_tax,
            total_amount=invoice.total_amount,
            notes=invoice.notes,
            created_at=invoice.created_at,
            updated_at=invoice.updated_at,
        )


def _enum_value(value) -> str:
    return getattr(value, "value", value)


def _client_dto(client: Optional[Client]) -> Optional[InvoiceClientDTO]:
    if client is None:
        return None
    return InvoiceClientDTO(
        id=client.id,
        name=client.name,
        email=client.email,
        phone=client.phone,
        gst_number=client.gst_number,
        pan_number=client.pan_number,
        address=client.address or {},
    )
