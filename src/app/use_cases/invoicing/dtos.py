"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field
from src.domain.invoice import InvoiceStatus, TaxJurisdiction
from src.domain.invoice_item import ItemSize


class InvoiceItemInputDTO(BaseModel):
    """
    Line item as supplied by the caller

    line_total is never accepted; it is derived from quantity and unit_price.
    """

    product_id: int = Field(
        ...,
        description="Product being invoiced"
    )

    size: ItemSize = Field(
        ...,
        description="Supplied size"
    )

    quantity: int = Field(
        ...,
        ge=1,
        description="Quantity (must be >= 1)"
    )

    unit_price: Decimal = Field(
        ...,
        ge=0,
        description="Price per unit on this invoice (must be >= 0)"
    )


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    Used as input to CreateInvoice use case.
    """

    client_id: int = Field(
        ...,
        description="Billed client"
    )

    invoice_date: Optional[date] = Field(
        default=None,
        description="Invoice date (defaults to today)"
    )

    due_date: date = Field(
        ...,
        description="Payment due date (must be after invoice_date)"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.DRAFT,
        description="Initial status (defaults to draft)"
    )

    items: List[InvoiceItemInputDTO] = Field(
        ...,
        description="Line items (at least one)"
    )

    tax_jurisdiction: Optional[TaxJurisdiction] = Field(
        default=None,
        description="in-state/out-state; derived from the client's state when omitted"
    )

    notes: Optional[str] = Field(
        default=None,
        max_length=1000,
        description="Free-form notes"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "client_id": 1,
                "invoice_date": "2024-01-15",
                "due_date": "2024-02-14",
                "items": [
                    {"product_id": 3, "size": "medium", "quantity": 2, "unit_price": "100.00"},
                    {"product_id": 4, "size": "large", "quantity": 3, "unit_price": "150.00"}
                ],
                "tax_jurisdiction": "in-state",
                "notes": "Thank you for your business"
            }
        }


class UpdateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for updating an invoice

    Only fields explicitly set are applied (see ``model_fields_set``).
    """

    client_id: Optional[int] = None
    invoice_date: Optional[date] = None
    due_date: Optional[date] = None
    status: Optional[InvoiceStatus] = None
    items: Optional[List[InvoiceItemInputDTO]] = None
    tax_jurisdiction: Optional[TaxJurisdiction] = None
    notes: Optional[str] = Field(default=None, max_length=1000)


class ChangeInvoiceStatusCommandDTO(BaseModel):
    """
    Command DTO for an explicit status change

    The only path that consults the status transition table.
    """

    status: InvoiceStatus = Field(
        ...,
        description="Requested status"
    )


class InvoicePatchDTO(BaseModel):
    """Fields a bulk update may touch"""

    status: Optional[InvoiceStatus] = None
    due_date: Optional[date] = None
    notes: Optional[str] = Field(default=None, max_length=1000)


class BulkUpdateInvoicesCommandDTO(BaseModel):
    """
    Command DTO for applying one patch to many invoices

    Either every invoice exists and the patch is valid for all of them,
    or nothing is written.
    """

    invoice_ids: List[int] = Field(
        ...,
        description="Invoices to update"
    )

    patch: InvoicePatchDTO = Field(
        ...,
        description="Fields to apply to every invoice"
    )


class ListInvoicesQueryDTO(BaseModel):
    client_id: Optional[int] = None
    status: Optional[InvoiceStatus] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class InvoiceClientDTO(BaseModel):
    """Client fields expanded into a materialized invoice"""

    id: int
    name: str
    email: str
    phone: str
    gst_number: Optional[str] = None
    pan_number: Optional[str] = None
    address: Dict[str, Any] = Field(default_factory=dict)


class InvoiceItemDTO(BaseModel):
    """Line item with product fields expanded"""

    product_id: int
    product_name: Optional[str] = None
    product_description: Optional[str] = None
    category: Optional[str] = None
    base_price: Optional[Decimal] = None
    hsn_code: Optional[int] = None
    size: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal


class InvoiceDetailDTO(BaseModel):
    """
    Response DTO for a fully materialized invoice

    Returned by create, update, status change and get operations, and
    consumed by the PDF renderer.
    """

    invoice_id: int
    invoice_number: str
    status: str
    invoice_date: date
    due_date: date
    tax_jurisdiction: str
    client: Optional[InvoiceClientDTO] = None
    items: List[InvoiceItemDTO] = Field(default_factory=list)
    subtotal: Decimal
    cgst: Decimal
    sgst: Decimal
    igst: Decimal
    total_tax: Decimal
    total_amount: Decimal
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": 1,
                "invoice_number": "INV-2024-0001",
                "status": "draft",
                "invoice_date": "2024-01-15",
                "due_date": "2024-02-14",
                "tax_jurisdiction": "in-state",
                "client": {"id": 1, "name": "Sunrise Orthopaedics", "email": "accounts@sunrise-ortho.in"},
                "items": [],
                "subtotal": "925.000000",
                "cgst": "23.125000",
                "sgst": "23.125000",
                "igst": "0.000000",
                "total_tax": "46.250000",
                "total_amount": "971.250000",
                "created_at": "2024-01-15T00:00:00Z",
                "updated_at": "2024-01-15T00:00:00Z"
            }
        }


class InvoiceSummaryDTO(BaseModel):
    """Invoice row for listings (no item expansion)"""

    invoice_id: int
    invoice_number: str
    client_id: int
    status: str
    invoice_date: date
    due_date: date
    total_amount: Decimal


class ListInvoicesResponseDTO(BaseModel):
    invoices: List[InvoiceSummaryDTO]
    limit: int
    offset: int


class DeletedInvoiceDTO(BaseModel):
    invoice_id: int
    invoice_number: str


class BulkUpdateResultDTO(BaseModel):
    """Response DTO for bulk update"""

    matched_count: int = Field(
        ...,
        description="Invoices addressed by the request"
    )

    modified_count: int = Field(
        ...,
        description="Invoices whose stored values actually changed"
    )


class InvoiceStatsQueryDTO(BaseModel):
    client_id: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class InvoiceStatsDTO(BaseModel):
    """Response DTO for invoice statistics"""

    total_invoices: int
    total_amount: Decimal
    total_tax: Decimal
    draft_invoices: int
    sent_invoices: int
    paid_invoices: int
    overdue_invoices: int
    paid_amount: Decimal
    pending_amount: Decimal
    average_amount: Decimal


class InvoicePdfResponseDTO(BaseModel):
    """Response DTO for a rendered invoice PDF"""

    invoice_id: int
    invoice_number: str
    pdf_base64: str = Field(
        ...,
        description="Base64-encoded PDF document"
    )
    generated_at: datetime


class ClientInvoicesQueryDTO(BaseModel):
    status: Optional[InvoiceStatus] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ClientInvoiceSummaryDTO(BaseModel):
    """All-time figures for one client, independent of the page filters"""

    total_invoices: int
    total_amount: Decimal
    paid_invoices: int
    pending_invoices: int
    pending_amount: Decimal


class ClientInvoicesResponseDTO(BaseModel):
    client_id: int
    client_name: str
    invoices: List[InvoiceSummaryDTO]
    summary: ClientInvoiceSummaryDTO
    limit: int
    offset: int
