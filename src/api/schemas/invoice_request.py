"""Request schemas for Invoice API

Pydantic models for validating incoming HTTP requests. Derived money
fields (subtotal, taxes, totals, line totals) are never accepted.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.invoice import InvoiceStatus, TaxJurisdiction
from src.domain.invoice_item import ItemSize


class InvoiceItemSchema(BaseModel):
    product_id: int = Field(..., gt=0)
    size: ItemSize
    quantity: int = Field(
        ...,
        ge=1,
        description="Quantity (must be >= 1)"
    )
    unit_price: Decimal = Field(
        ...,
        ge=0,
        description="Price per unit (must be >= 0)"
    )


class CreateInvoiceRequestSchema(BaseModel):
    """
    Request schema for creating an invoice

    Used for POST /invoices endpoint.
    """

    client_id: int = Field(..., gt=0)
    invoice_date: Optional[date] = Field(
        default=None,
        description="Invoice date (defaults to today)"
    )
    due_date: date = Field(
        ...,
        description="Due date (must be after invoice_date)"
    )
    status: InvoiceStatus = InvoiceStatus.DRAFT
    items: List[InvoiceItemSchema] = Field(
        ...,
        min_length=1,
        description="Line items (at least one)"
    )
    tax_jurisdiction: Optional[TaxJurisdiction] = Field(
        default=None,
        description="in-state or out-state; derived from the client's state when omitted"
    )
    notes: Optional[str] = Field(default=None, max_length=1000)

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
                "notes": "Thank you for your business"
            }
        }


class UpdateInvoiceRequestSchema(BaseModel):
    """
    Request schema for updating an invoice

    Used for PUT /invoices/{invoice_id}; omitted fields are left unchanged.
    """

    client_id: Optional[int] = Field(default=None, gt=0)
    invoice_date: Optional[date] = None
    due_date: Optional[date] = None
    status: Optional[InvoiceStatus] = None
    items: Optional[List[InvoiceItemSchema]] = Field(default=None, min_length=1)
    tax_jurisdiction: Optional[TaxJurisdiction] = None
    notes: Optional[str] = Field(default=None, max_length=1000)


class ChangeStatusRequestSchema(BaseModel):
    status: InvoiceStatus

    class Config:
        json_schema_extra = {"example": {"status": "sent"}}


class InvoicePatchSchema(BaseModel):
    status: Optional[InvoiceStatus] = None
    due_date: Optional[date] = None
    notes: Optional[str] = Field(default=None, max_length=1000)


class BulkUpdateRequestSchema(BaseModel):
    """
    Request schema for bulk invoice updates

    Used for POST /invoices/bulk-update endpoint.
    """

    invoice_ids: List[int] = Field(
        ...,
        min_length=1,
        description="Invoices to update (all must exist)"
    )
    patch: InvoicePatchSchema

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_ids": [1, 2, 3],
                "patch": {"status": "sent"}
            }
        }
