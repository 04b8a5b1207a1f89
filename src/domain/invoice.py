"""Invoice Domain Entity

Tracks client invoices, their tax breakdown and payment status.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, CheckConstraint, ForeignKey, Integer, Numeric, String, Date, Text
from src.domain.base import BaseModel, id_column, timestamp_column, utcnow


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"


class TaxJurisdiction(str, Enum):
    """Whether the client is billed inside or outside the business home state"""
    IN_STATE = "in-state"      # CGST + SGST
    OUT_STATE = "out-state"    # IGST


class Invoice(BaseModel, table=True):
    """
    Invoice - Billing document issued to a client

    Domain Rules:
    - invoice_number is unique and assigned once at creation (INV-YYYY-NNNN)
    - due_date must be strictly after invoice_date
    - Status transitions: draft -> sent/paid, sent -> paid/overdue, overdue -> paid
    - paid invoices cannot be deleted
    - subtotal, cgst, sgst, igst, total_tax and total_amount are derived from
      the line items and tax_jurisdiction, never supplied directly
    - total_amount == subtotal + total_tax
    """

    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint('due_date > invoice_date', name='due_after_invoice_date'),
        Index('ix_invoices_client_id', 'client_id'),
        Index('ix_invoices_status', 'status'),
        Index('ix_invoices_invoice_date', 'invoice_date'),
        Index('ix_invoices_status_due_date', 'status', 'due_date'),
    )

    id: int = Field(
        sa_column=id_column(),
        description="Unique invoice identifier (auto-increment)"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Unique invoice number (e.g., INV-2024-0001)"
    )

    client_id: int = Field(
        sa_column=Column(
            BigInteger().with_variant(Integer, "sqlite"),
            ForeignKey("clients.id"),
            nullable=False,
        ),
        description="Billed client (deletion of a referenced client is blocked)"
    )

    invoice_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Invoice issue date"
    )

    due_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Payment due date (strictly after invoice_date)"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.DRAFT,
        description="Invoice status (draft, sent, paid, overdue)"
    )

    tax_jurisdiction: TaxJurisdiction = Field(
        description="in-state (CGST + SGST) or out-state (IGST)"
    )

    subtotal: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Sum of line totals (precision: 18,6)"
    )

    cgst: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Central GST (in-state only)"
    )

    sgst: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="State GST (in-state only)"
    )

    igst: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Integrated GST (out-state only)"
    )

    total_tax: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="cgst + sgst + igst"
    )

    total_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="subtotal + total_tax"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Free-form notes printed on the invoice"
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=timestamp_column(),
        description="Invoice creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=timestamp_column(),
        description="Last update timestamp"
    )

    def apply_tax(self, breakdown) -> None:
        """Copy a TaxBreakdown onto the derived money fields"""
        self.subtotal = breakdown.subtotal
        self.cgst = breakdown.cgst
        self.sgst = breakdown.sgst
        self.igst = breakdown.igst
        self.total_tax = breakdown.total_tax
        self.total_amount = breakdown.total_amount

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "invoice_number": "INV-2024-0001",
                "client_id": 1,
                "invoice_date": "2024-01-15",
                "due_date": "2024-02-14",
                "status": "draft",
                "tax_jurisdiction": "in-state",
                "subtotal": "925.000000",
                "cgst": "23.125000",
                "sgst": "23.125000",
                "igst": "0.000000",
                "total_tax": "46.250000",
                "total_amount": "971.250000",
                "notes": None,
                "created_at": "2024-01-15T00:00:00Z",
                "updated_at": "2024-01-15T00:00:00Z"
            }
        }
