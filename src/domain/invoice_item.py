"""Invoice Item Domain Entity

Line item owned by an invoice. Items have no lifecycle of their own:
they are written with the invoice, replaced wholesale on update and
deleted with the invoice.
"""

from decimal import Decimal
from enum import Enum
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, CheckConstraint, ForeignKey, Integer, Numeric
from src.domain.base import BaseModel, id_column


class ItemSize(str, Enum):
    """Sizes an invoiced product can be supplied in"""
    PEDIATRIC = "pediatric"
    X_SMALL = "x-small"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    X_LARGE = "x-large"
    XXL = "xxl"
    XXXL = "xxxl"
    UNIVERSAL = "universal"


class InvoiceItem(BaseModel, table=True):
    """
    Invoice Item - Single product line within an invoice

    Domain Rules:
    - quantity >= 1, unit_price >= 0
    - line_total = quantity * unit_price
    - position keeps the caller's ordering
    """

    __tablename__ = "invoice_items"
    __table_args__ = (
        CheckConstraint('quantity >= 1', name='quantity_at_least_one'),
        CheckConstraint('unit_price >= 0', name='unit_price_non_negative'),
        Index('ix_invoice_items_invoice_id', 'invoice_id'),
        Index('ix_invoice_items_product_id', 'product_id'),
    )

    id: int = Field(
        sa_column=id_column(),
        description="Unique invoice item identifier (auto-increment)"
    )

    invoice_id: int = Field(
        sa_column=Column(
            BigInteger().with_variant(Integer, "sqlite"),
            ForeignKey("invoices.id", ondelete="CASCADE"),
            nullable=False,
        ),
        description="Owning invoice"
    )

    product_id: int = Field(
        sa_column=Column(
            BigInteger().with_variant(Integer, "sqlite"),
            ForeignKey("products.id"),
            nullable=False,
        ),
        description="Invoiced product (deletion of a referenced product is blocked)"
    )

    position: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Order of the item within the invoice"
    )

    size: ItemSize = Field(
        description="Supplied size"
    )

    quantity: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Quantity (>= 1)"
    )

    unit_price: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Price charged per unit on this invoice (precision: 18,6)"
    )

    line_total: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="quantity * unit_price"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "invoice_id": 1,
                "product_id": 3,
                "position": 0,
                "size": "medium",
                "quantity": 2,
                "unit_price": "100.000000",
                "line_total": "200.000000"
            }
        }
