"""Product Domain Entity

Catalog item referenced by invoice line items.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, Integer, Numeric, String, Text
from src.domain.base import BaseModel, id_column, timestamp_column, utcnow

DEFAULT_HSN_CODE = 9021


class Product(BaseModel, table=True):
    """
    Product - Catalog item that can be invoiced

    Domain Rules:
    - base_price must be non-negative
    - sku is optional but unique when present (stored upper-cased)
    - hsn_code is the tax classification code (defaults to 9021)
    - Deletion is blocked while any invoice line item references the product
    """

    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint('base_price >= 0', name='base_price_non_negative'),
        CheckConstraint('hsn_code > 0', name='hsn_code_positive'),
        Index('ix_products_name', 'name'),
        Index('ix_products_category', 'category'),
    )

    id: int = Field(
        sa_column=id_column(),
        description="Unique product identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Product name"
    )

    description: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Product description"
    )

    base_price: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="List price (precision: 18,6)"
    )

    category: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Product category"
    )

    sku: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True, unique=True),
        description="Stock keeping unit (unique when present, upper-cased)"
    )

    hsn_code: int = Field(
        default=DEFAULT_HSN_CODE,
        sa_column=Column(Integer, nullable=False, default=DEFAULT_HSN_CODE),
        description="HSN tax classification code"
    )

    is_active: bool = Field(
        default=True,
        description="Whether the product is active"
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=timestamp_column(),
        description="Product creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=timestamp_column(),
        description="Last update timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "name": "Knee Brace",
                "description": "Hinged knee support",
                "base_price": "1450.000000",
                "category": "Orthotics",
                "sku": "KB-HINGE-01",
                "hsn_code": 9021,
                "is_active": True,
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:00:00Z"
            }
        }
