"""Request schemas for Product API"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field
from src.domain.product import DEFAULT_HSN_CODE


class CreateProductRequestSchema(BaseModel):
    """
    Request schema for creating a product

    Used for POST /products endpoint.
    """

    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    base_price: Decimal = Field(
        ...,
        ge=0,
        description="List price (must be >= 0)"
    )
    category: str = Field(..., min_length=1, max_length=100)
    sku: Optional[str] = Field(default=None, max_length=50)
    hsn_code: int = Field(
        default=DEFAULT_HSN_CODE,
        gt=0,
        description="HSN tax classification code"
    )
    is_active: bool = True

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Knee Brace",
                "description": "Hinged knee support",
                "base_price": "1450.00",
                "category": "Orthotics",
                "sku": "KB-HINGE-01",
                "hsn_code": 9021
            }
        }


class UpdateProductRequestSchema(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    base_price: Optional[Decimal] = Field(default=None, ge=0)
    category: Optional[str] = Field(default=None, min_length=1, max_length=100)
    sku: Optional[str] = Field(default=None, max_length=50)
    hsn_code: Optional[int] = Field(default=None, gt=0)
    is_active: Optional[bool] = None
