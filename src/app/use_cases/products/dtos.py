"""Data Transfer Objects for Product Use Cases"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.product import DEFAULT_HSN_CODE


class CreateProductCommandDTO(BaseModel):
    """
    Command DTO for creating a product

    sku is upper-cased and must be unique when given.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Product name"
    )

    description: Optional[str] = Field(
        default=None,
        max_length=1000,
        description="Product description"
    )

    base_price: Decimal = Field(
        ...,
        ge=0,
        description="List price (must be >= 0)"
    )

    category: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Product category"
    )

    sku: Optional[str] = Field(
        default=None,
        max_length=50,
        description="Stock keeping unit"
    )

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
                "sku": "kb-hinge-01",
                "hsn_code": 9021
            }
        }


class UpdateProductCommandDTO(BaseModel):
    """Partial product update; only explicitly set fields are applied"""

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    base_price: Optional[Decimal] = Field(default=None, ge=0)
    category: Optional[str] = Field(default=None, min_length=1, max_length=100)
    sku: Optional[str] = Field(default=None, max_length=50)
    hsn_code: Optional[int] = Field(default=None, gt=0)
    is_active: Optional[bool] = None


class ProductResponseDTO(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    base_price: Decimal
    category: str
    sku: Optional[str] = None
    hsn_code: int
    is_active: bool
    created_at: datetime
    updated_at: datetime


class DeletedProductDTO(BaseModel):
    product_id: int
    name: str


class ListProductsQueryDTO(BaseModel):
    category: Optional[str] = None
    is_active: Optional[bool] = None
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListProductsResponseDTO(BaseModel):
    products: List[ProductResponseDTO]
    total_count: int
    limit: int
    offset: int
