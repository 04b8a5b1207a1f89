from typing import Optional
from src.domain.product import Product
from .dtos import ProductResponseDTO


def normalize_sku(sku: Optional[str]) -> Optional[str]:
    """Upper-case and trim; blank means no sku"""
    if sku is None:
        return None
    return sku.strip().upper() or None


def to_product_response(product: Product) -> ProductResponseDTO:
    return ProductResponseDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        base_price=product.base_price,
        category=product.category,
        sku=product.sku,
        hsn_code=product.hsn_code,
        is_active=product.is_active,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )
