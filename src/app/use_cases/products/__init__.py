"""Product use cases"""
from .create_product import CreateProduct
from .update_product import UpdateProduct
from .get_product import GetProduct
from .delete_product import DeleteProduct
from .list_products import ListProducts
from .dtos import (
    CreateProductCommandDTO,
    UpdateProductCommandDTO,
    ProductResponseDTO,
    DeletedProductDTO,
    ListProductsQueryDTO,
    ListProductsResponseDTO,
)

__all__ = [
    "CreateProduct",
    "UpdateProduct",
    "GetProduct",
    "DeleteProduct",
    "ListProducts",
    "CreateProductCommandDTO",
    "UpdateProductCommandDTO",
    "ProductResponseDTO",
    "DeletedProductDTO",
    "ListProductsQueryDTO",
    "ListProductsResponseDTO",
]
