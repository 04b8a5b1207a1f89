"""Product API Routes

FastAPI routes for the product catalog.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.product_request import CreateProductRequestSchema, UpdateProductRequestSchema
from src.app.use_cases.products import (
    CreateProduct,
    UpdateProduct,
    GetProduct,
    DeleteProduct,
    ListProducts,
    CreateProductCommandDTO,
    UpdateProductCommandDTO,
    ProductResponseDTO,
    DeletedProductDTO,
    ListProductsQueryDTO,
    ListProductsResponseDTO,
)
from src.app.services.integrity_guard import ReferentialIntegrityGuard
from src.adapter.repositories import (
    SqlAlchemyProductRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyInvoiceItemRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/products", tags=["Products"])


@router.post("", response_model=ProductResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: CreateProductRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Create a product.

    **Returns:**
    - 201: Product created
    - 400: Invalid request parameters
    - 409: SKU already exists
    """
    uow = SqlAlchemyUnitOfWork(session)
    product_repo = SqlAlchemyProductRepository(session)

    command = CreateProductCommandDTO(**request.model_dump())

    use_case = CreateProduct(uow, product_repo)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("", response_model=ListProductsResponseDTO)
async def list_products(
    category: Optional[str] = Query(default=None),
    is_active: Optional[bool] = Query(default=None),
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_session)
):
    """List products, newest first. category matches case-insensitively."""
    query = ListProductsQueryDTO(category=category, is_active=is_active, limit=limit, offset=offset)

    use_case = ListProducts(SqlAlchemyProductRepository(session))
    result = await use_case.execute(query)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/{product_id}", response_model=ProductResponseDTO)
async def get_product(
    product_id: int,
    session: AsyncSession = Depends(get_session)
):
    use_case = GetProduct(SqlAlchemyProductRepository(session))
    result = await use_case.execute(product_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put("/{product_id}", response_model=ProductResponseDTO)
async def update_product(
    product_id: int,
    request: UpdateProductRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    uow = SqlAlchemyUnitOfWork(session)
    product_repo = SqlAlchemyProductRepository(session)

    command = UpdateProductCommandDTO(**request.model_dump(exclude_unset=True))

    use_case = UpdateProduct(uow, product_repo)
    result = await use_case.execute(product_id, command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete(
    "/{product_id}",
    response_model=DeletedProductDTO,
    responses={
        422: {
            "description": "Product is referenced by invoices",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "PRODUCT_REFERENCED",
                            "message": "Cannot delete product 4. It is referenced by 2 invoice(s)",
                            "details": {"referenced_invoices": 2}
                        }
                    }
                }
            }
        }
    }
)
async def delete_product(
    product_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Delete a product.

    **Returns:**
    - 200: Product deleted
    - 404: Product not found
    - 422: Product appears on at least one invoice
    """
    uow = SqlAlchemyUnitOfWork(session)
    product_repo = SqlAlchemyProductRepository(session)
    guard = ReferentialIntegrityGuard(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )

    use_case = DeleteProduct(uow, product_repo, guard)
    result = await use_case.execute(product_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
