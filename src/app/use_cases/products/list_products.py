import logging
from libs.result import Result, Return, Error
from src.app.repositories.product_repository import ProductRepository
from .dtos import ListProductsQueryDTO, ListProductsResponseDTO
from .normalization import to_product_response

logger = logging.getLogger(__name__)


class ListProducts:
    """Use Case: Page through products, newest first, by category and active flag"""

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def execute(self, query: ListProductsQueryDTO) -> Result[ListProductsResponseDTO]:
        try:
            products = await self.product_repo.find(
                category=query.category,
                is_active=query.is_active,
                limit=query.limit,
                offset=query.offset,
            )
            total_count = await self.product_repo.count(
                category=query.category, is_active=query.is_active
            )

            return Return.ok(
                ListProductsResponseDTO(
                    products=[to_product_response(product) for product in products],
                    total_count=total_count,
                    limit=query.limit,
                    offset=query.offset,
                )
            )

        except Exception as e:
            logger.error(f"Failed to list products: {e}")
            return Return.err(
                Error(
                    code="LIST_PRODUCTS_FAILED",
                    message="Failed to list products",
                    reason=str(e),
                )
            )
