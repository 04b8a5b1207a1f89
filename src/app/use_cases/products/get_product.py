import logging
from libs.result import Result, Return, Error
from src.app.repositories.product_repository import ProductRepository
from src.domain.errors import InvoicingError, NotFoundError
from .dtos import ProductResponseDTO
from .normalization import to_product_response

logger = logging.getLogger(__name__)


class GetProduct:
    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def execute(self, product_id: int) -> Result[ProductResponseDTO]:
        try:
            product = await self.product_repo.get_by_id(product_id)
            if not product:
                raise NotFoundError("product", [product_id])
            return Return.ok(to_product_response(product))

        except InvoicingError as e:
            return Return.err(e.to_error())

        except Exception as e:
            logger.error(f"Failed to load product {product_id}: {e}")
            return Return.err(
                Error(
                    code="GET_PRODUCT_FAILED",
                    message="Failed to retrieve product",
                    reason=str(e),
                )
            )
