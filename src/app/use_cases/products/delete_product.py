"""DeleteProduct Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.integrity_guard import ReferentialIntegrityGuard
from src.app.repositories.product_repository import ProductRepository
from src.domain.errors import InvoicingError, NotFoundError
from .dtos import DeletedProductDTO

logger = logging.getLogger(__name__)


class DeleteProduct:
    """
    Use Case: Delete a product

    Business Rules:
    1. Product must exist
    2. Blocked while any invoice has a line item for the product; the
       error carries the number of distinct referencing invoices
    """

    def __init__(
        self,
        uow: UnitOfWork,
        product_repo: ProductRepository,
        guard: ReferentialIntegrityGuard,
    ):
        self.uow = uow
        self.product_repo = product_repo
        self.guard = guard

    async def execute(self, product_id: int) -> Result[DeletedProductDTO]:
        try:
            product = await self.product_repo.get_by_id(product_id)
            if not product:
                raise NotFoundError("product", [product_id])

            await self.guard.ensure_product_deletable(product_id)

            name = product.name
            await self.product_repo.delete(product)
            await self.uow.commit()
            logger.info(f"Deleted product {product_id}")

            return Return.ok(DeletedProductDTO(product_id=product_id, name=name))

        except InvoicingError as e:
            await self.uow.rollback()
            return Return.err(e.to_error())

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Product deletion failed for {product_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_PRODUCT_FAILED",
                    message="Failed to delete product",
                    reason=str(e),
                )
            )
