"""UpdateProduct Use Case"""

import logging
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.product_repository import ProductRepository
from src.domain.errors import DuplicateError, InvoicingError, NotFoundError
from .dtos import UpdateProductCommandDTO, ProductResponseDTO
from .normalization import normalize_sku, to_product_response

logger = logging.getLogger(__name__)


class UpdateProduct:
    """
    Use Case: Update a product

    Price changes do not touch existing invoices; their line items keep
    the unit price they were issued with.
    """

    def __init__(self, uow: UnitOfWork, product_repo: ProductRepository):
        self.uow = uow
        self.product_repo = product_repo

    async def execute(self, product_id: int, command: UpdateProductCommandDTO) -> Result[ProductResponseDTO]:
        try:
            product = await self.product_repo.get_by_id(product_id)
            if not product:
                raise NotFoundError("product", [product_id])

            fields = command.model_fields_set

            if "sku" in fields:
                sku = normalize_sku(command.sku)
                if sku and sku != product.sku:
                    existing = await self.product_repo.get_by_sku(sku)
                    if existing and existing.id != product.id:
                        raise DuplicateError("sku", sku)
                product.sku = sku

            for name in ("name", "category"):
                value = getattr(command, name)
                if name in fields and value is not None:
                    setattr(product, name, value.strip())
            for name in ("base_price", "hsn_code", "is_active"):
                value = getattr(command, name)
                if name in fields and value is not None:
                    setattr(product, name, value)
            if "description" in fields:
                product.description = command.description

            updated_product = await self.product_repo.update(product)
            await self.uow.commit()
            logger.info(f"Updated product {product_id}: {sorted(fields)}")

            return Return.ok(to_product_response(updated_product))

        except InvoicingError as e:
            await self.uow.rollback()
            return Return.err(e.to_error())

        except IntegrityError as e:
            await self.uow.rollback()
            return Return.err(DuplicateError.from_integrity_error(e).to_error())

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Product update failed for {product_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_PRODUCT_FAILED",
                    message="Failed to update product",
                    reason=str(e),
                )
            )
