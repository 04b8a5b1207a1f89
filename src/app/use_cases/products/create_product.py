"""CreateProduct Use Case"""

import logging
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.product_repository import ProductRepository
from src.domain.errors import DuplicateError, InvoicingError
from src.domain.product import Product
from .dtos import CreateProductCommandDTO, ProductResponseDTO
from .normalization import normalize_sku, to_product_response

logger = logging.getLogger(__name__)


class CreateProduct:
    """
    Use Case: Create a product

    Business Rules:
    1. base_price >= 0, hsn_code > 0
    2. sku is upper-cased and must be unique when present
    """

    def __init__(self, uow: UnitOfWork, product_repo: ProductRepository):
        self.uow = uow
        self.product_repo = product_repo

    async def execute(self, command: CreateProductCommandDTO) -> Result[ProductResponseDTO]:
        try:
            sku = normalize_sku(command.sku)
            if sku and await self.product_repo.get_by_sku(sku):
                raise DuplicateError("sku", sku)

            product = Product(
                name=command.name.strip(),
                description=command.description,
                base_price=command.base_price,
                category=command.category.strip(),
                sku=sku,
                hsn_code=command.hsn_code,
                is_active=command.is_active,
            )
            created_product = await self.product_repo.create(product)
            await self.uow.commit()
            logger.info(f"Created product {created_product.id} ({created_product.name})")

            return Return.ok(to_product_response(created_product))

        except InvoicingError as e:
            await self.uow.rollback()
            return Return.err(e.to_error())

        except IntegrityError as e:
            await self.uow.rollback()
            return Return.err(DuplicateError.from_integrity_error(e).to_error())

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Product creation failed: {e}")
            return Return.err(
                Error(
                    code="CREATE_PRODUCT_FAILED",
                    message="Failed to create product",
                    reason=str(e),
                )
            )
