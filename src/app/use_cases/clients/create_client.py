"""CreateClient Use Case"""

import logging
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.domain.client import Client
from src.domain.errors import DuplicateError, InvoicingError
from .dtos import CreateClientCommandDTO, ClientResponseDTO
from .normalization import (
    normalize_address,
    normalize_email,
    normalize_gst_number,
    normalize_pan_number,
    to_client_response,
)

logger = logging.getLogger(__name__)


class CreateClient:
    """
    Use Case: Create a client

    Business Rules:
    1. email is lower-cased and must be unique
    2. gst_number and pan_number are optional; when given they are
       upper-cased, stripped of whitespace and must match their formats
    """

    def __init__(self, uow: UnitOfWork, client_repo: ClientRepository):
        self.uow = uow
        self.client_repo = client_repo

    async def execute(self, command: CreateClientCommandDTO) -> Result[ClientResponseDTO]:
        try:
            email = normalize_email(command.email)
            if await self.client_repo.get_by_email(email):
                raise DuplicateError("email", email)

            client = Client(
                name=command.name.strip(),
                email=email,
                phone=command.phone.strip(),
                gst_number=normalize_gst_number(command.gst_number),
                pan_number=normalize_pan_number(command.pan_number),
                address=normalize_address(command.address),
                is_active=command.is_active,
            )
            created_client = await self.client_repo.create(client)
            await self.uow.commit()
            logger.info(f"Created client {created_client.id} ({email})")

            return Return.ok(to_client_response(created_client))

        except InvoicingError as e:
            await self.uow.rollback()
            return Return.err(e.to_error())

        except IntegrityError as e:
            await self.uow.rollback()
            return Return.err(DuplicateError.from_integrity_error(e).to_error())

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Client creation failed: {e}")
            return Return.err(
                Error(
                    code="CREATE_CLIENT_FAILED",
                    message="Failed to create client",
                    reason=str(e),
                )
            )
