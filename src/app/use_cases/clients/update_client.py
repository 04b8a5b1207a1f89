"""UpdateClient Use Case"""

import logging
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.domain.errors import DuplicateError, InvoicingError, NotFoundError
from .dtos import UpdateClientCommandDTO, ClientResponseDTO
from .normalization import (
    normalize_address,
    normalize_email,
    normalize_gst_number,
    normalize_pan_number,
    to_client_response,
)

logger = logging.getLogger(__name__)


class UpdateClient:
    """
    Use Case: Update a client

    Only explicitly set fields are applied. Sending an empty gst_number or
    pan_number clears it. Existing invoices keep their stored jurisdiction
    when the address changes.
    """

    def __init__(self, uow: UnitOfWork, client_repo: ClientRepository):
        self.uow = uow
        self.client_repo = client_repo

    async def execute(self, client_id: int, command: UpdateClientCommandDTO) -> Result[ClientResponseDTO]:
        try:
            client = await self.client_repo.get_by_id(client_id)
            if not client:
                raise NotFoundError("client", [client_id])

            fields = command.model_fields_set

            if "email" in fields and command.email is not None:
                email = normalize_email(command.email)
                if email != client.email:
                    existing = await self.client_repo.get_by_email(email)
                    if existing and existing.id != client.id:
                        raise DuplicateError("email", email)
                    client.email = email

            if "name" in fields and command.name is not None:
                client.name = command.name.strip()
            if "phone" in fields and command.phone is not None:
                client.phone = command.phone.strip()
            if "gst_number" in fields:
                client.gst_number = normalize_gst_number(command.gst_number)
            if "pan_number" in fields:
                client.pan_number = normalize_pan_number(command.pan_number)
            if "address" in fields and command.address is not None:
                client.address = normalize_address(command.address)
            if "is_active" in fields and command.is_active is not None:
                client.is_active = command.is_active

            updated_client = await self.client_repo.update(client)
            await self.uow.commit()
            logger.info(f"Updated client {client_id}: {sorted(fields)}")

            return Return.ok(to_client_response(updated_client))

        except InvoicingError as e:
            await self.uow.rollback()
            return Return.err(e.to_error())

        except IntegrityError as e:
            await self.uow.rollback()
            return Return.err(DuplicateError.from_integrity_error(e).to_error())

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Client update failed for {client_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_CLIENT_FAILED",
                    message="Failed to update client",
                    reason=str(e),
                )
            )
