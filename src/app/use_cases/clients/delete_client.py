"""DeleteClient Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.integrity_guard import ReferentialIntegrityGuard
from src.app.repositories.client_repository import ClientRepository
from src.domain.errors import InvoicingError, NotFoundError
from .dtos import DeletedClientDTO

logger = logging.getLogger(__name__)


class DeleteClient:
    """
    Use Case: Delete a client

    Business Rules:
    1. Client must exist
    2. Blocked while any invoice references the client; the error
       carries the exact number of referencing invoices
    """

    def __init__(
        self,
        uow: UnitOfWork,
        client_repo: ClientRepository,
        guard: ReferentialIntegrityGuard,
    ):
        self.uow = uow
        self.client_repo = client_repo
        self.guard = guard

    async def execute(self, client_id: int) -> Result[DeletedClientDTO]:
        try:
            client = await self.client_repo.get_by_id(client_id)
            if not client:
                raise NotFoundError("client", [client_id])

            await self.guard.ensure_client_deletable(client_id)

            name = client.name
            await self.client_repo.delete(client)
            await self.uow.commit()
            logger.info(f"Deleted client {client_id}")

            return Return.ok(DeletedClientDTO(client_id=client_id, name=name))

        except InvoicingError as e:
            await self.uow.rollback()
            return Return.err(e.to_error())

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Client deletion failed for {client_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_CLIENT_FAILED",
                    message="Failed to delete client",
                    reason=str(e),
                )
            )
