import logging
from libs.result import Result, Return, Error
from src.app.repositories.client_repository import ClientRepository
from src.domain.errors import InvoicingError, NotFoundError
from .dtos import ClientResponseDTO
from .normalization import to_client_response

logger = logging.getLogger(__name__)


class GetClient:
    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self, client_id: int) -> Result[ClientResponseDTO]:
        try:
            client = await self.client_repo.get_by_id(client_id)
            if not client:
                raise NotFoundError("client", [client_id])
            return Return.ok(to_client_response(client))

        except InvoicingError as e:
            return Return.err(e.to_error())

        except Exception as e:
            logger.error(f"Failed to load client {client_id}: {e}")
            return Return.err(
                Error(
                    code="GET_CLIENT_FAILED",
                    message="Failed to retrieve client",
                    reason=str(e),
                )
            )
