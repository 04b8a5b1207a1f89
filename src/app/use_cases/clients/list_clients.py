"""ListClients Use Case

Retrieves a page of clients ordered by name.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.client_repository import ClientRepository
from .dtos import ListClientsQueryDTO, ListClientsResponseDTO
from .normalization import to_client_response

logger = logging.getLogger(__name__)


class ListClients:
    """
    Use Case: List clients

    Filters by address state (case-insensitive) and active flag.
    total_count is the number of matching clients across all pages.
    """

    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self, query: ListClientsQueryDTO) -> Result[ListClientsResponseDTO]:
        try:
            clients = await self.client_repo.find(
                state=query.state,
                is_active=query.is_active,
                limit=query.limit,
                offset=query.offset,
            )
            total_count = await self.client_repo.count(state=query.state, is_active=query.is_active)

            return Return.ok(
                ListClientsResponseDTO(
                    clients=[to_client_response(client) for client in clients],
                    total_count=total_count,
                    limit=query.limit,
                    offset=query.offset,
                )
            )

        except Exception as e:
            logger.error(f"Failed to list clients: {e}")
            return Return.err(
                Error(
                    code="LIST_CLIENTS_FAILED",
                    message="Failed to list clients",
                    reason=str(e),
                )
            )
