"""Client use cases"""
from .create_client import CreateClient
from .update_client import UpdateClient
from .get_client import GetClient
from .delete_client import DeleteClient
from .list_clients import ListClients
from .dtos import (
    AddressDTO,
    CreateClientCommandDTO,
    UpdateClientCommandDTO,
    ClientResponseDTO,
    DeletedClientDTO,
    ListClientsQueryDTO,
    ListClientsResponseDTO,
)

__all__ = [
    "CreateClient",
    "UpdateClient",
    "GetClient",
    "DeleteClient",
    "ListClients",
    "AddressDTO",
    "CreateClientCommandDTO",
    "UpdateClientCommandDTO",
    "ClientResponseDTO",
    "DeletedClientDTO",
    "ListClientsQueryDTO",
    "ListClientsResponseDTO",
]
