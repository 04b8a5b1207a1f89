"""Client API Routes

FastAPI routes for client management.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.client_request import CreateClientRequestSchema, UpdateClientRequestSchema
from src.app.use_cases.clients import (
    CreateClient,
    UpdateClient,
    GetClient,
    DeleteClient,
    ListClients,
    CreateClientCommandDTO,
    UpdateClientCommandDTO,
    ClientResponseDTO,
    DeletedClientDTO,
    ListClientsQueryDTO,
    ListClientsResponseDTO,
)
from src.app.use_cases.invoicing import (
    ListClientInvoices,
    ClientInvoicesQueryDTO,
    ClientInvoicesResponseDTO,
)
from src.app.services.integrity_guard import ReferentialIntegrityGuard
from src.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyInvoiceItemRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.domain.invoice import InvoiceStatus
from src.api.error import ClientError

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.post(
    "",
    response_model=ClientResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {
            "description": "Email already registered",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "DUPLICATE_ENTRY",
                            "message": "email 'accounts@sunrise-ortho.in' already exists"
                        }
                    }
                }
            }
        }
    }
)
async def create_client(
    request: CreateClientRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Create a client.

    Email is stored lower-cased. GST and PAN numbers are upper-cased with
    whitespace removed and must match their registration formats.

    **Returns:**
    - 201: Client created
    - 400: Invalid request parameters
    - 409: Email already registered
    """
    uow = SqlAlchemyUnitOfWork(session)
    client_repo = SqlAlchemyClientRepository(session)

    command = CreateClientCommandDTO(**request.model_dump())

    use_case = CreateClient(uow, client_repo)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("", response_model=ListClientsResponseDTO)
async def list_clients(
    state: Optional[str] = Query(default=None),
    is_active: Optional[bool] = Query(default=None),
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_session)
):
    """List clients ordered by name, with the total number of matches."""
    query = ListClientsQueryDTO(state=state, is_active=is_active, limit=limit, offset=offset)

    use_case = ListClients(SqlAlchemyClientRepository(session))
    result = await use_case.execute(query)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/{client_id}", response_model=ClientResponseDTO)
async def get_client(
    client_id: int,
    session: AsyncSession = Depends(get_session)
):
    use_case = GetClient(SqlAlchemyClientRepository(session))
    result = await use_case.execute(client_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/{client_id}/invoices", response_model=ClientInvoicesResponseDTO)
async def list_client_invoices(
    client_id: int,
    status: Optional[InvoiceStatus] = Query(default=None),
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_session)
):
    """
    A client's invoices, newest invoice_date first, with the client's
    all-time totals and pending amount.

    **Returns:**
    - 200: Page of invoices and summary
    - 400: Inverted date range
    - 404: Client not found
    """
    query = ClientInvoicesQueryDTO(
        status=status,
        start_date=start_date,
        end_date=end_date,
        limit=limit,
        offset=offset,
    )

    use_case = ListClientInvoices(
        SqlAlchemyClientRepository(session),
        SqlAlchemyInvoiceRepository(session),
    )
    result = await use_case.execute(client_id, query)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put("/{client_id}", response_model=ClientResponseDTO)
async def update_client(
    client_id: int,
    request: UpdateClientRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Update a client. Only fields present in the body are changed.

    Existing invoices keep the tax jurisdiction they were issued with.
    """
    uow = SqlAlchemyUnitOfWork(session)
    client_repo = SqlAlchemyClientRepository(session)

    command = UpdateClientCommandDTO(**request.model_dump(exclude_unset=True))

    use_case = UpdateClient(uow, client_repo)
    result = await use_case.execute(client_id, command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete(
    "/{client_id}",
    response_model=DeletedClientDTO,
    responses={
        422: {
            "description": "Client is referenced by invoices",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "CLIENT_REFERENCED",
                            "message": "Cannot delete client 1. It is referenced by 3 invoice(s)",
                            "details": {"referenced_invoices": 3}
                        }
                    }
                }
            }
        }
    }
)
async def delete_client(
    client_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Delete a client.

    **Returns:**
    - 200: Client deleted
    - 404: Client not found
    - 422: Client is still referenced by invoices
    """
    uow = SqlAlchemyUnitOfWork(session)
    client_repo = SqlAlchemyClientRepository(session)
    guard = ReferentialIntegrityGuard(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )

    use_case = DeleteClient(uow, client_repo, guard)
    result = await use_case.execute(client_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
