"""Unit tests for client use cases"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.services.integrity_guard import ReferentialIntegrityGuard
from src.app.use_cases.clients import (
    CreateClient,
    CreateClientCommandDTO,
    DeleteClient,
    ListClients,
    ListClientsQueryDTO,
    UpdateClient,
    UpdateClientCommandDTO,
)
from tests.factories import make_client


@pytest.fixture
def client_repo():
    repo = MagicMock()
    repo.get_by_email = AsyncMock(return_value=None)
    repo.create = AsyncMock(side_effect=_with_id)
    repo.update = AsyncMock(side_effect=lambda client: client)
    repo.delete = AsyncMock()
    return repo


async def _with_id(client):
    client.id = 7
    return client


def create_command(**overrides):
    values = dict(
        name="Sunrise Orthopaedics",
        email="  Accounts@Sunrise-Ortho.IN ",
        phone="+91 22 4000 1234",
        gst_number="27aapfu 0939f1zv",
        pan_number=" aapfu0939f",
        address={"street": "12 MG Road", "city": "Pune", "state": "Maharashtra"},
    )
    values.update(overrides)
    return CreateClientCommandDTO(**values)


@pytest.mark.asyncio
class TestCreateClient:
    async def test_normalizes_email_and_registration_numbers(self, mock_uow, client_repo):
        result = await CreateClient(mock_uow, client_repo).execute(create_command())

        assert result.is_ok()
        client = result.value
        assert client.id == 7
        assert client.email == "accounts@sunrise-ortho.in"
        assert client.gst_number == "27AAPFU0939F1ZV"
        assert client.pan_number == "AAPFU0939F"
        assert client.address.country == "India"
        mock_uow.commit.assert_awaited_once()

    async def test_invalid_gst_number(self, mock_uow, client_repo):
        result = await CreateClient(mock_uow, client_repo).execute(create_command(gst_number="12345"))

        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.details == {"field": "gst_number"}
        client_repo.create.assert_not_called()

    async def test_invalid_pan_number(self, mock_uow, client_repo):
        result = await CreateClient(mock_uow, client_repo).execute(create_command(pan_number="ABCDE12345"))

        assert result.error.details == {"field": "pan_number"}

    async def test_registration_numbers_are_optional(self, mock_uow, client_repo):
        result = await CreateClient(mock_uow, client_repo).execute(
            create_command(gst_number=None, pan_number="  ")
        )

        assert result.is_ok()
        assert result.value.gst_number is None
        assert result.value.pan_number is None

    async def test_duplicate_email(self, mock_uow, client_repo):
        client_repo.get_by_email = AsyncMock(return_value=make_client())

        result = await CreateClient(mock_uow, client_repo).execute(create_command())

        assert result.error.code == "DUPLICATE_ENTRY"
        assert result.error.details == {"field": "email"}
        client_repo.get_by_email.assert_awaited_once_with("accounts@sunrise-ortho.in")


@pytest.mark.asyncio
class TestUpdateClient:
    async def test_only_given_fields_change(self, mock_uow, client_repo):
        existing = make_client(1)
        client_repo.get_by_id = AsyncMock(return_value=existing)

        result = await UpdateClient(mock_uow, client_repo).execute(
            1, UpdateClientCommandDTO(phone="+91 20 1111 2222")
        )

        assert result.is_ok()
        assert existing.phone == "+91 20 1111 2222"
        assert existing.name == "Sunrise Orthopaedics"

    async def test_email_taken_by_another_client(self, mock_uow, client_repo):
        client_repo.get_by_id = AsyncMock(return_value=make_client(1))
        client_repo.get_by_email = AsyncMock(return_value=make_client(2))

        result = await UpdateClient(mock_uow, client_repo).execute(
            1, UpdateClientCommandDTO(email="client2@example.in")
        )

        assert result.error.code == "DUPLICATE_ENTRY"
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
class TestDeleteClient:
    async def test_referenced_client_is_kept(self, mock_uow, client_repo, mock_invoice_repo, mock_invoice_item_repo):
        """
        Given: A client billed on three invoices
        When: The client is deleted
        Then: CLIENT_REFERENCED with referenced_invoices=3, nothing deleted
        """
        client_repo.get_by_id = AsyncMock(return_value=make_client(1))
        mock_invoice_repo.count_by_client = AsyncMock(return_value=3)
        guard = ReferentialIntegrityGuard(mock_invoice_repo, mock_invoice_item_repo)

        result = await DeleteClient(mock_uow, client_repo, guard).execute(1)

        assert result.error.code == "CLIENT_REFERENCED"
        assert result.error.details == {"referenced_invoices": 3}
        client_repo.delete.assert_not_called()

    async def test_unreferenced_client_deleted(self, mock_uow, client_repo, mock_invoice_repo, mock_invoice_item_repo):
        client_repo.get_by_id = AsyncMock(return_value=make_client(1))
        mock_invoice_repo.count_by_client = AsyncMock(return_value=0)
        guard = ReferentialIntegrityGuard(mock_invoice_repo, mock_invoice_item_repo)

        result = await DeleteClient(mock_uow, client_repo, guard).execute(1)

        assert result.is_ok()
        assert result.value.client_id == 1
        client_repo.delete.assert_awaited_once()
        mock_uow.commit.assert_awaited_once()

    async def test_missing_client(self, mock_uow, client_repo, mock_invoice_repo, mock_invoice_item_repo):
        client_repo.get_by_id = AsyncMock(return_value=None)
        guard = ReferentialIntegrityGuard(mock_invoice_repo, mock_invoice_item_repo)

        result = await DeleteClient(mock_uow, client_repo, guard).execute(1)

        assert result.error.code == "CLIENT_NOT_FOUND"


@pytest.mark.asyncio
class TestListClients:
    async def test_page_and_total_count(self, client_repo):
        client_repo.find = AsyncMock(return_value=[make_client(1), make_client(2)])
        client_repo.count = AsyncMock(return_value=12)

        result = await ListClients(client_repo).execute(
            ListClientsQueryDTO(state="maharashtra", is_active=True, limit=2, offset=4)
        )

        assert result.is_ok()
        assert [client.id for client in result.value.clients] == [1, 2]
        assert result.value.total_count == 12
        assert result.value.offset == 4
        client_repo.find.assert_awaited_once_with(state="maharashtra", is_active=True, limit=2, offset=4)
        client_repo.count.assert_awaited_once_with(state="maharashtra", is_active=True)

    async def test_repository_failure(self, client_repo):
        client_repo.find = AsyncMock(side_effect=RuntimeError("database is locked"))

        result = await ListClients(client_repo).execute(ListClientsQueryDTO())

        assert result.error.code == "LIST_CLIENTS_FAILED"
        assert result.error.reason == "database is locked"
