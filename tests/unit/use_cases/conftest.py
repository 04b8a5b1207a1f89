import pytest
from unittest.mock import AsyncMock, MagicMock

from tests.factories import make_client, make_product


@pytest.fixture
def mock_invoice_repo():
    repo = MagicMock()
    repo.update = AsyncMock(side_effect=lambda invoice: invoice)
    return repo


@pytest.fixture
def mock_invoice_item_repo():
    repo = MagicMock()
    repo.get_by_invoice_id = AsyncMock(return_value=[])
    repo.create_many = AsyncMock(side_effect=lambda items: items)
    repo.delete_by_invoice_id = AsyncMock()
    return repo


@pytest.fixture
def mock_client_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=make_client())
    return repo


@pytest.fixture
def mock_product_repo():
    repo = MagicMock()
    repo.get_by_ids = AsyncMock(
        return_value=[make_product(3, "Knee Brace", "100"), make_product(4, "Wrist Splint", "150")]
    )
    return repo
