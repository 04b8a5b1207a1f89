"""Reference and date checks shared by invoice use cases"""

from datetime import date
from typing import Iterable
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.product_repository import ProductRepository
from src.domain.client import Client
from src.domain.errors import NotFoundError, ValidationError


def ensure_due_after_invoice_date(invoice_date: date, due_date: date) -> None:
    if due_date <= invoice_date:
        raise ValidationError("Due date must be after invoice date", field="due_date")


async def resolve_client(client_repo: ClientRepository, client_id: int) -> Client:
    client = await client_repo.get_by_id(client_id)
    if not client:
        raise NotFoundError("client", [client_id])
    return client


async def ensure_products_exist(product_repo: ProductRepository, product_ids: Iterable[int]) -> None:
    """One batch lookup; any missing product fails the whole request"""
    wanted = set(product_ids)
    found = {product.id for product in await product_repo.get_by_ids(wanted)}
    missing = wanted - found
    if missing:
        raise NotFoundError("product", missing)
