from .client_repository import ClientRepository
from .product_repository import ProductRepository
from .invoice_repository import InvoiceRepository
from .invoice_item_repository import InvoiceItemRepository
from .invoice_counter_repository import InvoiceCounterRepository

__all__ = [
    "ClientRepository",
    "ProductRepository",
    "InvoiceRepository",
    "InvoiceItemRepository",
    "InvoiceCounterRepository",
]
