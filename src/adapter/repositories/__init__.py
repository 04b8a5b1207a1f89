from .client_repository import SqlAlchemyClientRepository
from .product_repository import SqlAlchemyProductRepository
from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_item_repository import SqlAlchemyInvoiceItemRepository
from .invoice_counter_repository import SqlAlchemyInvoiceCounterRepository

__all__ = [
    "SqlAlchemyClientRepository",
    "SqlAlchemyProductRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceItemRepository",
    "SqlAlchemyInvoiceCounterRepository",
]
