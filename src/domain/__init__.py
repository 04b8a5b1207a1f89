from .base import BaseModel
from .client import Client
from .product import Product
from .invoice import Invoice, InvoiceStatus, TaxJurisdiction
from .invoice_item import InvoiceItem, ItemSize
from .invoice_counter import InvoiceCounter

__all__ = [
    "BaseModel",
    "Client",
    "Product",
    "Invoice",
    "InvoiceStatus",
    "TaxJurisdiction",
    "InvoiceItem",
    "ItemSize",
    "InvoiceCounter",
]
