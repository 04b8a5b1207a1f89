"""Invoice lifecycle use cases"""
from .create_invoice import CreateInvoice
from .update_invoice import UpdateInvoice
from .change_invoice_status import ChangeInvoiceStatus
from .delete_invoice import DeleteInvoice
from .bulk_update_invoices import BulkUpdateInvoices
from .get_invoice import GetInvoice
from .list_invoices import ListInvoices
from .list_client_invoices import ListClientInvoices
from .get_invoice_stats import GetInvoiceStats
from .generate_invoice_pdf import GenerateInvoicePdf
from .materializer import InvoiceMaterializer
from .dtos import (
    InvoiceItemInputDTO,
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    ChangeInvoiceStatusCommandDTO,
    InvoicePatchDTO,
    BulkUpdateInvoicesCommandDTO,
    ListInvoicesQueryDTO,
    InvoiceStatsQueryDTO,
    InvoiceClientDTO,
    InvoiceItemDTO,
    InvoiceDetailDTO,
    InvoiceSummaryDTO,
    ListInvoicesResponseDTO,
    DeletedInvoiceDTO,
    BulkUpdateResultDTO,
    InvoiceStatsDTO,
    InvoicePdfResponseDTO,
    ClientInvoicesQueryDTO,
    ClientInvoiceSummaryDTO,
    ClientInvoicesResponseDTO,
)

__all__ = [
    "CreateInvoice",
    "UpdateInvoice",
    "ChangeInvoiceStatus",
    "DeleteInvoice",
    "BulkUpdateInvoices",
    "GetInvoice",
    "ListInvoices",
    "ListClientInvoices",
    "GetInvoiceStats",
    "GenerateInvoicePdf",
    "InvoiceMaterializer",
    "InvoiceItemInputDTO",
    "CreateInvoiceCommandDTO",
    "UpdateInvoiceCommandDTO",
    "ChangeInvoiceStatusCommandDTO",
    "InvoicePatchDTO",
    "BulkUpdateInvoicesCommandDTO",
    "ListInvoicesQueryDTO",
    "InvoiceStatsQueryDTO",
    "InvoiceClientDTO",
    "InvoiceItemDTO",
    "InvoiceDetailDTO",
    "InvoiceSummaryDTO",
    "ListInvoicesResponseDTO",
    "DeletedInvoiceDTO",
    "BulkUpdateResultDTO",
    "InvoiceStatsDTO",
    "InvoicePdfResponseDTO",
    "ClientInvoicesQueryDTO",
    "ClientInvoiceSummaryDTO",
    "ClientInvoicesResponseDTO",
]
