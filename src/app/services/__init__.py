from .unit_of_work import UnitOfWork
from .pdf_service import PdfService
from .sequence_allocator import SequenceAllocator, format_invoice_number
from .integrity_guard import ReferentialIntegrityGuard

__all__ = [
    "UnitOfWork",
    "PdfService",
    "SequenceAllocator",
    "format_invoice_number",
    "ReferentialIntegrityGuard",
]
