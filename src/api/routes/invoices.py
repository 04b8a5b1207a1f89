"""Invoice API Routes

FastAPI routes for the invoice lifecycle: creation with sequential
numbering, updates, status changes, bulk updates, deletion, statistics
and PDF rendering.
"""

import base64
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.invoice_request import (
    BulkUpdateRequestSchema,
    ChangeStatusRequestSchema,
    CreateInvoiceRequestSchema,
    UpdateInvoiceRequestSchema,
)
from src.app.use_cases.invoicing import (
    BulkUpdateInvoices,
    ChangeInvoiceStatus,
    CreateInvoice,
    DeleteInvoice,
    GenerateInvoicePdf,
    GetInvoice,
    GetInvoiceStats,
    ListInvoices,
    UpdateInvoice,
    BulkUpdateInvoicesCommandDTO,
    BulkUpdateResultDTO,
    ChangeInvoiceStatusCommandDTO,
    CreateInvoiceCommandDTO,
    DeletedInvoiceDTO,
    InvoiceDetailDTO,
    InvoicePdfResponseDTO,
    InvoiceStatsDTO,
    InvoiceStatsQueryDTO,
    ListInvoicesQueryDTO,
    ListInvoicesResponseDTO,
    UpdateInvoiceCommandDTO,
)
from src.app.services.integrity_guard import ReferentialIntegrityGuard
from src.app.services.sequence_allocator import SequenceAllocator
from src.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyInvoiceCounterRepository,
    SqlAlchemyInvoiceItemRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyProductRepository,
)
from src.adapter.services.pdf_service import ReportLabPdfService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.domain.invoice import InvoiceStatus
from src.api.error import ClientError

router = APIRouter(prefix="/invoices", tags=["Invoices"])


@router.post(
    "",
    response_model=InvoiceDetailDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {
            "description": "Client or product not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "PRODUCT_NOT_FOUND",
                            "message": "Product not found: 7, 9",
                            "details": {"missing_ids": [7, 9]}
                        }
                    }
                }
            }
        }
    }
)
async def create_invoice(
    request: CreateInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Create an invoice.

    The invoice number (INV-YYYY-NNNN) is allocated from the per-year
    counter. Subtotal, CGST/SGST/IGST and totals are computed from the items;
    the jurisdiction is derived from the client's state when not given.

    **Returns:**
    - 201: Invoice created
    - 400: Invalid dates or items
    - 404: Client or product not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)
    item_repo = SqlAlchemyInvoiceItemRepository(session)
    client_repo = SqlAlchemyClientRepository(session)
    product_repo = SqlAlchemyProductRepository(session)
    allocator = SequenceAllocator(SqlAlchemyInvoiceCounterRepository(session))

    command = CreateInvoiceCommandDTO(**request.model_dump())

    use_case = CreateInvoice(
        uow,
        invoice_repo,
        item_repo,
        client_repo,
        product_repo,
        allocator,
        ApplicationConfig.BUSINESS_HOME_STATE,
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("", response_model=ListInvoicesResponseDTO)
async def list_invoices(
    client_id: Optional[int] = Query(default=None),
    status: Optional[InvoiceStatus] = Query(default=None),
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_session)
):
    query = ListInvoicesQueryDTO(
        client_id=client_id,
        status=status,
        start_date=start_date,
        end_date=end_date,
        limit=limit,
        offset=offset,
    )

    use_case = ListInvoices(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(query)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/stats", response_model=InvoiceStatsDTO)
async def get_invoice_stats(
    client_id: Optional[int] = Query(default=None),
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
    session: AsyncSession = Depends(get_session)
):
    """
    Invoice totals, counts per status, paid/pending amounts and the
    average invoice amount.
    """
    query = InvoiceStatsQueryDTO(client_id=client_id, start_date=start_date, end_date=end_date)

    use_case = GetInvoiceStats(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(query)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "/bulk-update",
    response_model=BulkUpdateResultDTO,
    responses={
        404: {
            "description": "Some invoices do not exist (nothing was updated)",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVOICE_NOT_FOUND",
                            "message": "Invoice not found: 12",
                            "details": {"missing_ids": [12]}
                        }
                    }
                }
            }
        }
    }
)
async def bulk_update_invoices(
    request: BulkUpdateRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Apply one patch (status, due_date, notes) to several invoices.

    All invoices are resolved and validated before anything is written;
    any failure leaves every invoice untouched.
    """
    uow = SqlAlchemyUnitOfWork(session)

    command = BulkUpdateInvoicesCommandDTO(
        invoice_ids=request.invoice_ids,
        patch=request.patch.model_dump(exclude_unset=True),
    )

    use_case = BulkUpdateInvoices(uow, SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/{invoice_id}", response_model=InvoiceDetailDTO)
async def get_invoice(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    use_case = GetInvoice(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
        SqlAlchemyClientRepository(session),
        SqlAlchemyProductRepository(session),
    )
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put("/{invoice_id}", response_model=InvoiceDetailDTO)
async def update_invoice(
    invoice_id: int,
    request: UpdateInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Update an invoice. Only fields present in the body are changed.

    Taxes are recomputed when items or jurisdiction change. A status given
    here is written as-is; use PATCH /invoices/{invoice_id}/status for
    checked transitions.
    """
    uow = SqlAlchemyUnitOfWork(session)

    command = UpdateInvoiceCommandDTO(**request.model_dump(exclude_unset=True))

    use_case = UpdateInvoice(
        uow,
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
        SqlAlchemyClientRepository(session),
        SqlAlchemyProductRepository(session),
        ApplicationConfig.BUSINESS_HOME_STATE,
    )
    result = await use_case.execute(invoice_id, command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.patch(
    "/{invoice_id}/status",
    response_model=InvoiceDetailDTO,
    responses={
        422: {
            "description": "Transition not allowed",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVALID_STATUS_TRANSITION",
                            "message": "Cannot change status from paid to sent",
                            "details": {"from": "paid", "to": "sent"}
                        }
                    }
                }
            }
        }
    }
)
async def change_invoice_status(
    invoice_id: int,
    request: ChangeStatusRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Move an invoice to a new status.

    Allowed: draft -> sent | paid, sent -> paid | overdue, overdue -> paid.
    Paid is final.
    """
    uow = SqlAlchemyUnitOfWork(session)

    use_case = ChangeInvoiceStatus(
        uow,
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
        SqlAlchemyClientRepository(session),
        SqlAlchemyProductRepository(session),
    )
    result = await use_case.execute(invoice_id, ChangeInvoiceStatusCommandDTO(status=request.status))

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete("/{invoice_id}", response_model=DeletedInvoiceDTO)
async def delete_invoice(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Delete an invoice with its items.

    **Returns:**
    - 200: Invoice deleted
    - 404: Invoice not found
    - 422: Invoice is paid
    """
    uow = SqlAlchemyUnitOfWork(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)
    item_repo = SqlAlchemyInvoiceItemRepository(session)

    use_case = DeleteInvoice(uow, invoice_repo, item_repo, ReferentialIntegrityGuard(invoice_repo, item_repo))
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


def _pdf_use_case(session: AsyncSession) -> GenerateInvoicePdf:
    return GenerateInvoicePdf(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
        SqlAlchemyClientRepository(session),
        SqlAlchemyProductRepository(session),
        ReportLabPdfService(),
        ApplicationConfig.COMPANY_NAME,
        ApplicationConfig.COMPANY_ADDRESS,
    )


@router.get("/{invoice_id}/pdf", response_model=InvoicePdfResponseDTO)
async def get_invoice_pdf(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """Render the invoice as a base64-encoded PDF."""
    result = await _pdf_use_case(session).execute(invoice_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{invoice_id}/pdf/download",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        }
    }
)
async def download_invoice_pdf(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """Download the invoice as a PDF file."""
    result = await _pdf_use_case(session).execute(invoice_id)

    if result.is_err():
        raise ClientError(result.error)

    pdf_bytes = base64.b64decode(result.value.pdf_base64)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=invoice_{result.value.invoice_number}.pdf"
        }
    )
