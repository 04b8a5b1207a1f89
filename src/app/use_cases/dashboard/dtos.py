"""Data Transfer Objects for Dashboard Use Cases"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from pydantic import BaseModel, Field


class RevenuePeriod(str, Enum):
    """Window used to rank clients by revenue"""
    ALL = "all"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


class RecentInvoicesQueryDTO(BaseModel):
    limit: int = Field(default=10, ge=1, le=50)


class TopClientsQueryDTO(BaseModel):
    limit: int = Field(default=10, ge=1, le=50)
    period: RevenuePeriod = Field(
        default=RevenuePeriod.ALL,
        description="Only paid invoices dated inside the current month, quarter or year count"
    )


class RevenueTrendsQueryDTO(BaseModel):
    months: int = Field(
        default=12,
        ge=1,
        le=60,
        description="Number of calendar months, including the current one"
    )


class RecentInvoiceDTO(BaseModel):
    invoice_id: int
    invoice_number: str
    client_id: int
    client_name: str
    client_email: str
    status: str
    invoice_date: date
    due_date: date
    total_amount: Decimal
    created_at: datetime


class TopClientDTO(BaseModel):
    """Client ranked by paid revenue"""

    client_id: int
    name: str
    email: str
    total_revenue: Decimal
    invoice_count: int
    average_invoice: Decimal
    last_invoice_date: date

    class Config:
        json_schema_extra = {
            "example": {
                "client_id": 1,
                "name": "Sunrise Orthopaedics",
                "email": "accounts@sunrise-ortho.in",
                "total_revenue": "1942.50",
                "invoice_count": 2,
                "average_invoice": "971.25",
                "last_invoice_date": "2024-03-15"
            }
        }


class RevenueTrendDTO(BaseModel):
    month: str = Field(..., description="Calendar month as YYYY-MM")
    revenue: Decimal
    invoice_count: int


class StatusDistributionDTO(BaseModel):
    status: str
    count: int
    total_amount: Decimal
