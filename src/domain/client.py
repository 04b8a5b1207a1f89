"""Client Domain Entity

Billed party of an invoice. Clients cannot be deleted while invoices reference them.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import JSON, String
from src.domain.base import BaseModel, id_column, timestamp_column, utcnow

GST_NUMBER_PATTERN = r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z]{1}[1-9A-Z]{1}Z[0-9A-Z]{1}$"
PAN_NUMBER_PATTERN = r"^[A-Z]{5}[0-9]{4}[A-Z]{1}$"


class Client(BaseModel, table=True):
    """
    Client - Customer that invoices are issued to

    Domain Rules:
    - email is unique and stored lower-cased
    - gst_number / pan_number are optional, upper-cased, whitespace-free
    - address is an embedded document; address["state"] drives tax jurisdiction
    - Deletion is blocked while any invoice references the client
    """

    __tablename__ = "clients"
    __table_args__ = (
        Index('ix_clients_name', 'name'),
        Index('ix_clients_is_active', 'is_active'),
    )

    id: int = Field(
        sa_column=id_column(),
        description="Unique client identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Client name"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False, unique=True),
        description="Contact email (unique, lower-cased)"
    )

    phone: str = Field(
        sa_column=Column(String(20), nullable=False),
        description="Contact phone number"
    )

    gst_number: Optional[str] = Field(
        default=None,
        sa_column=Column(String(15), nullable=True),
        description="GST registration number (15 characters)"
    )

    pan_number: Optional[str] = Field(
        default=None,
        sa_column=Column(String(10), nullable=True),
        description="PAN registration number (10 characters)"
    )

    address: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSON, nullable=False),
        description="Postal address (street, city, state, zip_code, country)"
    )

    is_active: bool = Field(
        default=True,
        description="Whether the client is active"
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=timestamp_column(),
        description="Client creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=timestamp_column(),
        description="Last update timestamp"
    )

    @property
    def state(self) -> str:
        return (self.address or {}).get("state") or ""

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "name": "Sunrise Orthopaedics",
                "email": "accounts@sunrise-ortho.in",
                "phone": "+91 22 4000 1234",
                "gst_number": "27AAPFU0939F1ZV",
                "pan_number": "AAPFU0939F",
                "address": {
                    "street": "12 MG Road",
                    "city": "Pune",
                    "state": "Maharashtra",
                    "zip_code": "411001",
                    "country": "India"
                },
                "is_active": True,
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:00:00Z"
            }
        }
