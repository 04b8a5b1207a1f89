"""Data Transfer Objects for Client Use Cases"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class AddressDTO(BaseModel):
    """Postal address embedded in a client"""

    street: Optional[str] = Field(default=None, max_length=200)
    city: Optional[str] = Field(default=None, max_length=100)
    state: Optional[str] = Field(default=None, max_length=100)
    zip_code: Optional[str] = Field(default=None, max_length=20)
    country: str = Field(default="India", max_length=100)


class CreateClientCommandDTO(BaseModel):
    """
    Command DTO for creating a client

    gst_number and pan_number are normalized (upper-cased, whitespace
    removed) and checked against their registration formats by the use case.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Client name"
    )

    email: str = Field(
        ...,
        max_length=255,
        description="Contact email (unique)"
    )

    phone: str = Field(
        ...,
        min_length=1,
        max_length=20,
        description="Contact phone number"
    )

    gst_number: Optional[str] = Field(
        default=None,
        description="GST registration number"
    )

    pan_number: Optional[str] = Field(
        default=None,
        description="PAN registration number"
    )

    address: AddressDTO = Field(
        default_factory=AddressDTO,
        description="Postal address; state decides the tax jurisdiction"
    )

    is_active: bool = True

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Sunrise Orthopaedics",
                "email": "accounts@sunrise-ortho.in",
                "phone": "+91 22 4000 1234",
                "gst_number": "27AAPFU0939F1ZV",
                "pan_number": "AAPFU0939F",
                "address": {
                    "street": "12 MG Road",
                    "city": "Pune",
                    "state": "Maharashtra",
                    "zip_code": "411001"
                }
            }
        }


class UpdateClientCommandDTO(BaseModel):
    """Partial client update; only explicitly set fields are applied"""

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, min_length=1, max_length=20)
    gst_number: Optional[str] = None
    pan_number: Optional[str] = None
    address: Optional[AddressDTO] = None
    is_active: Optional[bool] = None


class ClientResponseDTO(BaseModel):
    id: int
    name: str
    email: str
    phone: str
    gst_number: Optional[str] = None
    pan_number: Optional[str] = None
    address: AddressDTO
    is_active: bool
    created_at: datetime
    updated_at: datetime


class DeletedClientDTO(BaseModel):
    client_id: int
    name: str


class ListClientsQueryDTO(BaseModel):
    state: Optional[str] = Field(default=None, description="Address state (case-insensitive)")
    is_active: Optional[bool] = None
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListClientsResponseDTO(BaseModel):
    clients: List[ClientResponseDTO]
    total_count: int
    limit: int
    offset: int
