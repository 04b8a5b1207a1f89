"""Request schemas for Client API

Pydantic models for validating incoming HTTP requests.
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator


class AddressSchema(BaseModel):
    street: Optional[str] = Field(default=None, max_length=200)
    city: Optional[str] = Field(default=None, max_length=100)
    state: Optional[str] = Field(default=None, max_length=100)
    zip_code: Optional[str] = Field(default=None, max_length=20)
    country: str = Field(default="India", max_length=100)


class CreateClientRequestSchema(BaseModel):
    """
    Request schema for creating a client

    Used for POST /clients endpoint.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Client name (required)"
    )

    email: str = Field(
        ...,
        min_length=3,
        max_length=255,
        description="Contact email (required, unique)"
    )

    phone: str = Field(
        ...,
        min_length=1,
        max_length=20,
        description="Contact phone number (required)"
    )

    gst_number: Optional[str] = Field(
        default=None,
        max_length=20,
        description="GST registration number (15 characters once whitespace is removed)"
    )

    pan_number: Optional[str] = Field(
        default=None,
        max_length=14,
        description="PAN registration number (10 characters once whitespace is removed)"
    )

    address: AddressSchema = Field(
        default_factory=AddressSchema,
        description="Postal address"
    )

    is_active: bool = True

    @field_validator('name', 'phone')
    @classmethod
    def validate_not_blank(cls, v):
        """Reject values made only of whitespace"""
        if not v.strip():
            raise ValueError("Value must not be blank")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Sunrise Orthopaedics",
                "email": "Accounts@Sunrise-Ortho.in",
                "phone": "+91 22 4000 1234",
                "gst_number": "27aapfu0939f1zv",
                "pan_number": "AAPFU 0939F",
                "address": {
                    "street": "12 MG Road",
                    "city": "Pune",
                    "state": "Maharashtra",
                    "zip_code": "411001"
                }
            }
        }


class UpdateClientRequestSchema(BaseModel):
    """
    Request schema for updating a client

    Used for PUT /clients/{client_id}; omitted fields are left unchanged.
    """

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    email: Optional[str] = Field(default=None, min_length=3, max_length=255)
    phone: Optional[str] = Field(default=None, min_length=1, max_length=20)
    gst_number: Optional[str] = Field(default=None, max_length=20)
    pan_number: Optional[str] = Field(default=None, max_length=14)
    address: Optional[AddressSchema] = None
    is_active: Optional[bool] = None
