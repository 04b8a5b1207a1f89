"""Client field normalization and format checks"""

import re
from typing import Optional
from src.domain.client import Client, GST_NUMBER_PATTERN, PAN_NUMBER_PATTERN
from src.domain.errors import ValidationError
from .dtos import AddressDTO, ClientResponseDTO

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


def normalize_email(email: str) -> str:
    email = email.strip().lower()
    if not re.match(EMAIL_PATTERN, email):
        raise ValidationError("Please enter a valid email", field="email")
    return email


def normalize_registration(value: Optional[str], pattern: str, field: str, label: str) -> Optional[str]:
    """Upper-case and strip whitespace; empty means not provided"""
    if value is None:
        return None
    value = re.sub(r"\s", "", value).upper()
    if not value:
        return None
    if not re.match(pattern, value):
        raise ValidationError(f"Please enter a valid {label}", field=field)
    return value


def normalize_gst_number(value: Optional[str]) -> Optional[str]:
    return normalize_registration(value, GST_NUMBER_PATTERN, "gst_number", "GST number")


def normalize_pan_number(value: Optional[str]) -> Optional[str]:
    return normalize_registration(value, PAN_NUMBER_PATTERN, "pan_number", "PAN number")


def normalize_address(address: AddressDTO) -> dict:
    return {
        key: value.strip() if isinstance(value, str) else value
        for key, value in address.model_dump().items()
    }


def to_client_response(client: Client) -> ClientResponseDTO:
    return ClientResponseDTO(
        id=client.id,
        name=client.name,
        email=client.email,
        phone=client.phone,
        gst_number=client.gst_number,
        pan_number=client.pan_number,
        address=AddressDTO(**(client.address or {})),
        is_active=client.is_active,
        created_at=client.created_at,
        updated_at=client.updated_at,
    )
