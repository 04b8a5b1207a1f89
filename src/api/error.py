"""HTTP error mapping for use-case failures"""

from typing import Optional
from fastapi import status
from libs.result import Error

STATUS_BY_CODE = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "DUPLICATE_ENTRY": status.HTTP_409_CONFLICT,
    "INVOICE_IMMUTABLE": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVALID_STATUS_TRANSITION": status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def status_for(error: Error) -> int:
    """HTTP status for a use-case error code"""
    if error.code in STATUS_BY_CODE:
        return STATUS_BY_CODE[error.code]
    if error.code.endswith("_NOT_FOUND"):
        return status.HTTP_404_NOT_FOUND
    if error.code.endswith("_REFERENCED"):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    if error.code.endswith("_FAILED"):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


class ClientError(Exception):
    """Raised by routes; rendered as {"error": {...}} by the app's handler"""

    def __init__(self, error: Error, status_code: Optional[int] = None):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code if status_code is not None else status_for(error)

    def to_response(self) -> dict:
        body = {
            "code": self.error.code,
            "message": self.error.message,
        }
        if self.error.details:
            body["details"] = self.error.details
        return {"error": body}
