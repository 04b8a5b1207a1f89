"""Invoicing Domain Errors

Raised by the pure domain components and services; use cases turn them
into ``libs.result.Error`` values with ``to_error()``.
"""

from typing import Any, Dict, Iterable, Optional
from libs.result import Error


class InvoicingError(Exception):
    """Base class for expected, typed invoicing failures"""

    code = "INVOICING_ERROR"

    def __init__(
        self,
        message: str,
        reason: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.reason = reason
        self.details = details

    def to_error(self) -> Error:
        return Error(
            code=self.code,
            message=self.message,
            reason=self.reason,
            details=self.details,
        )


class ValidationError(InvoicingError):
    """Malformed or logically inconsistent input"""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message,
            reason="Input failed validation",
            details={"field": field} if field else None,
        )
        self.field = field


class NotFoundError(InvoicingError):
    """A referenced client, product or invoice does not exist"""

    def __init__(self, entity: str, entity_ids: Iterable[Any]):
        ids = sorted(entity_ids)
        label = ", ".join(str(i) for i in ids)
        super().__init__(
            f"{entity.capitalize()} not found: {label}",
            reason=f"{entity} does not exist",
            details={"missing_ids": ids},
        )
        self.entity = entity
        self.missing_ids = ids
        self.code = f"{entity.upper()}_NOT_FOUND"


class ReferencedEntityError(InvoicingError):
    """Delete blocked because invoices still reference the entity"""

    def __init__(self, entity: str, entity_id: Any, count: int):
        super().__init__(
            f"Cannot delete {entity} {entity_id}. It is referenced by {count} invoice(s)",
            reason="Entity is referenced by existing invoices",
            details={"referenced_invoices": count},
        )
        self.entity = entity
        self.entity_id = entity_id
        self.count = count
        self.code = f"{entity.upper()}_REFERENCED"


class ImmutableStateError(InvoicingError):
    """Operation blocked by a terminal invoice status"""

    code = "INVOICE_IMMUTABLE"

    def __init__(self, invoice_number: str, status: str):
        super().__init__(
            f"Invoice {invoice_number} is {status} and cannot be deleted",
            reason=f"{status} invoices are immutable",
            details={"status": status},
        )
        self.status = status


class StateTransitionError(InvoicingError):
    """Requested status change is not in the transition table"""

    code = "INVALID_STATUS_TRANSITION"

    def __init__(self, from_status: str, to_status: str):
        super().__init__(
            f"Cannot change status from {from_status} to {to_status}",
            reason="Transition not allowed",
            details={"from": from_status, "to": to_status},
        )
        self.from_status = from_status
        self.to_status = to_status


class DuplicateError(InvoicingError):
    """Unique constraint collision (invoice number, email, sku)"""

    code = "DUPLICATE_ENTRY"

    def __init__(self, field: str, value: Any = None):
        message = f"{field} already exists" if value is None else f"{field} '{value}' already exists"
        super().__init__(
            message,
            reason="Unique constraint violation",
            details={"field": field},
        )
        self.field = field
        self.value = value

    @classmethod
    def from_integrity_error(cls, exc: Exception) -> "DuplicateError":
        """Best-effort mapping of a driver unique violation to the offending field"""
        text = str(getattr(exc, "orig", exc)).lower()
        for field in ("invoice_number", "email", "sku"):
            if field in text:
                return cls(field)
        return cls("record")
