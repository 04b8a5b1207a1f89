"""Invoice status state machine

Only explicit status-change requests go through this table. ``paid`` is
terminal: nothing leaves it, not even a request for ``paid`` again.
"""

from typing import Dict, FrozenSet
from src.domain.errors import StateTransitionError
from src.domain.invoice import InvoiceStatus

ALLOWED_TRANSITIONS: Dict[InvoiceStatus, FrozenSet[InvoiceStatus]] = {
    InvoiceStatus.DRAFT: frozenset({InvoiceStatus.SENT, InvoiceStatus.PAID}),
    InvoiceStatus.SENT: frozenset({InvoiceStatus.PAID, InvoiceStatus.OVERDUE}),
    InvoiceStatus.OVERDUE: frozenset({InvoiceStatus.PAID}),
    InvoiceStatus.PAID: frozenset(),
}


def is_legal_transition(current: InvoiceStatus, requested: InvoiceStatus) -> bool:
    return InvoiceStatus(requested) in ALLOWED_TRANSITIONS[InvoiceStatus(current)]


def ensure_transition(current: InvoiceStatus, requested: InvoiceStatus) -> None:
    if not is_legal_transition(current, requested):
        raise StateTransitionError(InvoiceStatus(current).value, InvoiceStatus(requested).value)
