"""Tax calculation for invoices

In-state supplies are taxed with CGST and SGST at the half rate each;
out-state supplies carry IGST at the full rate. The full rate is exactly
twice the half rate so the total tax burden does not depend on the
jurisdiction.

All arithmetic is done on ``Decimal`` without intermediate rounding.
``round_money`` is for reported figures only.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional
from src.domain.errors import ValidationError
from src.domain.invoice import TaxJurisdiction

GST_HALF_RATE = Decimal("0.025")
GST_FULL_RATE = GST_HALF_RATE * 2

ZERO = Decimal("0")
TWOPLACES = Decimal("0.01")


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps floats from dragging binary noise into the sum
    return Decimal(str(value))


def round_money(value: Decimal) -> Decimal:
    return _to_decimal(value).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def line_total(quantity, unit_price) -> Decimal:
    return _to_decimal(quantity) * _to_decimal(unit_price)


@dataclass(frozen=True)
class TaxBreakdown:
    subtotal: Decimal
    cgst: Decimal
    sgst: Decimal
    igst: Decimal
    total_tax: Decimal
    total_amount: Decimal


def calculate_tax(items: Iterable, jurisdiction: TaxJurisdiction) -> TaxBreakdown:
    """
    Compute subtotal, tax components and grand total

    Args:
        items: Objects exposing ``quantity`` and ``unit_price``
        jurisdiction: in-state or out-state

    Returns:
        TaxBreakdown with exact Decimal values
    """
    jurisdiction = TaxJurisdiction(jurisdiction)
    subtotal = sum((line_total(item.quantity, item.unit_price) for item in items), ZERO)

    if jurisdiction == TaxJurisdiction.IN_STATE:
        cgst = sgst = subtotal * GST_HALF_RATE
        igst = ZERO
    else:
        cgst = sgst = ZERO
        igst = subtotal * GST_FULL_RATE

    total_tax = cgst + sgst + igst
    return TaxBreakdown(
        subtotal=subtotal,
        cgst=cgst,
        sgst=sgst,
        igst=igst,
        total_tax=total_tax,
        total_amount=subtotal + total_tax,
    )


def validate_line_items(items: Iterable) -> None:
    """Reject empty item lists and negative quantities or prices"""
    items = list(items)
    if not items:
        raise ValidationError("Invoice must have at least one item", field="items")
    for index, item in enumerate(items):
        if item.quantity is None or int(item.quantity) < 1:
            raise ValidationError(
                f"Item {index}: quantity must be at least 1", field=f"items[{index}].quantity"
            )
        if item.unit_price is None or _to_decimal(item.unit_price) < ZERO:
            raise ValidationError(
                f"Item {index}: unit price cannot be negative", field=f"items[{index}].unit_price"
            )


def derive_jurisdiction(client_state: Optional[str], home_state: str) -> TaxJurisdiction:
    """in-state when the client's state matches the business home state (case-insensitive)"""
    state = (client_state or "").strip().lower()
    if state and state == (home_state or "").strip().lower():
        return TaxJurisdiction.IN_STATE
    return TaxJurisdiction.OUT_STATE
