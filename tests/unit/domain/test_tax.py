"""Unit tests for the tax calculator"""

import pytest
from decimal import Decimal
from types import SimpleNamespace

from src.domain.errors import ValidationError
from src.domain.invoice import TaxJurisdiction
from src.domain.tax import (
    GST_FULL_RATE,
    GST_HALF_RATE,
    calculate_tax,
    derive_jurisdiction,
    line_total,
    round_money,
    validate_line_items,
)


def item(quantity, unit_price):
    return SimpleNamespace(quantity=quantity, unit_price=Decimal(unit_price))


@pytest.fixture
def two_items():
    # 2 x 100 + 3 x 150 = 650
    return [item(2, "100"), item(3, "150")]


class TestCalculateTax:
    """Tax breakdown for both jurisdictions"""

    def test_in_state_splits_cgst_and_sgst(self, two_items):
        breakdown = calculate_tax(two_items, TaxJurisdiction.IN_STATE)

        assert breakdown.subtotal == Decimal("650")
        assert breakdown.cgst == Decimal("16.25")
        assert breakdown.sgst == Decimal("16.25")
        assert breakdown.igst == Decimal("0")
        assert breakdown.total_tax == Decimal("32.50")
        assert breakdown.total_amount == Decimal("682.50")

    def test_out_state_charges_igst_only(self, two_items):
        breakdown = calculate_tax(two_items, TaxJurisdiction.OUT_STATE)

        assert breakdown.cgst == Decimal("0")
        assert breakdown.sgst == Decimal("0")
        assert breakdown.igst == Decimal("32.50")
        assert breakdown.total_tax == Decimal("32.50")
        assert breakdown.total_amount == Decimal("682.50")

    def test_half_cent_component_is_not_rounded(self):
        """
        Given: subtotal 925 in-state
        When: taxes are computed
        Then: each component is exactly 23.125 and the total is 971.25
        """
        items = [item(2, "100"), item(3, "150"), item(1, "275")]

        breakdown = calculate_tax(items, TaxJurisdiction.IN_STATE)

        assert breakdown.subtotal == Decimal("925")
        assert breakdown.cgst == Decimal("23.125")
        assert breakdown.sgst == Decimal("23.125")
        assert breakdown.total_tax == Decimal("46.25")
        assert breakdown.total_amount == Decimal("971.25")
        assert round_money(breakdown.cgst) == Decimal("23.13")

    @pytest.mark.parametrize(
        "items",
        [
            [item(1, "0.01")],
            [item(7, "33.33"), item(1, "0.07")],
            [item(999, "1234.567")],
        ],
    )
    def test_total_tax_does_not_depend_on_jurisdiction(self, items):
        in_state = calculate_tax(items, TaxJurisdiction.IN_STATE)
        out_state = calculate_tax(items, TaxJurisdiction.OUT_STATE)

        assert in_state.total_tax == out_state.total_tax
        assert in_state.total_amount == out_state.total_amount
        assert in_state.total_amount == in_state.subtotal + in_state.total_tax

    def test_no_items_gives_zeros(self):
        breakdown = calculate_tax([], TaxJurisdiction.IN_STATE)

        assert breakdown.subtotal == Decimal("0")
        assert breakdown.total_tax == Decimal("0")
        assert breakdown.total_amount == Decimal("0")

    def test_accepts_jurisdiction_value_string(self, two_items):
        breakdown = calculate_tax(two_items, "out-state")

        assert breakdown.igst == Decimal("32.50")

    def test_full_rate_is_twice_half_rate(self):
        assert GST_FULL_RATE == GST_HALF_RATE * 2
        assert GST_HALF_RATE == Decimal("0.025")

    def test_float_prices_do_not_leak_binary_noise(self):
        assert line_total(3, 0.1) == Decimal("0.3")


class TestValidateLineItems:
    def test_empty_items_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_line_items([])

        assert exc_info.value.field == "items"

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_line_items([item(1, "10"), item(0, "10")])

        assert exc_info.value.field == "items[1].quantity"

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            validate_line_items([item(1, "-0.01")])

    def test_zero_price_allowed(self):
        validate_line_items([item(1, "0")])


class TestDeriveJurisdiction:
    @pytest.mark.parametrize("state", ["Maharashtra", "maharashtra", "  MAHARASHTRA "])
    def test_home_state_is_in_state(self, state):
        assert derive_jurisdiction(state, "Maharashtra") == TaxJurisdiction.IN_STATE

    @pytest.mark.parametrize("state", ["Karnataka", "", None])
    def test_other_or_missing_state_is_out_state(self, state):
        assert derive_jurisdiction(state, "Maharashtra") == TaxJurisdiction.OUT_STATE
