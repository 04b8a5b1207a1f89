"""Unit tests for entity timestamps"""

import pytest
from datetime import date, timedelta
from decimal import Decimal

from src.domain.client import Client
from src.domain.invoice import Invoice, TaxJurisdiction
from src.domain.product import Product


def new_entities():
    return [
        Client(name="Lakeside Physio", email="desk@lakeside.in", phone="1"),
        Product(name="Ankle Binder", base_price=Decimal("10"), category="Orthotics"),
        Invoice(
            invoice_number="INV-2024-0001",
            client_id=1,
            invoice_date=date(2024, 1, 15),
            due_date=date(2024, 1, 15) + timedelta(days=30),
            tax_jurisdiction=TaxJurisdiction.IN_STATE,
        ),
    ]


class TestTimestamps:
    @pytest.mark.parametrize("entity", new_entities(), ids=lambda e: type(e).__name__)
    def test_defaults_are_utc_aware(self, entity):
        assert entity.created_at.tzinfo is not None
        assert entity.updated_at.tzinfo is not None
        assert entity.created_at.utcoffset() == timedelta(0)

    @pytest.mark.parametrize("model", [Client, Product, Invoice], ids=lambda m: m.__name__)
    def test_columns_store_timezone(self, model):
        columns = model.__table__.c

        assert columns.created_at.type.timezone is True
        assert columns.updated_at.type.timezone is True
