"""Shared fixtures for ledger report tests."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.models import (
    LeaseRecord,
    PropertyRecord,
    TenantRecord,
    Transaction,
    TransactionFilter,
    UnitRecord,
    VendorRecord,
)


class FakeLedgerGateway:
    """In-memory ledger gateway applying filters like the SQL gateway."""

    def __init__(
        self,
        transactions=None,
        properties=None,
        units=None,
        leases=None,
        tenants=None,
        vendors=None,
    ) -> None:
        self.transactions = list(transactions or [])
        self.properties = list(properties or [])
        self.units = list(units or [])
        self.leases = list(leases or [])
        self.tenants = list(tenants or [])
        self.vendors = list(vendors or [])
        self.filters: list[TransactionFilter] = []

    def list_transactions(self, transaction_filter):
        self.filters.append(transaction_filter)
        selected = []
        for item in self.transactions:
            if (
                transaction_filter.property_id
                and item.property_id != transaction_filter.property_id
            ):
                continue
            if transaction_filter.type and item.type != transaction_filter.type:
                continue
            if (
                transaction_filter.statuses
                and item.status not in transaction_filter.statuses
            ):
                continue
            if transaction_filter.payment_method and (
                (item.payment_method or "").lower()
                != transaction_filter.payment_method.lower()
            ):
                continue
            if transaction_filter.date_from and (
                item.due_date is None
                or item.due_date < transaction_filter.date_from
            ):
                continue
            if transaction_filter.date_to and (
                item.due_date is None
                or item.due_date > transaction_filter.date_to
            ):
                continue
            selected.append(item)
        return selected

    def list_properties(self):
        return list(self.properties)

    def list_units(self, property_id=None):
        return [
            unit for unit in self.units
            if property_id is None or unit.property_id == property_id
        ]

    def list_leases(self):
        return list(self.leases)

    def list_tenants(self):
        return list(self.tenants)

    def list_vendors(self):
        return list(self.vendors)


@pytest.fixture
def make_transaction():
    """Factory building transactions with sensible defaults."""
    counter = {"value": 0}

    def _make(**overrides) -> Transaction:
        counter["value"] += 1
        values = {
            "id": f"tx-{counter['value']}",
            "type": "income",
            "status": "pending",
            "amount": Decimal("100"),
            "created_at": datetime(2024, 1, 1, 9, 30),
        }
        values.update(overrides)
        return Transaction(**values)

    return _make


@pytest.fixture
def sample_ledger() -> dict:
    """Two properties with units, tenants, a vendor and leases."""
    properties = [
        PropertyRecord(
            id="p1",
            name="Maple Court",
            purchase_price=Decimal("300000"),
        ),
        PropertyRecord(id="p2", name="Harbor View"),
    ]
    units = [
        UnitRecord(
            id="u1",
            property_id="p1",
            name="1A",
            status="occupied",
            market_rent=Decimal("1200"),
        ),
        UnitRecord(
            id="u2",
            property_id="p1",
            name="1B",
            status="vacant",
            market_rent=Decimal("900"),
            created_at=datetime(2024, 1, 1),
        ),
        UnitRecord(
            id="u3",
            property_id="p2",
            name="2A",
            status="maintenance",
            market_rent=Decimal("1500"),
        ),
    ]
    tenants = [
        TenantRecord(
            id="t1",
            first_name="Ana",
            last_name="Lopez",
            email="ana@example.com",
            unit_id="u1",
        ),
        TenantRecord(
            id="t2",
            first_name=None,
            last_name=None,
            is_company=True,
            company_name="Acme Corp",
            unit_id="u3",
        ),
    ]
    vendors = [VendorRecord(id="v1", name="City Utilities")]
    leases = [
        LeaseRecord(
            id="l1",
            unit_id="u1",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 6, 30),
            rent_amount=Decimal("1150"),
            deposit_amount=Decimal("1150"),
            primary_tenant_id="t1",
        ),
        LeaseRecord(
            id="l2",
            unit_id="u3",
            start_date=date(2023, 1, 1),
            end_date=date(2023, 12, 31),
            rent_amount=Decimal("1400"),
            primary_tenant_id="t2",
            renewal_status="vacating",
        ),
    ]
    return {
        "properties": properties,
        "units": units,
        "tenants": tenants,
        "vendors": vendors,
        "leases": leases,
    }


@pytest.fixture
def fake_logger() -> MagicMock:
    """Logger double recording calls."""
    return MagicMock()


@pytest.fixture
def gateway_factory(sample_ledger):
    """Build a fake gateway over the sample ledger and given transactions."""

    def _build(transactions=()) -> FakeLedgerGateway:
        return FakeLedgerGateway(transactions=transactions, **sample_ledger)

    return _build
