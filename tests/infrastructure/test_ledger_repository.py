"""Tests for the SQLAlchemy ledger gateway against an in-memory database."""

from datetime import date, datetime
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from src.domain.errors import UpstreamFetchError
from src.domain.models import TransactionFilter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerGateway

_SCHEMA = (
    """
    CREATE TABLE properties (
        id TEXT PRIMARY KEY, name TEXT, address TEXT, purchase_price NUMERIC
    )
    """,
    """
    CREATE TABLE units (
        id TEXT PRIMARY KEY, property_id TEXT, name TEXT, unit_type TEXT,
        status TEXT, beds INTEGER, baths NUMERIC, size INTEGER,
        market_rent NUMERIC, deposit NUMERIC, created_at TEXT
    )
    """,
    """
    CREATE TABLE leases (
        id TEXT PRIMARY KEY, unit_id TEXT, start_date TEXT, end_date TEXT,
        rent_amount NUMERIC, deposit_amount NUMERIC, renewal_status TEXT
    )
    """,
    """
    CREATE TABLE lease_tenants (
        lease_id TEXT, tenant_id TEXT, is_primary INTEGER
    )
    """,
    """
    CREATE TABLE tenants (
        id TEXT PRIMARY KEY, first_name TEXT, last_name TEXT, email TEXT,
        phone TEXT, unit_id TEXT, is_company INTEGER, company_name TEXT
    )
    """,
    "CREATE TABLE vendors (id TEXT PRIMARY KEY, name TEXT)",
    "CREATE TABLE transaction_categories (id TEXT PRIMARY KEY, name TEXT)",
    """
    CREATE TABLE transactions (
        id TEXT PRIMARY KEY, type TEXT, subtype TEXT, status TEXT,
        amount NUMERIC, due_date TEXT, paid_date TEXT, created_at TEXT,
        property_id TEXT, unit_id TEXT, tenant_id TEXT, vendor_id TEXT,
        lease_id TEXT, category_id TEXT, description TEXT,
        payment_method TEXT, reference_id TEXT
    )
    """,
)

_ROWS = (
    "INSERT INTO properties VALUES ('p1', 'Maple Court', '1 Main', 300000)",
    "INSERT INTO properties VALUES ('p2', 'harbor view', NULL, NULL)",
    """
    INSERT INTO units VALUES
        ('u1', 'p1', '1A', 'apartment', 'occupied', 2, 1.5, 800, 1200, 1200,
         '2023-01-01T00:00:00'),
        ('u2', 'p2', '2A', NULL, 'vacant', NULL, NULL, NULL, NULL, NULL, NULL)
    """,
    """
    INSERT INTO leases VALUES
        ('l1', 'u1', '2024-01-01', '2024-12-31', 1150, 1150, NULL),
        ('l2', 'u2', '2023-01-01', '2023-12-31', 900, NULL, 'vacating')
    """,
    """
    INSERT INTO lease_tenants VALUES
        ('l1', 't1', 0), ('l1', 't2', 1), ('l2', 't3', 0)
    """,
    """
    INSERT INTO tenants VALUES
        ('t1', 'Ana', 'Lopez', 'ana@example.com', NULL, 'u1', 0, NULL),
        ('t2', NULL, NULL, NULL, NULL, NULL, 1, 'Acme Corp')
    """,
    "INSERT INTO vendors VALUES ('v1', 'City Utilities')",
    "INSERT INTO transaction_categories VALUES ('c1', 'Rent')",
    """
    INSERT INTO transactions VALUES
        ('tx1', 'income', 'payment', 'paid', 1150, '2024-02-01',
         '2024-02-03', '2024-01-25T10:00:00', 'p1', 'u1', 't1', NULL, 'l1',
         'c1', 'February rent', 'Check', '5512'),
        ('tx2', 'income', NULL, 'pending', 1150, '2024-03-01', NULL,
         '2024-02-25T10:00:00', 'p1', 'u1', 't1', NULL, 'l1', 'c1', NULL,
         NULL, NULL),
        ('tx3', 'expense', NULL, 'overdue', 80.25, NULL, NULL,
         '2024-01-10T08:00:00', 'p2', NULL, NULL, 'v1', NULL, NULL,
         'Water', 'ach', NULL)
    """,
)


class _DbPort:
    def __init__(self, engine) -> None:
        self._engine = engine

    def get_ledger_engine(self):
        return self._engine


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    with engine.begin() as conn:
        for statement in _SCHEMA + _ROWS:
            conn.exec_driver_sql(statement)
    yield engine
    engine.dispose()


@pytest.fixture
def gateway(engine) -> SqlAlchemyLedgerGateway:
    return SqlAlchemyLedgerGateway(_DbPort(engine))


def test_list_transactions_maps_rows(gateway) -> None:
    """Rows are mapped to transactions ordered by due date."""
    transactions = gateway.list_transactions(TransactionFilter())

    assert [item.id for item in transactions] == ["tx3", "tx1", "tx2"]
    first_paid = transactions[1]
    assert first_paid.amount == Decimal("1150")
    assert first_paid.due_date == date(2024, 2, 1)
    assert first_paid.paid_date == date(2024, 2, 3)
    assert first_paid.created_at == datetime(2024, 1, 25, 10, 0)
    assert first_paid.category_name == "Rent"
    assert first_paid.subtype == "payment"
    assert transactions[0].amount == Decimal("80.25")
    assert transactions[0].due_date is None
    assert transactions[0].category_name is None


def test_list_transactions_applies_filters(gateway) -> None:
    by_type = gateway.list_transactions(
        TransactionFilter(type="income", property_id="p1"),
    )
    by_status = gateway.list_transactions(
        TransactionFilter(statuses=("pending", "overdue")),
    )
    by_method = gateway.list_transactions(
        TransactionFilter(payment_method="CHECK"),
    )
    by_period = gateway.list_transactions(
        TransactionFilter(
            date_from=date(2024, 2, 15),
            date_to=date(2024, 3, 31),
        ),
    )

    assert [item.id for item in by_type] == ["tx1", "tx2"]
    assert [item.id for item in by_status] == ["tx3", "tx2"]
    assert [item.id for item in by_method] == ["tx1"]
    assert [item.id for item in by_period] == ["tx2"]


def test_list_properties_and_units(gateway) -> None:
    properties = gateway.list_properties()
    units = gateway.list_units()
    harbor_units = gateway.list_units(property_id="p2")

    assert [item.id for item in properties] == ["p2", "p1"]
    assert properties[1].purchase_price == Decimal("300000")
    assert properties[0].purchase_price is None
    assert [item.id for item in units] == ["u1", "u2"]
    assert units[0].baths == Decimal("1.5")
    assert units[0].created_at == datetime(2023, 1, 1)
    assert units[1].market_rent is None
    assert [item.id for item in harbor_units] == ["u2"]


def test_list_leases_resolves_primary_tenant(gateway) -> None:
    """The flagged tenant is primary, else the first linked tenant."""
    leases = gateway.list_leases()

    assert [item.id for item in leases] == ["l2", "l1"]
    assert leases[1].primary_tenant_id == "t2"
    assert leases[0].primary_tenant_id == "t3"
    assert leases[0].renewal_status == "vacating"
    assert leases[0].deposit_amount is None
    assert leases[1].end_date == date(2024, 12, 31)


def test_list_tenants_and_vendors(gateway) -> None:
    tenants = gateway.list_tenants()
    vendors = gateway.list_vendors()

    assert [item.display_name for item in tenants] == [
        "Ana Lopez",
        "Acme Corp",
    ]
    assert tenants[1].is_company is True
    assert tenants[1].unit_id is None
    assert [item.name for item in vendors] == ["City Utilities"]


def test_missing_table_raises_upstream_error() -> None:
    """Database failures surface as UpstreamFetchError."""
    empty_engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    gateway = SqlAlchemyLedgerGateway(_DbPort(empty_engine))

    with pytest.raises(UpstreamFetchError):
        gateway.list_vendors()
