"""Domain models for ledger records read from the property store."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class Transaction:
    """A single financial ledger line.

    Amounts are stored unsigned; the direction is implied by ``type``.

    Attributes:
        id: Ledger identifier.
        type: ``income`` or ``expense``.
        status: ``pending``, ``paid``, ``overdue`` or ``cancelled``.
        amount: Non-negative amount.
        created_at: Creation timestamp set by the store.
        subtype: Optional refinement (invoice, payment, deposit, ...).
        due_date: Date the amount is due, when known.
        paid_date: Date the amount was settled, when paid.
    """

    id: str
    type: str
    status: str
    amount: Decimal
    created_at: datetime | None
    subtype: str | None = None
    due_date: date | None = None
    paid_date: date | None = None
    property_id: str | None = None
    unit_id: str | None = None
    tenant_id: str | None = None
    vendor_id: str | None = None
    lease_id: str | None = None
    category_id: str | None = None
    category_name: str | None = None
    description: str | None = None
    payment_method: str | None = None
    reference_id: str | None = None

    @property
    def is_income(self) -> bool:
        return self.type == "income"

    @property
    def is_expense(self) -> bool:
        return self.type == "expense"


@dataclass(frozen=True)
class PropertyRecord:
    """Property lookup record."""

    id: str
    name: str
    address: str | None = None
    purchase_price: Decimal | None = None


@dataclass(frozen=True)
class UnitRecord:
    """Rentable unit within a property."""

    id: str
    property_id: str
    name: str
    status: str
    unit_type: str | None = None
    beds: int | None = None
    baths: Decimal | None = None
    size: int | None = None
    market_rent: Decimal | None = None
    deposit: Decimal | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class LeaseRecord:
    """Lease agreement for a unit.

    Attributes:
        primary_tenant_id: Tenant flagged as primary on the lease, if any.
        renewal_status: Stored renewal workflow state.
    """

    id: str
    unit_id: str
    start_date: date
    end_date: date
    rent_amount: Decimal
    deposit_amount: Decimal | None = None
    primary_tenant_id: str | None = None
    renewal_status: str | None = None


@dataclass(frozen=True)
class TenantRecord:
    """Tenant contact record."""

    id: str
    first_name: str | None
    last_name: str | None
    email: str | None = None
    phone: str | None = None
    unit_id: str | None = None
    is_company: bool = False
    company_name: str | None = None

    @property
    def display_name(self) -> str:
        """Return the company name for companies, else the full name."""
        if self.is_company and self.company_name:
            return self.company_name
        parts = [part for part in (self.first_name, self.last_name) if part]
        return " ".join(parts)


@dataclass(frozen=True)
class VendorRecord:
    """Vendor lookup record."""

    id: str
    name: str


@dataclass(frozen=True)
class TransactionFilter:
    """Store-side filter applied by the ledger gateway.

    Attributes:
        statuses: Accepted statuses; empty means any status.
        date_from: Inclusive lower bound on ``due_date``.
        date_to: Inclusive upper bound on ``due_date``.
    """

    property_id: str | None = None
    unit_id: str | None = None
    tenant_id: str | None = None
    vendor_id: str | None = None
    category_id: str | None = None
    type: str | None = None
    statuses: tuple[str, ...] = ()
    date_from: date | None = None
    date_to: date | None = None
    payment_method: str | None = None


@dataclass(frozen=True)
class LedgerLookups:
    """Display lookups used to enrich report rows."""

    properties: dict[str, PropertyRecord]
    units: dict[str, UnitRecord]
    tenants: dict[str, TenantRecord]
    vendors: dict[str, VendorRecord]

    @classmethod
    def empty(cls) -> "LedgerLookups":
        return cls(properties={}, units={}, tenants={}, vendors={})


__all__ = [
    "Transaction",
    "PropertyRecord",
    "UnitRecord",
    "LeaseRecord",
    "TenantRecord",
    "VendorRecord",
    "TransactionFilter",
    "LedgerLookups",
]
