"""Domain models for rental operations reports and registers."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class DelinquentTenantEntry:
    """Tenant with an open balance.

    Attributes:
        total_balance: Sum of pending and overdue charges.
        overdue_amount: Portion of the balance that is past due.
        days_overdue: Age of the oldest past due charge.
        last_payment_date: Most recent paid date, if any.
        status: ``current``, ``late`` or ``delinquent``.
    """

    tenant_id: str
    tenant_name: str
    property_name: str
    unit_name: str
    email: str | None
    phone: str | None
    total_balance: Decimal
    overdue_amount: Decimal
    days_overdue: int
    last_payment_date: date | None
    status: str


@dataclass(frozen=True)
class LeaseExpiryEntry:
    """Lease ending within the reporting window."""

    lease_id: str
    property_name: str
    unit_name: str
    tenant_name: str
    email: str | None
    phone: str | None
    lease_start: date
    lease_end: date
    rent_amount: Decimal
    security_deposit: Decimal
    days_until_expiry: int
    urgency: str
    renewal_status: str
    notice_given: bool


@dataclass(frozen=True)
class CurrentTenantEntry:
    """Tenant on a lease active today."""

    lease_id: str
    tenant_id: str | None
    tenant_name: str
    property_name: str
    unit_name: str
    email: str | None
    phone: str | None
    lease_start: date
    lease_end: date
    rent_amount: Decimal
    security_deposit: Decimal
    days_until_expiry: int
    lease_status: str


@dataclass(frozen=True)
class VacantUnitEntry:
    """Unit that is empty or under maintenance.

    Attributes:
        days_vacant: Whole days since ``vacant_since``, clamped at zero.
        estimated_loss: Market rent lost over ``days_vacant``.
    """

    unit_id: str
    property_name: str
    unit_name: str
    unit_type: str | None
    beds: int | None
    baths: Decimal | None
    size: int | None
    market_rent: Decimal
    deposit: Decimal
    last_tenant: str
    vacant_since: date
    days_vacant: int
    estimated_loss: Decimal
    status: str


@dataclass(frozen=True)
class RentRollEntry:
    """Occupancy line for a unit."""

    unit_id: str
    property_name: str
    unit_name: str
    tenant_name: str
    lease_start: date | None
    lease_end: date | None
    market_rent: Decimal
    current_rent: Decimal
    security_deposit: Decimal
    balance_due: Decimal
    status: str


@dataclass(frozen=True)
class RentRollTotals:
    market_rent: Decimal
    current_rent: Decimal
    security_deposits: Decimal
    balance_due: Decimal


@dataclass(frozen=True)
class RentRoll:
    """Rent roll lines with their totals."""

    entries: list[RentRollEntry]
    totals: RentRollTotals

    @property
    def occupied_units(self) -> int:
        return sum(1 for entry in self.entries if entry.status != "vacant")


@dataclass(frozen=True)
class RegisterEntry:
    """Bank register line with its running balance."""

    transaction_id: str
    entry_date: date
    type: str
    status: str
    amount: Decimal
    signed_amount: Decimal
    running_balance: Decimal
    description: str
    property_name: str
    category_name: str | None
    reference_id: str | None


@dataclass(frozen=True)
class BankRegister:
    """Register lines newest first with income/expense totals."""

    entries: list[RegisterEntry]
    total_income: Decimal
    total_expenses: Decimal
    ending_balance: Decimal


@dataclass(frozen=True)
class CheckEntry:
    """Transaction paid by check."""

    transaction_id: str
    check_number: str
    check_date: date
    payee: str
    amount: Decimal
    type: str
    status: str
    cleared_date: date | None
    property_name: str
    description: str


__all__ = [
    "DelinquentTenantEntry",
    "LeaseExpiryEntry",
    "CurrentTenantEntry",
    "VacantUnitEntry",
    "RentRollEntry",
    "RentRollTotals",
    "RentRoll",
    "RegisterEntry",
    "BankRegister",
    "CheckEntry",
]
