"""Rental operations: delinquency, lease expiry, vacancy and rent roll."""

from collections.abc import Iterable
from datetime import date, timedelta
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_EXPIRING_SOON_DAYS,
    DEFAULT_LEASE_WINDOW_DAYS,
    UNKNOWN_PROPERTY,
    UNKNOWN_TENANT,
    UNKNOWN_UNIT,
)
from src.domain.models.ledger import (
    LeaseRecord,
    LedgerLookups,
    TenantRecord,
    Transaction,
    UnitRecord,
)
from src.domain.models.rental import (
    CurrentTenantEntry,
    DelinquentTenantEntry,
    LeaseExpiryEntry,
    RentRoll,
    RentRollEntry,
    RentRollTotals,
    VacantUnitEntry,
)
from src.domain.services.aging import classify_aging, resolve_due_date
from src.utils.date_utils import coerce_date
from src.utils.decimal_utils import coerce_decimal

VACANT_UNIT_STATUSES = ("vacant", "maintenance")


def _unit_labels(
    unit_id: str | None,
    lookups: LedgerLookups,
) -> tuple[str, str]:
    unit = lookups.units.get(unit_id or "")
    if unit is None:
        return UNKNOWN_PROPERTY, UNKNOWN_UNIT
    record = lookups.properties.get(unit.property_id)
    return (record.name if record else UNKNOWN_PROPERTY), unit.name


def _tenant_name(tenant: TenantRecord | None) -> str:
    if tenant is None or not tenant.display_name:
        return UNKNOWN_TENANT
    return tenant.display_name


def delinquency_status(days_overdue: int) -> str:
    """Return ``delinquent`` past 30 days, ``late`` past 0, else current."""
    if days_overdue > 30:
        return "delinquent"
    if days_overdue > 0:
        return "late"
    return "current"


def find_delinquent_tenants(
    transactions: Iterable[Transaction],
    lookups: LedgerLookups,
    today: date,
) -> list[DelinquentTenantEntry]:
    """List tenants with an open balance, most overdue first.

    Args:
        transactions: Income transactions of any status.
        lookups: Tenant, unit and property lookups.
        today: Reference day.

    Returns:
        list[DelinquentTenantEntry]: Tenants whose balance is positive.
    """
    balances: dict[str, Decimal] = {}
    overdue_amounts: dict[str, Decimal] = {}
    max_days: dict[str, int] = {}
    last_payments: dict[str, date] = {}
    fallback_units: dict[str, str] = {}
    order: list[str] = []
    for transaction in transactions:
        tenant_id = transaction.tenant_id
        if not tenant_id:
            continue
        if tenant_id not in balances:
            order.append(tenant_id)
            balances[tenant_id] = Decimal("0")
            overdue_amounts[tenant_id] = Decimal("0")
            max_days[tenant_id] = 0
        if transaction.unit_id and tenant_id not in fallback_units:
            fallback_units[tenant_id] = transaction.unit_id
        amount = coerce_decimal(transaction.amount)
        if transaction.status in ("pending", "overdue"):
            balances[tenant_id] += amount
            classification = classify_aging(
                resolve_due_date(transaction),
                today,
            )
            if classification.days_overdue > 0:
                overdue_amounts[tenant_id] += amount
                max_days[tenant_id] = max(
                    max_days[tenant_id],
                    classification.days_overdue,
                )
        elif transaction.status == "paid" and transaction.paid_date:
            paid_date = coerce_date(transaction.paid_date)
            previous = last_payments.get(tenant_id)
            if previous is None or paid_date > previous:
                last_payments[tenant_id] = paid_date

    entries = []
    for tenant_id in order:
        if balances[tenant_id] <= 0:
            continue
        tenant = lookups.tenants.get(tenant_id)
        unit_id = (tenant.unit_id if tenant else None) or fallback_units.get(
            tenant_id
        )
        property_name, unit_name = _unit_labels(unit_id, lookups)
        entries.append(
            DelinquentTenantEntry(
                tenant_id=tenant_id,
                tenant_name=_tenant_name(tenant),
                property_name=property_name,
                unit_name=unit_name,
                email=tenant.email if tenant else None,
                phone=tenant.phone if tenant else None,
                total_balance=balances[tenant_id],
                overdue_amount=overdue_amounts[tenant_id],
                days_overdue=max_days[tenant_id],
                last_payment_date=last_payments.get(tenant_id),
                status=delinquency_status(max_days[tenant_id]),
            )
        )
    return sorted(
        entries,
        key=lambda entry: (-entry.days_overdue, entry.tenant_id),
    )


def lease_urgency(days_until_expiry: int) -> str:
    """Return ``urgent`` within a week, ``soon`` within 30 days."""
    if days_until_expiry <= 7:
        return "urgent"
    if days_until_expiry <= 30:
        return "soon"
    return "upcoming"


def find_leases_ending(
    leases: Iterable[LeaseRecord],
    lookups: LedgerLookups,
    today: date,
    date_from: date | None = None,
    date_to: date | None = None,
    window_days: int = DEFAULT_LEASE_WINDOW_DAYS,
) -> list[LeaseExpiryEntry]:
    """List leases ending inside a window, soonest first.

    Args:
        leases: All leases.
        lookups: Tenant, unit and property lookups.
        today: Reference day.
        date_from: Window start; defaults to ``today``.
        date_to: Window end; defaults to ``today + window_days``.
        window_days: Default window length.

    Returns:
        list[LeaseExpiryEntry]: Leases whose end date is in the window.
    """
    start = date_from or today
    end = date_to or today + timedelta(days=window_days)
    entries = []
    for lease in leases:
        if not start <= lease.end_date <= end:
            continue
        tenant = lookups.tenants.get(lease.primary_tenant_id or "")
        property_name, unit_name = _unit_labels(lease.unit_id, lookups)
        days_until_expiry = (lease.end_date - today).days
        renewal_status = lease.renewal_status or "not_contacted"
        entries.append(
            LeaseExpiryEntry(
                lease_id=lease.id,
                property_name=property_name,
                unit_name=unit_name,
                tenant_name=_tenant_name(tenant),
                email=tenant.email if tenant else None,
                phone=tenant.phone if tenant else None,
                lease_start=lease.start_date,
                lease_end=lease.end_date,
                rent_amount=coerce_decimal(lease.rent_amount),
                security_deposit=coerce_decimal(lease.deposit_amount),
                days_until_expiry=days_until_expiry,
                urgency=lease_urgency(days_until_expiry),
                renewal_status=renewal_status,
                notice_given=renewal_status == "vacating",
            )
        )
    return sorted(
        entries,
        key=lambda entry: (entry.days_until_expiry, entry.lease_id),
    )


def lease_status(
    days_until_expiry: int,
    expiring_soon_days: int = DEFAULT_EXPIRING_SOON_DAYS,
) -> str:
    """Classify an active lease by its remaining term."""
    if days_until_expiry < 0:
        return "month_to_month"
    if days_until_expiry <= expiring_soon_days:
        return "expiring_soon"
    return "active"


def list_current_tenants(
    leases: Iterable[LeaseRecord],
    lookups: LedgerLookups,
    today: date,
    expiring_soon_days: int = DEFAULT_EXPIRING_SOON_DAYS,
) -> list[CurrentTenantEntry]:
    """List tenants on leases active today, by property and unit."""
    entries = []
    for lease in leases:
        if not lease.start_date <= today <= lease.end_date:
            continue
        tenant = lookups.tenants.get(lease.primary_tenant_id or "")
        property_name, unit_name = _unit_labels(lease.unit_id, lookups)
        days_until_expiry = (lease.end_date - today).days
        entries.append(
            CurrentTenantEntry(
                lease_id=lease.id,
                tenant_id=lease.primary_tenant_id,
                tenant_name=_tenant_name(tenant),
                property_name=property_name,
                unit_name=unit_name,
                email=tenant.email if tenant else None,
                phone=tenant.phone if tenant else None,
                lease_start=lease.start_date,
                lease_end=lease.end_date,
                rent_amount=coerce_decimal(lease.rent_amount),
                security_deposit=coerce_decimal(lease.deposit_amount),
                days_until_expiry=max(0, days_until_expiry),
                lease_status=lease_status(
                    days_until_expiry,
                    expiring_soon_days,
                ),
            )
        )
    return sorted(
        entries,
        key=lambda entry: (
            entry.property_name,
            entry.unit_name,
            entry.lease_id,
        ),
    )


def _latest_lease(
    unit_id: str,
    leases: Iterable[LeaseRecord],
) -> LeaseRecord | None:
    candidates = [lease for lease in leases if lease.unit_id == unit_id]
    if not candidates:
        return None
    return max(candidates, key=lambda lease: (lease.end_date, lease.id))


def estimate_vacancy_loss(market_rent: Decimal, days_vacant: int) -> Decimal:
    """Return rent lost over a vacancy, using 30-day months."""
    return market_rent * Decimal(days_vacant) / Decimal(30)


def find_vacant_units(
    units: Iterable[UnitRecord],
    leases: Iterable[LeaseRecord],
    lookups: LedgerLookups,
    today: date,
) -> list[VacantUnitEntry]:
    """List vacant or maintenance units, longest vacancy first.

    Args:
        units: Units in scope.
        leases: All leases, used to find the previous tenant.
        lookups: Tenant and property lookups.
        today: Reference day.

    Returns:
        list[VacantUnitEntry]: Vacancy lines with estimated rent loss.
    """
    all_leases = list(leases)
    entries = []
    for unit in units:
        if unit.status not in VACANT_UNIT_STATUSES:
            continue
        last_lease = _latest_lease(unit.id, all_leases)
        if last_lease is not None:
            vacant_since = last_lease.end_date
            tenant = lookups.tenants.get(last_lease.primary_tenant_id or "")
            last_tenant = (
                tenant.display_name
                if tenant and tenant.display_name
                else "No previous tenant"
            )
        else:
            vacant_since = coerce_date(unit.created_at) or today
            last_tenant = "No previous tenant"
        days_vacant = max(0, (today - vacant_since).days)
        market_rent = coerce_decimal(unit.market_rent)
        if unit.status == "maintenance":
            status = "maintenance"
        elif days_vacant <= 7:
            status = "ready"
        else:
            status = "vacant"
        record = lookups.properties.get(unit.property_id)
        entries.append(
            VacantUnitEntry(
                unit_id=unit.id,
                property_name=record.name if record else UNKNOWN_PROPERTY,
                unit_name=unit.name,
                unit_type=unit.unit_type,
                beds=unit.beds,
                baths=unit.baths,
                size=unit.size,
                market_rent=market_rent,
                deposit=coerce_decimal(unit.deposit),
                last_tenant=last_tenant,
                vacant_since=vacant_since,
                days_vacant=days_vacant,
                estimated_loss=estimate_vacancy_loss(market_rent, days_vacant),
                status=status,
            )
        )
    return sorted(
        entries,
        key=lambda entry: (-entry.days_vacant, entry.unit_id),
    )


def build_rent_roll(
    units: Iterable[UnitRecord],
    leases: Iterable[LeaseRecord],
    transactions: Iterable[Transaction],
    lookups: LedgerLookups,
    today: date,
) -> RentRoll:
    """Build the rent roll: one line per unit with occupancy and balance.

    Args:
        units: Units in scope.
        leases: All leases.
        transactions: Income transactions used for balances due.
        lookups: Tenant and property lookups.
        today: Reference day.

    Returns:
        RentRoll: Lines ordered by property and unit, with totals.
    """
    active_leases: dict[str, LeaseRecord] = {}
    for lease in leases:
        if lease.start_date <= today <= lease.end_date:
            current = active_leases.get(lease.unit_id)
            if current is None or lease.start_date > current.start_date:
                active_leases[lease.unit_id] = lease

    pending_by_unit: dict[str, list[Transaction]] = {}
    for transaction in transactions:
        if (
            transaction.is_income
            and transaction.status == "pending"
            and transaction.unit_id
        ):
            pending_by_unit.setdefault(transaction.unit_id, []).append(
                transaction
            )

    entries = []
    for unit in units:
        record = lookups.properties.get(unit.property_id)
        if record is None:
            continue
        market_rent = coerce_decimal(unit.market_rent)
        lease = active_leases.get(unit.id)
        if lease is None:
            entries.append(
                RentRollEntry(
                    unit_id=unit.id,
                    property_name=record.name,
                    unit_name=unit.name,
                    tenant_name="Vacant",
                    lease_start=None,
                    lease_end=None,
                    market_rent=market_rent,
                    current_rent=Decimal("0"),
                    security_deposit=Decimal("0"),
                    balance_due=Decimal("0"),
                    status="vacant",
                )
            )
            continue
        pending = pending_by_unit.get(unit.id, [])
        balance_due = sum(
            (coerce_decimal(item.amount) for item in pending),
            start=Decimal("0"),
        )
        is_late = any(
            item.due_date is not None and coerce_date(item.due_date) < today
            for item in pending
        )
        tenant = lookups.tenants.get(lease.primary_tenant_id or "")
        entries.append(
            RentRollEntry(
                unit_id=unit.id,
                property_name=record.name,
                unit_name=unit.name,
                tenant_name=_tenant_name(tenant),
                lease_start=lease.start_date,
                lease_end=lease.end_date,
                market_rent=market_rent,
                current_rent=coerce_decimal(lease.rent_amount),
                security_deposit=coerce_decimal(lease.deposit_amount),
                balance_due=balance_due,
                status="late" if is_late else "current",
            )
        )

    entries.sort(key=lambda entry: (entry.property_name, entry.unit_name))
    totals = RentRollTotals(
        market_rent=sum(
            (entry.market_rent for entry in entries),
            start=Decimal("0"),
        ),
        current_rent=sum(
            (entry.current_rent for entry in entries),
            start=Decimal("0"),
        ),
        security_deposits=sum(
            (entry.security_deposit for entry in entries),
            start=Decimal("0"),
        ),
        balance_due=sum(
            (entry.balance_due for entry in entries),
            start=Decimal("0"),
        ),
    )
    return RentRoll(entries=entries, totals=totals)


__all__ = [
    "VACANT_UNIT_STATUSES",
    "delinquency_status",
    "find_delinquent_tenants",
    "lease_urgency",
    "find_leases_ending",
    "lease_status",
    "list_current_tenants",
    "estimate_vacancy_loss",
    "find_vacant_units",
    "build_rent_roll",
]
