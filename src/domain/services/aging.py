"""Aging classification and receivables/payables aggregation."""

from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    AGING_BUCKETS,
    NO_DESCRIPTION,
    PAYABLE_HIGH_PRIORITY_AMOUNT,
    PAYABLE_HIGH_PRIORITY_DAYS,
    PAYABLE_MEDIUM_PRIORITY_AMOUNT,
    PAYABLE_MEDIUM_PRIORITY_DAYS,
    UNKNOWN_PROPERTY,
    UNKNOWN_TENANT,
    UNKNOWN_UNIT,
    UNKNOWN_VENDOR,
)
from src.domain.errors import MissingDateError
from src.domain.models.ledger import LedgerLookups, Transaction
from src.domain.models.reports import (
    AgingClassification,
    AgingEntry,
    AgingReport,
    AgingTotals,
)
from src.domain.services.validation import validate_transaction_amount
from src.utils.decimal_utils import coerce_decimal

RECEIVABLES = "receivables"
PAYABLES = "payables"


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def resolve_due_date(transaction: Transaction) -> date:
    """Return the date a transaction is aged from.

    Args:
        transaction: Ledger transaction.

    Returns:
        date: The due date, or the creation date when no due date is set.

    Raises:
        MissingDateError: If neither date is available.
    """
    if transaction.due_date is not None:
        return _as_date(transaction.due_date)
    if transaction.created_at is not None:
        return _as_date(transaction.created_at)
    raise MissingDateError(transaction.id)


def classify_aging(
    due_date: date | datetime,
    today: date | datetime,
) -> AgingClassification:
    """Classify a due date into an aging bucket.

    Days are counted between calendar dates; time of day is ignored.
    Items that are not yet due still land in the first bucket.

    Args:
        due_date: Date the amount was due.
        today: Reference day of the report.

    Returns:
        AgingClassification: Days overdue, bucket label and currency flag.
    """
    days_overdue = (_as_date(today) - _as_date(due_date)).days
    if days_overdue <= 30:
        bucket = AGING_BUCKETS[0]
    elif days_overdue <= 60:
        bucket = AGING_BUCKETS[1]
    elif days_overdue <= 90:
        bucket = AGING_BUCKETS[2]
    else:
        bucket = AGING_BUCKETS[3]
    return AgingClassification(
        days_overdue=days_overdue,
        bucket=bucket,
        is_current=days_overdue <= 0,
    )


def payable_priority(days_overdue: int, amount: Decimal) -> str:
    """Return the payment urgency of an unpaid bill."""
    if (
        days_overdue > PAYABLE_HIGH_PRIORITY_DAYS
        or amount > PAYABLE_HIGH_PRIORITY_AMOUNT
    ):
        return "high"
    if (
        days_overdue > PAYABLE_MEDIUM_PRIORITY_DAYS
        or amount > PAYABLE_MEDIUM_PRIORITY_AMOUNT
    ):
        return "medium"
    return "low"


def compute_aging_totals(entries: Iterable[AgingEntry]) -> AgingTotals:
    """Sum aging entries into report totals.

    Args:
        entries: Entries produced by ``build_aging_report``.

    Returns:
        AgingTotals: Totals with every bucket label present.
    """
    total = Decimal("0")
    current = Decimal("0")
    overdue = Decimal("0")
    high_priority = Decimal("0")
    buckets = {label: Decimal("0") for label in AGING_BUCKETS}
    for entry in entries:
        total += entry.amount_due
        buckets[entry.aging_bucket] += entry.amount_due
        if entry.status == "current":
            current += entry.amount_due
        else:
            overdue += entry.amount_due
        if entry.priority == "high":
            high_priority += entry.amount_due
    return AgingTotals(
        total=total,
        current=current,
        overdue=overdue,
        buckets=buckets,
        high_priority=high_priority,
    )


def _counterparty_name(
    transaction: Transaction,
    kind: str,
    lookups: LedgerLookups,
) -> str:
    if kind == PAYABLES:
        vendor = lookups.vendors.get(transaction.vendor_id or "")
        return vendor.name if vendor else UNKNOWN_VENDOR
    tenant = lookups.tenants.get(transaction.tenant_id or "")
    if tenant and tenant.display_name:
        return tenant.display_name
    return UNKNOWN_TENANT


def build_aging_entry(
    transaction: Transaction,
    today: date,
    kind: str,
    lookups: LedgerLookups,
    position: int = 0,
) -> AgingEntry:
    """Age one open transaction.

    Args:
        transaction: Pending or overdue ledger transaction.
        today: Reference day of the report.
        kind: ``receivables`` or ``payables``.
        lookups: Display lookups for names.
        position: Index of the transaction in its input list, used for the
            fallback payables reference number.

    Returns:
        AgingEntry: Classified entry.
    """
    due_date = resolve_due_date(transaction)
    classification = classify_aging(due_date, today)
    amount = coerce_decimal(transaction.amount)
    days_overdue = max(0, classification.days_overdue)

    property_record = lookups.properties.get(transaction.property_id or "")
    unit_record = lookups.units.get(transaction.unit_id or "")
    priority = None
    reference_number = None
    if kind == PAYABLES:
        priority = payable_priority(classification.days_overdue, amount)
        reference_number = (
            transaction.reference_id or f"INV-{1000 + position:04d}"
        )
    return AgingEntry(
        source_transaction_id=transaction.id,
        amount_due=amount,
        original_amount=amount,
        due_date=due_date,
        days_overdue=days_overdue,
        aging_bucket=classification.bucket,
        status="current" if classification.is_current else "overdue",
        property_id=transaction.property_id,
        property_name=(
            property_record.name if property_record else UNKNOWN_PROPERTY
        ),
        unit_name=unit_record.name if unit_record else UNKNOWN_UNIT,
        counterparty_name=_counterparty_name(transaction, kind, lookups),
        description=transaction.description or NO_DESCRIPTION,
        category_name=transaction.category_name,
        priority=priority,
        reference_number=reference_number,
    )


def sort_aging_entries(
    entries: Iterable[AgingEntry],
    kind: str,
) -> list[AgingEntry]:
    """Order entries most overdue first.

    Payables break ties by larger amount; receivables by earlier due date.
    """
    if kind == PAYABLES:
        return sorted(
            entries,
            key=lambda entry: (
                -entry.days_overdue,
                -entry.amount_due,
                entry.source_transaction_id,
            ),
        )
    return sorted(
        entries,
        key=lambda entry: (
            -entry.days_overdue,
            entry.due_date,
            entry.source_transaction_id,
        ),
    )


def build_aging_report(
    transactions: Iterable[Transaction],
    today: date,
    kind: str = RECEIVABLES,
    lookups: LedgerLookups | None = None,
    logger: Logger | None = None,
) -> AgingReport:
    """Build an aging report from open transactions.

    Args:
        transactions: Transactions already filtered to one type and to the
            pending/overdue statuses.
        today: Reference day of the report.
        kind: ``receivables`` or ``payables``.
        lookups: Optional display lookups.
        logger: Optional logger for amount sign warnings.

    Returns:
        AgingReport: Sorted entries and their totals.

    Raises:
        ValueError: If ``kind`` is not supported.
        MissingDateError: If a transaction has no usable date.
    """
    if kind not in (RECEIVABLES, PAYABLES):
        raise ValueError(f"Unsupported aging report kind: {kind}")
    resolved_lookups = lookups or LedgerLookups.empty()
    entries = []
    for position, transaction in enumerate(transactions):
        if logger is not None:
            validate_transaction_amount(transaction, logger)
        entries.append(
            build_aging_entry(
                transaction,
                today,
                kind,
                resolved_lookups,
                position=position,
            )
        )
    sorted_entries = sort_aging_entries(entries, kind)
    return AgingReport(
        as_of=_as_date(today),
        entries=sorted_entries,
        totals=compute_aging_totals(sorted_entries),
    )


__all__ = [
    "RECEIVABLES",
    "PAYABLES",
    "resolve_due_date",
    "classify_aging",
    "payable_priority",
    "compute_aging_totals",
    "build_aging_entry",
    "sort_aging_entries",
    "build_aging_report",
]
