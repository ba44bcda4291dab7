"""Shared report filtering helpers for application use cases."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from src.application.ports.ledger_gateway import LedgerGatewayPort
from src.domain.models import (
    LeaseRecord,
    LedgerLookups,
    Transaction,
    TransactionFilter,
    UnitRecord,
)


@dataclass(frozen=True)
class ReportFilters:
    """Filters selected for a report.

    Attributes:
        property_ids: Properties in scope; empty means all properties.
        date_from: Inclusive lower bound on due dates.
        date_to: Inclusive upper bound on due dates.
        status: Report specific status filter.
        search: Case-insensitive text searched in descriptions, property
            names, category names and references.
    """

    property_ids: tuple[str, ...] = ()
    date_from: date | None = None
    date_to: date | None = None
    status: str | None = None
    search: str | None = None

    @property
    def single_property_id(self) -> str | None:
        if len(self.property_ids) == 1:
            return self.property_ids[0]
        return None


def build_transaction_filter(
    filters: ReportFilters,
    transaction_type: str | None = None,
    statuses: tuple[str, ...] = (),
    payment_method: str | None = None,
) -> TransactionFilter:
    """Translate report filters into a store-side transaction filter.

    Only a single selected property is pushed to the store; several
    properties are filtered in memory by ``filter_transactions``.

    Args:
        filters: Report filters.
        transaction_type: Optional ``income`` or ``expense`` restriction.
        statuses: Statuses accepted by the report.
        payment_method: Optional payment method restriction.

    Returns:
        TransactionFilter: Filter for the ledger gateway.
    """
    return TransactionFilter(
        property_id=filters.single_property_id,
        type=transaction_type,
        statuses=statuses,
        date_from=filters.date_from,
        date_to=filters.date_to,
        payment_method=payment_method,
    )


def _matches_search(
    transaction: Transaction,
    needle: str,
    lookups: LedgerLookups,
) -> bool:
    record = lookups.properties.get(transaction.property_id or "")
    haystack = (
        transaction.description,
        record.name if record else None,
        transaction.category_name,
        transaction.reference_id,
    )
    return any(needle in value.lower() for value in haystack if value)


def filter_transactions(
    transactions: Iterable[Transaction],
    filters: ReportFilters,
    lookups: LedgerLookups,
) -> list[Transaction]:
    """Apply the in-memory part of report filters.

    Args:
        transactions: Transactions returned by the gateway.
        filters: Report filters.
        lookups: Lookups used to match property names.

    Returns:
        list[Transaction]: Transactions in the selected properties that
        match the search text.
    """
    property_ids = set(filters.property_ids)
    needle = (filters.search or "").strip().lower()
    selected = []
    for transaction in transactions:
        if property_ids and transaction.property_id not in property_ids:
            continue
        if needle and not _matches_search(transaction, needle, lookups):
            continue
        selected.append(transaction)
    return selected


def filter_units(
    units: Iterable[UnitRecord],
    filters: ReportFilters,
) -> list[UnitRecord]:
    """Keep units belonging to the selected properties."""
    property_ids = set(filters.property_ids)
    return [
        unit for unit in units
        if not property_ids or unit.property_id in property_ids
    ]


def filter_leases(
    leases: Iterable[LeaseRecord],
    filters: ReportFilters,
    lookups: LedgerLookups,
) -> list[LeaseRecord]:
    """Keep leases whose unit belongs to the selected properties."""
    property_ids = set(filters.property_ids)
    if not property_ids:
        return list(leases)
    selected = []
    for lease in leases:
        unit = lookups.units.get(lease.unit_id)
        if unit is not None and unit.property_id in property_ids:
            selected.append(lease)
    return selected


def load_lookups(gateway: LedgerGatewayPort) -> LedgerLookups:
    """Fetch display lookups from the ledger gateway."""
    return LedgerLookups(
        properties={record.id: record for record in gateway.list_properties()},
        units={record.id: record for record in gateway.list_units()},
        tenants={record.id: record for record in gateway.list_tenants()},
        vendors={record.id: record for record in gateway.list_vendors()},
    )


__all__ = [
    "ReportFilters",
    "build_transaction_filter",
    "filter_transactions",
    "filter_units",
    "filter_leases",
    "load_lookups",
]
