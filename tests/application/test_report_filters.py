"""Tests for shared report filter helpers."""

from datetime import date
from decimal import Decimal

from src.application.use_cases.report_filters import (
    ReportFilters,
    build_transaction_filter,
    filter_leases,
    filter_transactions,
    filter_units,
    load_lookups,
)


def test_single_property_is_exposed() -> None:
    assert ReportFilters(property_ids=("p1",)).single_property_id == "p1"
    assert ReportFilters(property_ids=("p1", "p2")).single_property_id is None
    assert ReportFilters().single_property_id is None


def test_build_transaction_filter_copies_period() -> None:
    filters = ReportFilters(
        property_ids=("p1",),
        date_from=date(2024, 1, 1),
        date_to=date(2024, 1, 31),
    )

    result = build_transaction_filter(
        filters,
        transaction_type="expense",
        statuses=("pending",),
        payment_method="check",
    )

    assert result.property_id == "p1"
    assert result.type == "expense"
    assert result.statuses == ("pending",)
    assert result.date_from == date(2024, 1, 1)
    assert result.date_to == date(2024, 1, 31)
    assert result.payment_method == "check"


def test_filter_transactions_by_properties_and_search(
    gateway_factory,
    make_transaction,
) -> None:
    lookups = load_lookups(gateway_factory())
    transactions = [
        make_transaction(property_id="p1", reference_id="INV-77"),
        make_transaction(property_id="p2", category_name="Parking"),
        make_transaction(property_id="p3", amount=Decimal("5")),
    ]

    by_property = filter_transactions(
        transactions,
        ReportFilters(property_ids=("p1", "p2")),
        lookups,
    )
    by_reference = filter_transactions(
        transactions,
        ReportFilters(search=" inv-77 "),
        lookups,
    )
    by_property_name = filter_transactions(
        transactions,
        ReportFilters(search="harbor"),
        lookups,
    )

    assert [item.property_id for item in by_property] == ["p1", "p2"]
    assert [item.property_id for item in by_reference] == ["p1"]
    assert [item.property_id for item in by_property_name] == ["p2"]


def test_filter_units_and_leases(gateway_factory, sample_ledger) -> None:
    lookups = load_lookups(gateway_factory())
    filters = ReportFilters(property_ids=("p2",))

    units = filter_units(sample_ledger["units"], filters)
    leases = filter_leases(sample_ledger["leases"], filters, lookups)
    all_leases = filter_leases(sample_ledger["leases"], ReportFilters(), lookups)

    assert [unit.id for unit in units] == ["u3"]
    assert [lease.id for lease in leases] == ["l2"]
    assert len(all_leases) == 2


def test_load_lookups_indexes_records(gateway_factory) -> None:
    lookups = load_lookups(gateway_factory())

    assert sorted(lookups.properties) == ["p1", "p2"]
    assert lookups.units["u2"].name == "1B"
    assert lookups.tenants["t2"].display_name == "Acme Corp"
    assert lookups.vendors["v1"].name == "City Utilities"
