"""Tests for the rental operations use cases."""

from datetime import date
from decimal import Decimal

from src.application.use_cases.get_current_tenants import (
    GetCurrentTenantsUseCase,
)
from src.application.use_cases.get_delinquent_tenants import (
    GetDelinquentTenantsUseCase,
)
from src.application.use_cases.get_leases_ending import GetLeasesEndingUseCase
from src.application.use_cases.get_rent_roll import GetRentRollUseCase
from src.application.use_cases.get_vacant_units import GetVacantUnitsUseCase
from src.application.use_cases.report_filters import ReportFilters

TODAY = date(2024, 6, 15)


def _tenant_charges(make_transaction):
    return [
        make_transaction(
            tenant_id="t1",
            unit_id="u1",
            property_id="p1",
            amount=Decimal("500"),
            due_date=date(2024, 5, 1),
        ),
        make_transaction(
            tenant_id="t2",
            unit_id="u3",
            property_id="p2",
            status="overdue",
            amount=Decimal("200"),
            due_date=date(2024, 6, 10),
        ),
        make_transaction(
            type="expense",
            tenant_id="t2",
            property_id="p2",
            amount=Decimal("75"),
            due_date=date(2024, 1, 1),
        ),
    ]


def test_delinquent_tenants_use_case(
    gateway_factory,
    make_transaction,
    fake_logger,
) -> None:
    gateway = gateway_factory(_tenant_charges(make_transaction))
    use_case = GetDelinquentTenantsUseCase(gateway, logger=fake_logger)

    entries = use_case.execute(today=TODAY)

    assert gateway.filters[0].type == "income"
    assert gateway.filters[0].statuses == ()
    assert [entry.tenant_id for entry in entries] == ["t1", "t2"]
    assert entries[1].total_balance == Decimal("200")


def test_delinquent_tenants_status_and_search(
    gateway_factory,
    make_transaction,
    fake_logger,
) -> None:
    use_case = GetDelinquentTenantsUseCase(
        gateway_factory(_tenant_charges(make_transaction)),
        logger=fake_logger,
    )

    late = use_case.execute(ReportFilters(status="late"), today=TODAY)
    searched = use_case.execute(ReportFilters(search="acme"), today=TODAY)
    by_property = use_case.execute(
        ReportFilters(property_ids=("p1",)),
        today=TODAY,
    )

    assert [entry.tenant_id for entry in late] == ["t2"]
    assert [entry.tenant_id for entry in searched] == ["t2"]
    assert [entry.tenant_id for entry in by_property] == ["t1"]


def test_leases_ending_use_case(gateway_factory, fake_logger) -> None:
    use_case = GetLeasesEndingUseCase(gateway_factory(), logger=fake_logger)

    entries = use_case.execute(today=TODAY)

    assert [entry.lease_id for entry in entries] == ["l1"]
    assert entries[0].tenant_name == "Ana Lopez"


def test_leases_ending_window_and_renewal_status(
    gateway_factory,
    fake_logger,
) -> None:
    short_window = GetLeasesEndingUseCase(
        gateway_factory(),
        logger=fake_logger,
        window_days=10,
    )
    use_case = GetLeasesEndingUseCase(gateway_factory(), logger=fake_logger)

    assert short_window.execute(today=TODAY) == []
    vacating = use_case.execute(
        ReportFilters(
            date_from=date(2023, 1, 1),
            date_to=date(2024, 12, 31),
            status="vacating",
        ),
        today=TODAY,
    )
    assert [entry.lease_id for entry in vacating] == ["l2"]


def test_leases_ending_property_filter(gateway_factory, fake_logger) -> None:
    use_case = GetLeasesEndingUseCase(gateway_factory(), logger=fake_logger)

    entries = use_case.execute(
        ReportFilters(
            property_ids=("p2",),
            date_from=date(2023, 1, 1),
            date_to=date(2024, 12, 31),
        ),
        today=TODAY,
    )

    assert [entry.lease_id for entry in entries] == ["l2"]


def test_current_tenants_use_case(gateway_factory, fake_logger) -> None:
    use_case = GetCurrentTenantsUseCase(gateway_factory(), logger=fake_logger)
    relaxed = GetCurrentTenantsUseCase(
        gateway_factory(),
        logger=fake_logger,
        expiring_soon_days=5,
    )

    entries = use_case.execute(today=TODAY)

    assert [entry.lease_id for entry in entries] == ["l1"]
    assert entries[0].lease_status == "expiring_soon"
    assert relaxed.execute(today=TODAY)[0].lease_status == "active"
    assert use_case.execute(ReportFilters(status="active"), today=TODAY) == []


def test_vacant_units_use_case(gateway_factory, fake_logger) -> None:
    use_case = GetVacantUnitsUseCase(gateway_factory(), logger=fake_logger)

    everything = use_case.execute(today=TODAY)
    maple = use_case.execute(ReportFilters(property_ids=("p1",)), today=TODAY)
    maintenance = use_case.execute(
        ReportFilters(status="maintenance"),
        today=TODAY,
    )

    assert [entry.unit_id for entry in everything] == ["u3", "u2"]
    assert [entry.unit_id for entry in maple] == ["u2"]
    assert [entry.unit_id for entry in maintenance] == ["u3"]


def test_rent_roll_use_case(
    gateway_factory,
    make_transaction,
    fake_logger,
) -> None:
    gateway = gateway_factory(_tenant_charges(make_transaction))
    use_case = GetRentRollUseCase(gateway, logger=fake_logger)

    roll = use_case.execute(ReportFilters(property_ids=("p1",)), today=TODAY)

    assert gateway.filters[0].statuses == ("pending",)
    assert gateway.filters[0].property_id == "p1"
    assert [entry.unit_id for entry in roll.entries] == ["u1", "u2"]
    assert roll.totals.balance_due == Decimal("500")
    assert roll.entries[0].status == "late"
