"""Tests for the bank and check register use cases."""

from datetime import date
from decimal import Decimal

from src.application.use_cases.get_transaction_registers import (
    GetBankRegisterUseCase,
    GetCheckRegisterUseCase,
)
from src.application.use_cases.report_filters import ReportFilters


def _register_transactions(make_transaction):
    return [
        make_transaction(
            property_id="p1",
            status="paid",
            amount=Decimal("1000"),
            due_date=date(2024, 1, 5),
            payment_method="check",
            tenant_id="t1",
        ),
        make_transaction(
            type="expense",
            property_id="p2",
            status="paid",
            amount=Decimal("250"),
            due_date=date(2024, 1, 20),
            payment_method="ach",
            description="Boiler service",
        ),
        make_transaction(
            type="expense",
            property_id="p1",
            amount=Decimal("80"),
            due_date=date(2024, 2, 1),
            payment_method="CHECK",
            vendor_id="v1",
        ),
    ]


def test_bank_register_use_case(
    gateway_factory,
    make_transaction,
    fake_logger,
) -> None:
    gateway = gateway_factory(_register_transactions(make_transaction))

    register = GetBankRegisterUseCase(gateway, logger=fake_logger).execute()

    assert [entry.running_balance for entry in register.entries] == [
        Decimal("670"),
        Decimal("750"),
        Decimal("1000"),
    ]
    assert register.entries[1].property_name == "Harbor View"
    assert register.ending_balance == Decimal("670")


def test_bank_register_status_and_search(
    gateway_factory,
    make_transaction,
    fake_logger,
) -> None:
    gateway = gateway_factory(_register_transactions(make_transaction))
    use_case = GetBankRegisterUseCase(gateway, logger=fake_logger)

    paid = use_case.execute(ReportFilters(status="paid"))
    boiler = use_case.execute(ReportFilters(search="boiler"))

    assert gateway.filters[0].statuses == ("paid",)
    assert paid.ending_balance == Decimal("750")
    assert [entry.signed_amount for entry in boiler.entries] == [
        Decimal("-250"),
    ]


def test_check_register_use_case(
    gateway_factory,
    make_transaction,
    fake_logger,
) -> None:
    gateway = gateway_factory(_register_transactions(make_transaction))
    use_case = GetCheckRegisterUseCase(gateway, logger=fake_logger)

    checks = use_case.execute()
    cleared = use_case.execute(ReportFilters(status="cleared"))

    assert gateway.filters[0].payment_method == "check"
    assert [entry.payee for entry in checks] == [
        "City Utilities",
        "Ana Lopez",
    ]
    assert [entry.transaction_id for entry in cleared] == [
        checks[1].transaction_id,
    ]
