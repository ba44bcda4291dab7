"""Tests for the composition root."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import BalanceSheetAssumptions
from src.infrastructure import container
from src.infrastructure.ledger_repository import SqlAlchemyLedgerGateway
from src.infrastructure.settings import ReportSettings


def _settings() -> ReportSettings:
    return ReportSettings(
        assumptions=BalanceSheetAssumptions(
            security_deposits=Decimal("1"),
            tenant_deposits=Decimal("2"),
            equipment=Decimal("3"),
            accrued_expenses=Decimal("4"),
            loans=Decimal("5"),
            default_property_value=Decimal("6"),
            mortgage_loan_to_value=Decimal("0.5"),
        ),
        lease_window_days=45,
        expiring_soon_days=12,
    )


def test_build_ledger_gateway_wraps_database_port() -> None:
    db_port = MagicMock()

    gateway = container.build_ledger_gateway(db_port)

    assert isinstance(gateway, SqlAlchemyLedgerGateway)
    assert gateway._db_port is db_port


def test_use_cases_receive_configured_settings(monkeypatch) -> None:
    """Builders pass settings from the environment layer to use cases."""
    logger = MagicMock()
    monkeypatch.setattr(container, "get_app_logger", lambda: logger)
    monkeypatch.setattr(container, "build_report_settings", _settings)
    gateway = MagicMock()

    balance_sheet = container.build_balance_sheet_use_case(gateway)
    leases_ending = container.build_leases_ending_use_case(gateway)
    current_tenants = container.build_current_tenants_use_case(gateway)

    assert balance_sheet._assumptions.loans == Decimal("5")
    assert balance_sheet._ledger_gateway is gateway
    assert leases_ending._window_days == 45
    assert current_tenants._expiring_soon_days == 12
    assert current_tenants._logger is logger
