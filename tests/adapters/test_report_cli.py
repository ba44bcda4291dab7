"""Tests for the report CLI adapter."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.adapters import report_cli
from src.domain.errors import UpstreamFetchError
from src.infrastructure import container
from src.infrastructure import settings as settings_module


@pytest.fixture
def cli_env(monkeypatch, gateway_factory, make_transaction):
    """Point the CLI at an in-memory ledger with a silent logger."""
    logger = MagicMock()
    gateway = gateway_factory(
        [
            make_transaction(
                property_id="p1",
                tenant_id="t1",
                unit_id="u1",
                amount=Decimal("500"),
                due_date=date(2024, 5, 1),
            ),
            make_transaction(
                type="expense",
                property_id="p2",
                status="paid",
                amount=Decimal("120"),
                due_date=date(2024, 5, 2),
                category_name="Water",
            ),
        ]
    )
    monkeypatch.setattr(report_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(container, "get_app_logger", lambda: logger)
    monkeypatch.setattr(report_cli, "build_ledger_gateway", lambda: gateway)
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("REPORT_AS_OF", "2024-06-15")
    for name in ("REPORT_PROPERTY_ID", "REPORT_START_DATE", "REPORT_END_DATE"):
        monkeypatch.delenv(name, raising=False)
    return logger


def test_parse_date_warns_on_invalid_value() -> None:
    logger = MagicMock()

    assert report_cli._parse_date("2024-06-15", logger) == date(2024, 6, 15)
    assert report_cli._parse_date("15/06/2024", logger) is None
    assert report_cli._parse_date(None, logger) is None
    logger.warning.assert_called_once()


def test_filters_from_env(monkeypatch) -> None:
    monkeypatch.setenv("REPORT_PROPERTY_ID", " p1 ")
    monkeypatch.setenv("REPORT_START_DATE", "2024-01-01")
    monkeypatch.delenv("REPORT_END_DATE", raising=False)

    filters = report_cli._filters_from_env(MagicMock())

    assert filters.property_ids == ("p1",)
    assert filters.date_from == date(2024, 1, 1)
    assert filters.date_to is None


def test_main_rejects_unknown_report(cli_env, capsys) -> None:
    assert report_cli.main(["cashflow"]) == 2
    assert "Usage" in capsys.readouterr().out


def test_main_prints_receivables(cli_env, capsys) -> None:
    assert report_cli.main(["receivables"]) == 0

    out = capsys.readouterr().out
    assert "Receivables as of 2024-06-15: 1 items" in out
    assert "31-60=500" in out


@pytest.mark.parametrize(
    ("report", "expected"),
    [
        ("payables", "high_priority=0"),
        ("income-statement", "net_income=380"),
        ("balance-sheet", "Balance sheet as of 2024-06-15"),
        ("summary", "outstanding=500"),
        ("delinquent-tenants", "Ana Lopez (Maple Court 1A)"),
        ("leases-ending", "Leases ending: 1"),
        ("vacant-units", "Vacant units: 2"),
        ("rent-roll", "Rent roll: 3 units, 1 occupied"),
    ],
)
def test_main_prints_each_report(cli_env, capsys, report, expected) -> None:
    assert report_cli.main([report]) == 0
    assert expected in capsys.readouterr().out


def test_main_returns_error_on_ledger_failure(cli_env, monkeypatch) -> None:
    """Ledger errors are logged and mapped to exit status 1."""

    def failing_gateway():
        raise UpstreamFetchError("ledger offline")

    monkeypatch.setattr(report_cli, "build_ledger_gateway", failing_gateway)

    assert report_cli.main(["summary"]) == 1
    cli_env.error.assert_called_once()
