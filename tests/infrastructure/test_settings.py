"""Tests for report settings."""

from decimal import Decimal

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import ReportSettings

_VARIABLES = (
    "BALANCE_SHEET_SECURITY_DEPOSITS",
    "BALANCE_SHEET_TENANT_DEPOSITS",
    "BALANCE_SHEET_EQUIPMENT",
    "BALANCE_SHEET_ACCRUED_EXPENSES",
    "BALANCE_SHEET_LOANS",
    "BALANCE_SHEET_DEFAULT_PROPERTY_VALUE",
    "BALANCE_SHEET_MORTGAGE_LTV",
    "LEASE_EXPIRY_WINDOW_DAYS",
    "LEASE_EXPIRING_SOON_DAYS",
    "REPORT_CURRENCY",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    for name in _VARIABLES:
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults() -> None:
    """Placeholder figures apply when nothing is configured."""
    settings = ReportSettings.from_env()

    assert settings.assumptions.security_deposits == Decimal("25000")
    assert settings.assumptions.tenant_deposits == Decimal("25000")
    assert settings.assumptions.mortgage_loan_to_value == Decimal("0.7")
    assert settings.lease_window_days == 90
    assert settings.expiring_soon_days == 30
    assert settings.currency == "USD"


def test_from_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("BALANCE_SHEET_SECURITY_DEPOSITS", "1200.50")
    monkeypatch.setenv("BALANCE_SHEET_LOANS", " 0 ")
    monkeypatch.setenv("BALANCE_SHEET_MORTGAGE_LTV", "0.6")
    monkeypatch.setenv("LEASE_EXPIRY_WINDOW_DAYS", "60")
    monkeypatch.setenv("LEASE_EXPIRING_SOON_DAYS", "14")
    monkeypatch.setenv("REPORT_CURRENCY", "eur")

    settings = ReportSettings.from_env()

    assert settings.assumptions.security_deposits == Decimal("1200.50")
    assert settings.assumptions.tenant_deposits == Decimal("1200.50")
    assert settings.assumptions.loans == Decimal("0")
    assert settings.assumptions.mortgage_loan_to_value == Decimal("0.6")
    assert settings.lease_window_days == 60
    assert settings.expiring_soon_days == 14
    assert settings.currency == "EUR"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("BALANCE_SHEET_EQUIPMENT", "lots"),
        ("LEASE_EXPIRY_WINDOW_DAYS", "ninety"),
    ],
)
def test_from_env_rejects_invalid_numbers(monkeypatch, name, value) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError):
        ReportSettings.from_env()
