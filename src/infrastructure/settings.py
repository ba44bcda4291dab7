"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os

import dotenv

from src.domain.constants import (
    DEFAULT_ACCRUED_EXPENSES,
    DEFAULT_EQUIPMENT_VALUE,
    DEFAULT_EXPIRING_SOON_DAYS,
    DEFAULT_LEASE_WINDOW_DAYS,
    DEFAULT_LOANS,
    DEFAULT_MORTGAGE_LTV,
    DEFAULT_PROPERTY_VALUE,
    DEFAULT_SECURITY_DEPOSITS,
)
from src.domain.models import BalanceSheetAssumptions


@dataclass(frozen=True)
class ReportSettings:
    """Settings for report computations.

    Attributes:
        assumptions: Balance sheet figures not recorded in the ledger.
        lease_window_days: Default horizon of the leases ending report.
        expiring_soon_days: Threshold for flagging current leases.
        currency: Currency code shown by adapters.
    """

    assumptions: BalanceSheetAssumptions
    lease_window_days: int = DEFAULT_LEASE_WINDOW_DAYS
    expiring_soon_days: int = DEFAULT_EXPIRING_SOON_DAYS
    currency: str = "USD"

    @classmethod
    def from_env(cls) -> "ReportSettings":
        """Build settings from environment variables.

        Returns:
            ReportSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If a numeric variable cannot be parsed.
        """
        dotenv.load_dotenv()
        security_deposits = cls._decimal_env(
            "BALANCE_SHEET_SECURITY_DEPOSITS",
            DEFAULT_SECURITY_DEPOSITS,
        )
        assumptions = BalanceSheetAssumptions(
            security_deposits=security_deposits,
            tenant_deposits=cls._decimal_env(
                "BALANCE_SHEET_TENANT_DEPOSITS",
                security_deposits,
            ),
            equipment=cls._decimal_env(
                "BALANCE_SHEET_EQUIPMENT",
                DEFAULT_EQUIPMENT_VALUE,
            ),
            accrued_expenses=cls._decimal_env(
                "BALANCE_SHEET_ACCRUED_EXPENSES",
                DEFAULT_ACCRUED_EXPENSES,
            ),
            loans=cls._decimal_env("BALANCE_SHEET_LOANS", DEFAULT_LOANS),
            default_property_value=cls._decimal_env(
                "BALANCE_SHEET_DEFAULT_PROPERTY_VALUE",
                DEFAULT_PROPERTY_VALUE,
            ),
            mortgage_loan_to_value=cls._decimal_env(
                "BALANCE_SHEET_MORTGAGE_LTV",
                DEFAULT_MORTGAGE_LTV,
            ),
        )
        return cls(
            assumptions=assumptions,
            lease_window_days=cls._int_env(
                "LEASE_EXPIRY_WINDOW_DAYS",
                DEFAULT_LEASE_WINDOW_DAYS,
            ),
            expiring_soon_days=cls._int_env(
                "LEASE_EXPIRING_SOON_DAYS",
                DEFAULT_EXPIRING_SOON_DAYS,
            ),
            currency=os.getenv("REPORT_CURRENCY", "USD").strip().upper(),
        )

    @staticmethod
    def _decimal_env(name: str, default: Decimal) -> Decimal:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            return Decimal(raw.strip())
        except InvalidOperation as exc:
            raise ValueError(
                f"Invalid decimal for {name}: {raw!r}"
            ) from exc

    @staticmethod
    def _int_env(name: str, default: int) -> int:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            return int(raw.strip())
        except ValueError as exc:
            raise ValueError(f"Invalid integer for {name}: {raw!r}") from exc


__all__ = ["ReportSettings"]
