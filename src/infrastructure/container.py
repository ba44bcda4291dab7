"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_gateway import LedgerGatewayPort
from src.application.use_cases.get_balance_sheet import GetBalanceSheetUseCase
from src.application.use_cases.get_current_tenants import (
    GetCurrentTenantsUseCase,
)
from src.application.use_cases.get_leases_ending import GetLeasesEndingUseCase
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerGateway
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ReportSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_gateway(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerGatewayPort:
    """Return the SQL ledger gateway."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerGateway(resolved_db)


def build_report_settings() -> ReportSettings:
    """Return report settings sourced from the environment."""
    return ReportSettings.from_env()


def build_balance_sheet_use_case(
    gateway: LedgerGatewayPort | None = None,
    settings: ReportSettings | None = None,
) -> GetBalanceSheetUseCase:
    """Return the balance sheet use case with configured assumptions."""
    resolved_settings = settings or build_report_settings()
    return GetBalanceSheetUseCase(
        ledger_gateway=gateway or build_ledger_gateway(),
        logger=get_app_logger(),
        assumptions=resolved_settings.assumptions,
    )


def build_leases_ending_use_case(
    gateway: LedgerGatewayPort | None = None,
    settings: ReportSettings | None = None,
) -> GetLeasesEndingUseCase:
    """Return the leases ending use case with the configured window."""
    resolved_settings = settings or build_report_settings()
    return GetLeasesEndingUseCase(
        ledger_gateway=gateway or build_ledger_gateway(),
        logger=get_app_logger(),
        window_days=resolved_settings.lease_window_days,
    )


def build_current_tenants_use_case(
    gateway: LedgerGatewayPort | None = None,
    settings: ReportSettings | None = None,
) -> GetCurrentTenantsUseCase:
    """Return the current tenants use case with the configured threshold."""
    resolved_settings = settings or build_report_settings()
    return GetCurrentTenantsUseCase(
        ledger_gateway=gateway or build_ledger_gateway(),
        logger=get_app_logger(),
        expiring_soon_days=resolved_settings.expiring_soon_days,
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_gateway",
    "build_report_settings",
    "build_balance_sheet_use_case",
    "build_leases_ending_use_case",
    "build_current_tenants_use_case",
]
