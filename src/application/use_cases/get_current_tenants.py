"""Use case listing tenants on active leases."""

from datetime import date

from src.application.ports.ledger_gateway import LedgerGatewayPort
from src.application.use_cases.report_filters import (
    ReportFilters,
    filter_leases,
    load_lookups,
)
from src.domain.constants import DEFAULT_EXPIRING_SOON_DAYS
from src.domain.models import CurrentTenantEntry
from src.domain.services.rental import list_current_tenants
from src.infrastructure.logging.logger import get_app_logger


class GetCurrentTenantsUseCase:
    """List occupants of leases active on the reference day."""

    def __init__(
        self,
        ledger_gateway: LedgerGatewayPort,
        logger=None,
        expiring_soon_days: int = DEFAULT_EXPIRING_SOON_DAYS,
    ) -> None:
        self._ledger_gateway = ledger_gateway
        self._logger = logger or get_app_logger()
        self._expiring_soon_days = expiring_soon_days

    def execute(
        self,
        filters: ReportFilters | None = None,
        today: date | None = None,
    ) -> list[CurrentTenantEntry]:
        """Return current tenants; ``status`` keeps one lease status."""
        resolved_filters = filters or ReportFilters()
        as_of = today or date.today()
        lookups = load_lookups(self._ledger_gateway)
        leases = filter_leases(
            self._ledger_gateway.list_leases(),
            resolved_filters,
            lookups,
        )
        entries = list_current_tenants(
            leases,
            lookups,
            as_of,
            expiring_soon_days=self._expiring_soon_days,
        )
        status = resolved_filters.status
        if status and status != "all":
            entries = [
                entry for entry in entries if entry.lease_status == status
            ]
        self._logger.info(f"Found {len(entries)} current tenants")
        return entries


__all__ = ["GetCurrentTenantsUseCase", "CurrentTenantEntry"]
