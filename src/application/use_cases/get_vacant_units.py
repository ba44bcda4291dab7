"""Use case listing vacant units and their estimated rent loss."""

from datetime import date

from src.application.ports.ledger_gateway import LedgerGatewayPort
from src.application.use_cases.report_filters import (
    ReportFilters,
    filter_units,
    load_lookups,
)
from src.domain.models import VacantUnitEntry
from src.domain.services.rental import find_vacant_units
from src.infrastructure.logging.logger import get_app_logger


class GetVacantUnitsUseCase:
    """Estimate vacancy duration and lost rent per unit."""

    def __init__(
        self,
        ledger_gateway: LedgerGatewayPort,
        logger=None,
    ) -> None:
        self._ledger_gateway = ledger_gateway
        self._logger = logger or get_app_logger()

    def execute(
        self,
        filters: ReportFilters | None = None,
        today: date | None = None,
    ) -> list[VacantUnitEntry]:
        """Return vacant units, longest vacancy first.

        Args:
            filters: Optional property filter; ``status`` keeps one of
                ``vacant``, ``maintenance`` or ``ready``.
            today: Reference day; defaults to the current date.

        Returns:
            list[VacantUnitEntry]: Vacancy lines.
        """
        resolved_filters = filters or ReportFilters()
        as_of = today or date.today()
        lookups = load_lookups(self._ledger_gateway)
        units = filter_units(lookups.units.values(), resolved_filters)
        entries = find_vacant_units(
            units,
            self._ledger_gateway.list_leases(),
            lookups,
            as_of,
        )
        status = resolved_filters.status
        if status and status != "all":
            entries = [entry for entry in entries if entry.status == status]
        total_loss = sum(entry.estimated_loss for entry in entries)
        self._logger.info(
            f"Found {len(entries)} vacant units, estimated loss={total_loss}"
        )
        return entries


__all__ = ["GetVacantUnitsUseCase", "VacantUnitEntry"]
