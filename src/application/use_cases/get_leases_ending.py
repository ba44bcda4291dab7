"""Use case listing leases that end soon."""

from datetime import date

from src.application.ports.ledger_gateway import LedgerGatewayPort
from src.application.use_cases.report_filters import (
    ReportFilters,
    filter_leases,
    load_lookups,
)
from src.domain.constants import DEFAULT_LEASE_WINDOW_DAYS
from src.domain.models import LeaseExpiryEntry
from src.domain.services.rental import find_leases_ending
from src.infrastructure.logging.logger import get_app_logger


class GetLeasesEndingUseCase:
    """Rank expiring leases by renewal urgency."""

    def __init__(
        self,
        ledger_gateway: LedgerGatewayPort,
        logger=None,
        window_days: int = DEFAULT_LEASE_WINDOW_DAYS,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_gateway: Port providing leases and lookups.
            logger: Optional logger compatible with logging.Logger-like API.
            window_days: Horizon used when no end date is selected.
        """
        self._ledger_gateway = ledger_gateway
        self._logger = logger or get_app_logger()
        self._window_days = window_days

    def execute(
        self,
        filters: ReportFilters | None = None,
        today: date | None = None,
    ) -> list[LeaseExpiryEntry]:
        """Return leases ending in the selected window, soonest first.

        Args:
            filters: Optional property filter and window bounds; ``status``
                keeps one renewal status.
            today: Reference day; defaults to the current date.

        Returns:
            list[LeaseExpiryEntry]: Expiring leases.
        """
        resolved_filters = filters or ReportFilters()
        as_of = today or date.today()
        lookups = load_lookups(self._ledger_gateway)
        leases = filter_leases(
            self._ledger_gateway.list_leases(),
            resolved_filters,
            lookups,
        )
        entries = find_leases_ending(
            leases,
            lookups,
            as_of,
            date_from=resolved_filters.date_from,
            date_to=resolved_filters.date_to,
            window_days=self._window_days,
        )
        status = resolved_filters.status
        if status and status != "all":
            entries = [
                entry for entry in entries if entry.renewal_status == status
            ]
        self._logger.info(
            f"Found {len(entries)} leases ending out of {len(leases)} leases"
        )
        return entries


__all__ = ["GetLeasesEndingUseCase", "LeaseExpiryEntry"]
