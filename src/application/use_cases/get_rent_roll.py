"""Use case building the rent roll."""

from datetime import date

from src.application.ports.ledger_gateway import LedgerGatewayPort
from src.application.use_cases.report_filters import (
    ReportFilters,
    filter_units,
    load_lookups,
)
from src.domain.models import RentRoll, TransactionFilter
from src.domain.services.rental import build_rent_roll
from src.infrastructure.logging.logger import get_app_logger


class GetRentRollUseCase:
    """Combine units, active leases and open charges per unit."""

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
    ) -> RentRoll:
        """Return the rent roll for the selected properties."""
        resolved_filters = filters or ReportFilters()
        as_of = today or date.today()
        lookups = load_lookups(self._ledger_gateway)
        units = filter_units(lookups.units.values(), resolved_filters)
        transactions = self._ledger_gateway.list_transactions(
            TransactionFilter(
                property_id=resolved_filters.single_property_id,
                type="income",
                statuses=("pending",),
            )
        )
        rent_roll = build_rent_roll(
            units,
            self._ledger_gateway.list_leases(),
            transactions,
            lookups,
            as_of,
        )
        self._logger.info(
            f"Rent roll built for {len(rent_roll.entries)} units, "
            f"{rent_roll.occupied_units} occupied, "
            f"balance due={rent_roll.totals.balance_due}"
        )
        return rent_roll


__all__ = ["GetRentRollUseCase", "RentRoll"]
