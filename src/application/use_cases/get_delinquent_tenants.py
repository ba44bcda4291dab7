"""Use case listing tenants with overdue balances."""

from datetime import date

from src.application.ports.ledger_gateway import LedgerGatewayPort
from src.application.use_cases.report_filters import (
    ReportFilters,
    filter_transactions,
    load_lookups,
)
from src.domain.models import DelinquentTenantEntry, TransactionFilter
from src.domain.services.rental import find_delinquent_tenants
from src.infrastructure.logging.logger import get_app_logger


class GetDelinquentTenantsUseCase:
    """Group tenant charges into balances and delinquency status."""

    def __init__(
        self,
        ledger_gateway: LedgerGatewayPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_gateway: Port providing ledger transactions and lookups.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_gateway = ledger_gateway
        self._logger = logger or get_app_logger()

    def execute(
        self,
        filters: ReportFilters | None = None,
        today: date | None = None,
    ) -> list[DelinquentTenantEntry]:
        """Return tenants with a positive balance, most overdue first.

        Args:
            filters: Optional property filter; ``status`` keeps one of
                ``current``, ``late`` or ``delinquent``.
            today: Reference day; defaults to the current date.

        Returns:
            list[DelinquentTenantEntry]: Tenant balances.
        """
        resolved_filters = filters or ReportFilters()
        as_of = today or date.today()
        # Paid charges are needed for the last payment date.
        transactions = self._ledger_gateway.list_transactions(
            TransactionFilter(
                property_id=resolved_filters.single_property_id,
                type="income",
            )
        )
        lookups = load_lookups(self._ledger_gateway)
        selected = filter_transactions(
            transactions,
            ReportFilters(property_ids=resolved_filters.property_ids),
            lookups,
        )
        entries = find_delinquent_tenants(selected, lookups, as_of)
        status = resolved_filters.status
        if status and status != "all":
            entries = [entry for entry in entries if entry.status == status]
        needle = (resolved_filters.search or "").strip().lower()
        if needle:
            entries = [
                entry for entry in entries
                if needle in entry.tenant_name.lower()
                or needle in entry.property_name.lower()
            ]
        self._logger.info(
            f"Found {len(entries)} tenants with open balances "
            f"from {len(selected)} income transactions"
        )
        return entries


__all__ = ["GetDelinquentTenantsUseCase", "DelinquentTenantEntry"]
