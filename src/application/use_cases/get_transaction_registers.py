"""Use cases listing bank and check register lines."""

from src.application.ports.ledger_gateway import LedgerGatewayPort
from src.application.use_cases.report_filters import (
    ReportFilters,
    build_transaction_filter,
    filter_transactions,
    load_lookups,
)
from src.domain.models import BankRegister, CheckEntry
from src.domain.services.ledger import (
    build_bank_register,
    build_check_register,
)
from src.infrastructure.logging.logger import get_app_logger


class GetBankRegisterUseCase:
    """Compute register lines with a running balance."""

    def __init__(
        self,
        ledger_gateway: LedgerGatewayPort,
        logger=None,
    ) -> None:
        self._ledger_gateway = ledger_gateway
        self._logger = logger or get_app_logger()

    def execute(self, filters: ReportFilters | None = None) -> BankRegister:
        """Return register lines newest first.

        Args:
            filters: Optional property, period, status and search filters.

        Returns:
            BankRegister: Lines with running balance and totals.
        """
        resolved_filters = filters or ReportFilters()
        statuses = (
            (resolved_filters.status,)
            if resolved_filters.status and resolved_filters.status != "all"
            else ()
        )
        transactions = self._ledger_gateway.list_transactions(
            build_transaction_filter(resolved_filters, statuses=statuses)
        )
        lookups = load_lookups(self._ledger_gateway)
        selected = filter_transactions(transactions, resolved_filters, lookups)
        register = build_bank_register(selected, lookups)
        self._logger.info(
            f"Bank register built from {len(selected)} transactions: "
            f"ending balance={register.ending_balance}"
        )
        return register


class GetCheckRegisterUseCase:
    """List transactions paid by check."""

    def __init__(
        self,
        ledger_gateway: LedgerGatewayPort,
        logger=None,
    ) -> None:
        self._ledger_gateway = ledger_gateway
        self._logger = logger or get_app_logger()

    def execute(self, filters: ReportFilters | None = None) -> list[CheckEntry]:
        """Return check lines; ``status`` keeps one clearing status."""
        resolved_filters = filters or ReportFilters()
        transactions = self._ledger_gateway.list_transactions(
            build_transaction_filter(
                resolved_filters,
                payment_method="check",
            )
        )
        lookups = load_lookups(self._ledger_gateway)
        selected = filter_transactions(transactions, resolved_filters, lookups)
        entries = build_check_register(selected, lookups)
        status = resolved_filters.status
        if status and status != "all":
            entries = [entry for entry in entries if entry.status == status]
        self._logger.info(f"Check register built with {len(entries)} checks")
        return entries


__all__ = [
    "GetBankRegisterUseCase",
    "GetCheckRegisterUseCase",
    "BankRegister",
    "CheckEntry",
]
