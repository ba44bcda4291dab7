"""Use case to summarize ledger activity."""

from src.application.ports.ledger_gateway import LedgerGatewayPort
from src.application.use_cases.report_filters import (
    ReportFilters,
    build_transaction_filter,
    filter_transactions,
    load_lookups,
)
from src.domain.models import FinancialSummary
from src.domain.services.ledger import compute_financial_summary
from src.domain.services.validation import validate_transaction_amount
from src.infrastructure.logging.logger import get_app_logger


class GetFinancialSummaryUseCase:
    """Compute outstanding, paid and overdue totals."""

    def __init__(
        self,
        ledger_gateway: LedgerGatewayPort,
        logger=None,
    ) -> None:
        self._ledger_gateway = ledger_gateway
        self._logger = logger or get_app_logger()

    def execute(self, filters: ReportFilters | None = None) -> FinancialSummary:
        """Return the financial summary for the filtered transactions."""
        resolved_filters = filters or ReportFilters()
        transactions = self._ledger_gateway.list_transactions(
            build_transaction_filter(resolved_filters)
        )
        if len(resolved_filters.property_ids) > 1 or resolved_filters.search:
            transactions = filter_transactions(
                transactions,
                resolved_filters,
                load_lookups(self._ledger_gateway),
            )
        for transaction in transactions:
            validate_transaction_amount(transaction, self._logger)
        summary = compute_financial_summary(transactions)
        self._logger.info(
            f"Financial summary computed from {len(transactions)} "
            f"transactions: net={summary.net_income}"
        )
        return summary


__all__ = ["GetFinancialSummaryUseCase", "FinancialSummary"]
