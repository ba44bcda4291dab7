"""Use case to compute the income statement for a period."""

from collections.abc import Sequence

from src.application.ports.ledger_gateway import LedgerGatewayPort
from src.application.use_cases.report_filters import (
    ReportFilters,
    build_transaction_filter,
    filter_transactions,
    load_lookups,
)
from src.domain.models import IncomeStatement
from src.domain.services.income_statement import (
    DEFAULT_RULES,
    ExpenseRule,
    compute_income_statement,
)
from src.domain.services.validation import validate_transaction_amount
from src.infrastructure.logging.logger import get_app_logger


class GetIncomeStatementUseCase:
    """Classify ledger transactions into income and expense buckets."""

    def __init__(
        self,
        ledger_gateway: LedgerGatewayPort,
        logger=None,
        expense_rules: Sequence[ExpenseRule] = DEFAULT_RULES,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_gateway: Port providing ledger transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            expense_rules: Ordered keyword rules for expense buckets.
        """
        self._ledger_gateway = ledger_gateway
        self._logger = logger or get_app_logger()
        self._expense_rules = tuple(expense_rules)

    def execute(self, filters: ReportFilters | None = None) -> IncomeStatement:
        """Return the income statement for the filtered transactions.

        Args:
            filters: Optional property, period and status filters. Every
                status is included unless ``status`` is set.

        Returns:
            IncomeStatement: Income, expenses and net income.
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
        if len(resolved_filters.property_ids) > 1 or resolved_filters.search:
            transactions = filter_transactions(
                transactions,
                resolved_filters,
                load_lookups(self._ledger_gateway),
            )
        self._logger.info(
            f"Fetched {len(transactions)} transactions for income statement"
        )
        for transaction in transactions:
            validate_transaction_amount(transaction, self._logger)
        statement = compute_income_statement(
            transactions,
            rules=self._expense_rules,
            logger=self._logger,
        )
        self._logger.info(
            f"Income statement computed: income={statement.total_income}, "
            f"expenses={statement.total_expenses}, "
            f"net={statement.net_income}"
        )
        return statement


__all__ = ["GetIncomeStatementUseCase", "IncomeStatement"]
