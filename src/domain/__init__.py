"""Domain package for ledger reporting rules and core models."""

from .constants import AGING_BUCKETS, DEFAULT_EXPENSE_RULES
from .errors import LedgerError, MissingDateError, UpstreamFetchError
from .models import (
    AgingEntry,
    AgingReport,
    AgingTotals,
    BalanceSheet,
    BalanceSheetAssumptions,
    FinancialSummary,
    IncomeStatement,
    Transaction,
    TransactionFilter,
)
from .services import (
    build_aging_report,
    classify_aging,
    compute_balance_sheet,
    compute_income_statement,
    resolve_due_date,
)

__all__ = [
    "AGING_BUCKETS",
    "DEFAULT_EXPENSE_RULES",
    "LedgerError",
    "MissingDateError",
    "UpstreamFetchError",
    "AgingEntry",
    "AgingReport",
    "AgingTotals",
    "BalanceSheet",
    "BalanceSheetAssumptions",
    "FinancialSummary",
    "IncomeStatement",
    "Transaction",
    "TransactionFilter",
    "build_aging_report",
    "classify_aging",
    "compute_balance_sheet",
    "compute_income_statement",
    "resolve_due_date",
]
