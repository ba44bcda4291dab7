"""Domain services package."""

from .aging import build_aging_report, classify_aging, resolve_due_date
from .balance_sheet import compute_balance_sheet
from .income_statement import (
    ExpenseRule,
    classify_expense,
    compute_income_statement,
    is_rental_income,
)
from .ledger import (
    build_bank_register,
    build_check_register,
    compute_financial_summary,
)
from .rental import (
    build_rent_roll,
    find_delinquent_tenants,
    find_leases_ending,
    find_vacant_units,
    list_current_tenants,
)
from .validation import validate_balance_sheet, validate_transaction_amount

__all__ = [
    "build_aging_report",
    "classify_aging",
    "resolve_due_date",
    "compute_balance_sheet",
    "ExpenseRule",
    "classify_expense",
    "compute_income_statement",
    "is_rental_income",
    "build_bank_register",
    "build_check_register",
    "compute_financial_summary",
    "build_rent_roll",
    "find_delinquent_tenants",
    "find_leases_ending",
    "find_vacant_units",
    "list_current_tenants",
    "validate_balance_sheet",
    "validate_transaction_amount",
]
