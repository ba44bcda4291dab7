"""Application use cases package."""

from .get_aging_report import (
    AgingReport,
    GetPayablesAgingUseCase,
    GetReceivablesAgingUseCase,
)
from .get_balance_sheet import BalanceSheet, GetBalanceSheetUseCase
from .get_current_tenants import GetCurrentTenantsUseCase
from .get_delinquent_tenants import GetDelinquentTenantsUseCase
from .get_financial_summary import (
    FinancialSummary,
    GetFinancialSummaryUseCase,
)
from .get_income_statement import GetIncomeStatementUseCase, IncomeStatement
from .get_leases_ending import GetLeasesEndingUseCase
from .get_rent_roll import GetRentRollUseCase, RentRoll
from .get_transaction_registers import (
    GetBankRegisterUseCase,
    GetCheckRegisterUseCase,
)
from .get_vacant_units import GetVacantUnitsUseCase
from .report_filters import ReportFilters

__all__ = [
    "AgingReport",
    "GetPayablesAgingUseCase",
    "GetReceivablesAgingUseCase",
    "BalanceSheet",
    "GetBalanceSheetUseCase",
    "GetCurrentTenantsUseCase",
    "GetDelinquentTenantsUseCase",
    "FinancialSummary",
    "GetFinancialSummaryUseCase",
    "GetIncomeStatementUseCase",
    "IncomeStatement",
    "GetLeasesEndingUseCase",
    "GetRentRollUseCase",
    "RentRoll",
    "GetBankRegisterUseCase",
    "GetCheckRegisterUseCase",
    "GetVacantUnitsUseCase",
    "ReportFilters",
]
