"""Domain models package."""

from .ledger import (
    LeaseRecord,
    LedgerLookups,
    PropertyRecord,
    TenantRecord,
    Transaction,
    TransactionFilter,
    UnitRecord,
    VendorRecord,
)
from .rental import (
    BankRegister,
    CheckEntry,
    CurrentTenantEntry,
    DelinquentTenantEntry,
    LeaseExpiryEntry,
    RegisterEntry,
    RentRoll,
    RentRollEntry,
    RentRollTotals,
    VacantUnitEntry,
)
from .reports import (
    AgingClassification,
    AgingEntry,
    AgingReport,
    AgingTotals,
    Assets,
    BalanceSheet,
    BalanceSheetAssumptions,
    CurrentAssets,
    CurrentLiabilities,
    Equity,
    FinancialSummary,
    FixedAssets,
    IncomeStatement,
    Liabilities,
    LongTermLiabilities,
)

__all__ = [
    "Transaction",
    "PropertyRecord",
    "UnitRecord",
    "LeaseRecord",
    "TenantRecord",
    "VendorRecord",
    "TransactionFilter",
    "LedgerLookups",
    "AgingClassification",
    "AgingEntry",
    "AgingTotals",
    "AgingReport",
    "IncomeStatement",
    "BalanceSheetAssumptions",
    "CurrentAssets",
    "FixedAssets",
    "Assets",
    "CurrentLiabilities",
    "LongTermLiabilities",
    "Liabilities",
    "Equity",
    "BalanceSheet",
    "FinancialSummary",
    "DelinquentTenantEntry",
    "LeaseExpiryEntry",
    "CurrentTenantEntry",
    "VacantUnitEntry",
    "RentRollEntry",
    "RentRollTotals",
    "RentRoll",
    "RegisterEntry",
    "BankRegister",
    "CheckEntry",
]
