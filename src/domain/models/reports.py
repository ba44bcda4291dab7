"""Domain models for aging reports and financial statements."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class AgingClassification:
    """Aging of a single due date relative to a reference day.

    Attributes:
        days_overdue: Whole days past due; negative when not yet due.
        bucket: One of ``0-30``, ``31-60``, ``61-90``, ``90+``.
        is_current: True when the item is not past due.
    """

    days_overdue: int
    bucket: str
    is_current: bool


@dataclass(frozen=True)
class AgingEntry:
    """One open receivable or payable line.

    Attributes:
        source_transaction_id: Ledger transaction the entry comes from.
        amount_due: Outstanding amount (the full transaction amount).
        original_amount: Amount as booked.
        due_date: Resolved due date (due date or creation date).
        days_overdue: Days past due, clamped at zero.
        aging_bucket: Bucket label from the classifier.
        status: ``current`` or ``overdue``.
        counterparty_name: Tenant (receivables) or vendor (payables).
        priority: Payables urgency, None for receivables.
        reference_number: Invoice reference for payables.
    """

    source_transaction_id: str
    amount_due: Decimal
    original_amount: Decimal
    due_date: date
    days_overdue: int
    aging_bucket: str
    status: str
    property_id: str | None
    property_name: str
    unit_name: str
    counterparty_name: str
    description: str
    category_name: str | None = None
    priority: str | None = None
    reference_number: str | None = None


@dataclass(frozen=True)
class AgingTotals:
    """Totals of an aging report.

    Attributes:
        total: Sum of all amounts due.
        current: Portion not yet past due.
        overdue: Portion past due.
        buckets: Amount per aging bucket; every label is present.
        high_priority: Amount of high priority payables.
    """

    total: Decimal
    current: Decimal
    overdue: Decimal
    buckets: dict[str, Decimal]
    high_priority: Decimal = Decimal("0")

    def as_dict(self) -> dict[str, Decimal]:
        """Return a flat mapping of totals keyed by label."""
        flat = {
            "total": self.total,
            "current": self.current,
            "overdue": self.overdue,
        }
        flat.update(self.buckets)
        return flat


@dataclass(frozen=True)
class AgingReport:
    """Aging entries with their totals."""

    as_of: date
    entries: list[AgingEntry]
    totals: AgingTotals


@dataclass(frozen=True)
class IncomeStatement:
    """Income and expense totals for a period."""

    rental_income: Decimal
    other_income: Decimal
    total_income: Decimal
    maintenance: Decimal
    utilities: Decimal
    insurance: Decimal
    property_management: Decimal
    other_expenses: Decimal
    total_expenses: Decimal
    net_income: Decimal


@dataclass(frozen=True)
class BalanceSheetAssumptions:
    """Figures the ledger does not record, supplied by configuration.

    Attributes:
        security_deposits: Deposits held, reported as a current asset.
        tenant_deposits: Deposits owed back, reported as a liability.
        equipment: Equipment value, reported as a fixed asset.
        accrued_expenses: Accrued expenses liability.
        loans: Other long term loans.
        default_property_value: Value used when a property has no
            purchase price.
        mortgage_loan_to_value: Share of property value owed as mortgage.
    """

    security_deposits: Decimal
    tenant_deposits: Decimal
    equipment: Decimal
    accrued_expenses: Decimal
    loans: Decimal
    default_property_value: Decimal
    mortgage_loan_to_value: Decimal


@dataclass(frozen=True)
class CurrentAssets:
    cash: Decimal
    accounts_receivable: Decimal
    security_deposits: Decimal
    total_current_assets: Decimal


@dataclass(frozen=True)
class FixedAssets:
    property_value: Decimal
    equipment: Decimal
    total_fixed_assets: Decimal


@dataclass(frozen=True)
class Assets:
    current_assets: CurrentAssets
    fixed_assets: FixedAssets
    total_assets: Decimal


@dataclass(frozen=True)
class CurrentLiabilities:
    accounts_payable: Decimal
    tenant_deposits: Decimal
    accrued_expenses: Decimal
    total_current_liabilities: Decimal


@dataclass(frozen=True)
class LongTermLiabilities:
    mortgages: Decimal
    loans: Decimal
    total_long_term_liabilities: Decimal


@dataclass(frozen=True)
class Liabilities:
    current_liabilities: CurrentLiabilities
    long_term_liabilities: LongTermLiabilities
    total_liabilities: Decimal


@dataclass(frozen=True)
class Equity:
    owner_equity: Decimal
    retained_earnings: Decimal
    total_equity: Decimal


@dataclass(frozen=True)
class BalanceSheet:
    """Point-in-time balance sheet."""

    as_of: date
    assets: Assets
    liabilities: Liabilities
    equity: Equity

    @property
    def is_balanced(self) -> bool:
        """Return True when assets equal liabilities plus equity."""
        return self.assets.total_assets == (
            self.liabilities.total_liabilities + self.equity.total_equity
        )


@dataclass(frozen=True)
class FinancialSummary:
    """Headline ledger figures grouped by status and type."""

    outstanding: Decimal
    paid: Decimal
    overdue: Decimal
    total_income: Decimal
    total_expenses: Decimal
    net_income: Decimal


__all__ = [
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
]
