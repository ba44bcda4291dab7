"""Balance sheet derivation from ledger transactions."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_ACCRUED_EXPENSES,
    DEFAULT_EQUIPMENT_VALUE,
    DEFAULT_LOANS,
    DEFAULT_MORTGAGE_LTV,
    DEFAULT_PROPERTY_VALUE,
    DEFAULT_SECURITY_DEPOSITS,
)
from src.domain.models.ledger import PropertyRecord, Transaction
from src.domain.models.reports import (
    Assets,
    BalanceSheet,
    BalanceSheetAssumptions,
    CurrentAssets,
    CurrentLiabilities,
    Equity,
    FixedAssets,
    Liabilities,
    LongTermLiabilities,
)
from src.utils.decimal_utils import coerce_decimal


def default_balance_sheet_assumptions() -> BalanceSheetAssumptions:
    """Return placeholder figures used when none are configured."""
    return BalanceSheetAssumptions(
        security_deposits=DEFAULT_SECURITY_DEPOSITS,
        tenant_deposits=DEFAULT_SECURITY_DEPOSITS,
        equipment=DEFAULT_EQUIPMENT_VALUE,
        accrued_expenses=DEFAULT_ACCRUED_EXPENSES,
        loans=DEFAULT_LOANS,
        default_property_value=DEFAULT_PROPERTY_VALUE,
        mortgage_loan_to_value=DEFAULT_MORTGAGE_LTV,
    )


def compute_property_value(
    properties: Iterable[PropertyRecord],
    default_value: Decimal,
) -> Decimal:
    """Sum purchase prices, substituting a default when missing."""
    total = Decimal("0")
    for record in properties:
        if record.purchase_price:
            total += coerce_decimal(record.purchase_price)
        else:
            total += default_value
    return total


def compute_balance_sheet(
    transactions: Iterable[Transaction],
    properties: Iterable[PropertyRecord],
    assumptions: BalanceSheetAssumptions,
    as_of: date,
) -> BalanceSheet:
    """Derive a balance sheet.

    Cash and retained earnings are both the paid income less the paid
    expenses. Owner equity is the balancing figure, so assets always equal
    liabilities plus equity.

    Args:
        transactions: Transactions in scope for the sheet.
        properties: Properties in scope, valued at purchase price.
        assumptions: Figures not recorded in the ledger.
        as_of: Reporting date.

    Returns:
        BalanceSheet: Nested assets, liabilities and equity.
    """
    paid_income = Decimal("0")
    paid_expenses = Decimal("0")
    receivable = Decimal("0")
    payable = Decimal("0")
    for transaction in transactions:
        amount = coerce_decimal(transaction.amount)
        if transaction.is_income:
            if transaction.status == "paid":
                paid_income += amount
            elif transaction.status == "pending":
                receivable += amount
        elif transaction.is_expense:
            if transaction.status == "paid":
                paid_expenses += amount
            elif transaction.status == "pending":
                payable += amount

    cash = paid_income - paid_expenses
    current_assets = CurrentAssets(
        cash=cash,
        accounts_receivable=receivable,
        security_deposits=assumptions.security_deposits,
        total_current_assets=(
            cash + receivable + assumptions.security_deposits
        ),
    )
    property_value = compute_property_value(
        properties,
        assumptions.default_property_value,
    )
    fixed_assets = FixedAssets(
        property_value=property_value,
        equipment=assumptions.equipment,
        total_fixed_assets=property_value + assumptions.equipment,
    )
    assets = Assets(
        current_assets=current_assets,
        fixed_assets=fixed_assets,
        total_assets=(
            current_assets.total_current_assets
            + fixed_assets.total_fixed_assets
        ),
    )

    current_liabilities = CurrentLiabilities(
        accounts_payable=payable,
        tenant_deposits=assumptions.tenant_deposits,
        accrued_expenses=assumptions.accrued_expenses,
        total_current_liabilities=(
            payable
            + assumptions.tenant_deposits
            + assumptions.accrued_expenses
        ),
    )
    mortgages = property_value * assumptions.mortgage_loan_to_value
    long_term_liabilities = LongTermLiabilities(
        mortgages=mortgages,
        loans=assumptions.loans,
        total_long_term_liabilities=mortgages + assumptions.loans,
    )
    liabilities = Liabilities(
        current_liabilities=current_liabilities,
        long_term_liabilities=long_term_liabilities,
        total_liabilities=(
            current_liabilities.total_current_liabilities
            + long_term_liabilities.total_long_term_liabilities
        ),
    )

    retained_earnings = paid_income - paid_expenses
    owner_equity = (
        assets.total_assets - liabilities.total_liabilities - retained_earnings
    )
    equity = Equity(
        owner_equity=owner_equity,
        retained_earnings=retained_earnings,
        total_equity=owner_equity + retained_earnings,
    )
    return BalanceSheet(
        as_of=as_of,
        assets=assets,
        liabilities=liabilities,
        equity=equity,
    )


__all__ = [
    "default_balance_sheet_assumptions",
    "compute_property_value",
    "compute_balance_sheet",
]
