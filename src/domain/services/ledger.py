"""Ledger-wide summaries and transaction registers."""

import re
from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import UNKNOWN_PROPERTY, UNKNOWN_VENDOR
from src.domain.models.ledger import LedgerLookups, Transaction
from src.domain.models.reports import FinancialSummary
from src.domain.models.rental import BankRegister, CheckEntry, RegisterEntry
from src.domain.services.aging import resolve_due_date
from src.utils.date_utils import coerce_date
from src.utils.decimal_utils import coerce_decimal


def compute_financial_summary(
    transactions: Iterable[Transaction],
) -> FinancialSummary:
    """Summarize transactions by settlement status and by type.

    Args:
        transactions: Transactions in scope.

    Returns:
        FinancialSummary: Outstanding, paid and overdue amounts along with
        income, expenses and net income.
    """
    outstanding = Decimal("0")
    paid = Decimal("0")
    overdue = Decimal("0")
    total_income = Decimal("0")
    total_expenses = Decimal("0")
    for transaction in transactions:
        amount = coerce_decimal(transaction.amount)
        if transaction.status == "paid":
            paid += amount
        elif transaction.status == "overdue":
            overdue += amount
        else:
            outstanding += amount
        if transaction.is_income:
            total_income += amount
        else:
            total_expenses += amount
    return FinancialSummary(
        outstanding=outstanding,
        paid=paid,
        overdue=overdue,
        total_income=total_income,
        total_expenses=total_expenses,
        net_income=total_income - total_expenses,
    )


def _property_name(transaction: Transaction, lookups: LedgerLookups) -> str:
    record = lookups.properties.get(transaction.property_id or "")
    return record.name if record else UNKNOWN_PROPERTY


def build_bank_register(
    transactions: Iterable[Transaction],
    lookups: LedgerLookups | None = None,
) -> BankRegister:
    """Build a register with a running balance.

    The balance accumulates oldest first (income adds, expenses subtract);
    entries are returned newest first.

    Args:
        transactions: Transactions in scope.
        lookups: Optional display lookups.

    Returns:
        BankRegister: Entries and totals.
    """
    resolved_lookups = lookups or LedgerLookups.empty()
    dated = sorted(
        ((resolve_due_date(item), item) for item in transactions),
        key=lambda pair: (pair[0], pair[1].id),
    )
    running_balance = Decimal("0")
    total_income = Decimal("0")
    total_expenses = Decimal("0")
    entries: list[RegisterEntry] = []
    for entry_date, transaction in dated:
        amount = coerce_decimal(transaction.amount)
        if transaction.is_income:
            signed_amount = amount
            total_income += amount
        else:
            signed_amount = -amount
            total_expenses += amount
        running_balance += signed_amount
        entries.append(
            RegisterEntry(
                transaction_id=transaction.id,
                entry_date=entry_date,
                type=transaction.type,
                status=transaction.status,
                amount=amount,
                signed_amount=signed_amount,
                running_balance=running_balance,
                description=transaction.description or "",
                property_name=_property_name(transaction, resolved_lookups),
                category_name=transaction.category_name,
                reference_id=transaction.reference_id,
            )
        )
    entries.reverse()
    return BankRegister(
        entries=entries,
        total_income=total_income,
        total_expenses=total_expenses,
        ending_balance=running_balance,
    )


def _check_status(transaction: Transaction) -> str:
    if transaction.status == "paid":
        return "cleared"
    if transaction.status == "cancelled":
        return "voided"
    return "pending"


def _check_payee(transaction: Transaction, lookups: LedgerLookups) -> str:
    if transaction.is_income:
        tenant = lookups.tenants.get(transaction.tenant_id or "")
        if tenant and tenant.display_name:
            return tenant.display_name
        return "Tenant"
    vendor = lookups.vendors.get(transaction.vendor_id or "")
    return vendor.name if vendor else UNKNOWN_VENDOR


_TRAILING_DIGITS = re.compile(r"(\d+)$")


def _check_number_key(check_number: str) -> tuple[int, str]:
    match = _TRAILING_DIGITS.search(check_number)
    return (int(match.group(1)) if match else -1, check_number)


def build_check_register(
    transactions: Iterable[Transaction],
    lookups: LedgerLookups | None = None,
) -> list[CheckEntry]:
    """List transactions paid by check, highest check number first.

    Check numbers compare by their trailing digits, so "999" sorts below
    "CHK-1000". Numbers without digits sort last.

    Args:
        transactions: Transactions in scope.
        lookups: Optional display lookups.

    Returns:
        list[CheckEntry]: Check lines.
    """
    resolved_lookups = lookups or LedgerLookups.empty()
    checks = [
        item
        for item in transactions
        if (item.payment_method or "").lower() == "check"
    ]
    entries = []
    for position, transaction in enumerate(checks):
        status = _check_status(transaction)
        cleared_date = None
        if status == "cleared":
            cleared_date = transaction.paid_date or coerce_date(
                transaction.created_at
            )
        entries.append(
            CheckEntry(
                transaction_id=transaction.id,
                check_number=(
                    transaction.reference_id or f"CHK-{1000 + position:04d}"
                ),
                check_date=resolve_due_date(transaction),
                payee=_check_payee(transaction, resolved_lookups),
                amount=coerce_decimal(transaction.amount),
                type=transaction.type,
                status=status,
                cleared_date=cleared_date,
                property_name=_property_name(transaction, resolved_lookups),
                description=transaction.description or "Check payment",
            )
        )
    return sorted(
        entries,
        key=lambda entry: (
            _check_number_key(entry.check_number),
            entry.transaction_id,
        ),
        reverse=True,
    )


__all__ = [
    "compute_financial_summary",
    "build_bank_register",
    "build_check_register",
]
