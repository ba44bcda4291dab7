"""Domain validation helpers."""

from logging import Logger

from src.domain.constants import TRANSACTION_TYPES
from src.domain.models.ledger import Transaction
from src.domain.models.reports import BalanceSheet


def validate_transaction_amount(
    transaction: Transaction,
    logger: Logger,
) -> None:
    """Warn when a transaction violates ledger sign conventions.

    Args:
        transaction: Ledger transaction to check.
        logger: Logger used for warnings.
    """
    if transaction.amount < 0:
        logger.warning(
            f"Negative amount for transaction={transaction.id}: "
            f"{transaction.amount}"
        )
    if transaction.type not in TRANSACTION_TYPES:
        logger.warning(
            f"Unknown type for transaction={transaction.id}: "
            f"{transaction.type}"
        )


def validate_balance_sheet(sheet: BalanceSheet, logger: Logger) -> None:
    """Warn when assets differ from liabilities plus equity.

    Args:
        sheet: Computed balance sheet.
        logger: Logger used for warnings.
    """
    if not sheet.is_balanced:
        logger.warning(
            "Balance sheet does not balance: "
            f"assets={sheet.assets.total_assets}, "
            f"liabilities={sheet.liabilities.total_liabilities}, "
            f"equity={sheet.equity.total_equity}"
        )


__all__ = ["validate_transaction_amount", "validate_balance_sheet"]
