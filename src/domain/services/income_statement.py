"""Income statement classification and aggregation."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    DEFAULT_EXPENSE_RULES,
    EXPENSE_BUCKETS,
    OTHER_EXPENSES_BUCKET,
    RENTAL_INCOME_KEYWORD,
    RENTAL_INCOME_SUBTYPE,
)
from src.domain.models.ledger import Transaction
from src.domain.models.reports import IncomeStatement
from src.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class ExpenseRule:
    """Expense bucket matched by keywords in the category name.

    Attributes:
        bucket: IncomeStatement field receiving matching expenses.
        keywords: Substrings searched in the category name, stored
            lowercase.

    Raises:
        ValueError: If the bucket is not an income statement expense line.
    """

    bucket: str
    keywords: tuple[str, ...]

    def __post_init__(self) -> None:
        if self.bucket not in EXPENSE_BUCKETS:
            raise ValueError(f"Unknown expense bucket: {self.bucket}")
        object.__setattr__(
            self,
            "keywords",
            tuple(keyword.lower() for keyword in self.keywords),
        )

    def matches(self, category_name: str) -> bool:
        lowered = category_name.lower()
        return any(keyword in lowered for keyword in self.keywords)


DEFAULT_RULES = tuple(
    ExpenseRule(bucket=bucket, keywords=keywords)
    for bucket, keywords in DEFAULT_EXPENSE_RULES
)


def is_rental_income(transaction: Transaction) -> bool:
    """Return True when an income transaction counts as rent.

    Args:
        transaction: Income transaction.

    Returns:
        bool: True if the category mentions rent or the subtype is a
        payment.
    """
    category = (transaction.category_name or "").lower()
    return (
        RENTAL_INCOME_KEYWORD in category
        or transaction.subtype == RENTAL_INCOME_SUBTYPE
    )


def classify_expense(
    category_name: str | None,
    rules: Sequence[ExpenseRule] = DEFAULT_RULES,
    logger: Logger | None = None,
) -> str:
    """Return the expense bucket for a category name.

    Rules are evaluated in order and the first match wins. A category that
    matches several rules is reported as a warning.

    Args:
        category_name: Category of the expense, if any.
        rules: Ordered expense rules.
        logger: Optional logger for ambiguity warnings.

    Returns:
        str: Bucket name, ``other_expenses`` when nothing matches.
    """
    if not category_name:
        return OTHER_EXPENSES_BUCKET
    matched = [rule.bucket for rule in rules if rule.matches(category_name)]
    if not matched:
        return OTHER_EXPENSES_BUCKET
    if len(matched) > 1 and logger is not None:
        logger.warning(
            f"Category '{category_name}' matches {matched}; "
            f"counting it as {matched[0]}"
        )
    return matched[0]


def compute_income_statement(
    transactions: Iterable[Transaction],
    rules: Sequence[ExpenseRule] = DEFAULT_RULES,
    logger: Logger | None = None,
) -> IncomeStatement:
    """Aggregate transactions into an income statement.

    Args:
        transactions: Transactions already filtered by property and period.
        rules: Ordered expense rules.
        logger: Optional logger for ambiguity warnings.

    Returns:
        IncomeStatement: Income, expense buckets and net income.
    """
    rental_income = Decimal("0")
    other_income = Decimal("0")
    expenses = {bucket: Decimal("0") for bucket in EXPENSE_BUCKETS}
    for transaction in transactions:
        amount = coerce_decimal(transaction.amount)
        if transaction.is_income:
            if is_rental_income(transaction):
                rental_income += amount
            else:
                other_income += amount
        elif transaction.is_expense:
            bucket = classify_expense(
                transaction.category_name,
                rules=rules,
                logger=logger,
            )
            expenses[bucket] += amount

    total_income = rental_income + other_income
    total_expenses = sum(
        (expenses[bucket] for bucket in EXPENSE_BUCKETS),
        start=Decimal("0"),
    )
    return IncomeStatement(
        rental_income=rental_income,
        other_income=other_income,
        total_income=total_income,
        maintenance=expenses["maintenance"],
        utilities=expenses["utilities"],
        insurance=expenses["insurance"],
        property_management=expenses["property_management"],
        other_expenses=expenses[OTHER_EXPENSES_BUCKET],
        total_expenses=total_expenses,
        net_income=total_income - total_expenses,
    )


__all__ = [
    "ExpenseRule",
    "DEFAULT_RULES",
    "is_rental_income",
    "classify_expense",
    "compute_income_statement",
]
