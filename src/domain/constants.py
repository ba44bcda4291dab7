"""Domain constants for property ledger reporting."""

from decimal import Decimal

AGING_BUCKETS = ("0-30", "31-60", "61-90", "90+")

TRANSACTION_TYPES = ("income", "expense")

OPEN_STATUSES = ("pending", "overdue")

# Ordered: the first bucket whose keywords match a category wins.
DEFAULT_EXPENSE_RULES = (
    ("maintenance", ("maintenance", "repair")),
    ("utilities", ("utility", "electric", "water", "gas")),
    ("insurance", ("insurance",)),
    ("property_management", ("management", "admin")),
)

OTHER_EXPENSES_BUCKET = "other_expenses"

EXPENSE_BUCKETS = (
    "maintenance",
    "utilities",
    "insurance",
    "property_management",
    OTHER_EXPENSES_BUCKET,
)

RENTAL_INCOME_KEYWORD = "rent"
RENTAL_INCOME_SUBTYPE = "payment"

DEFAULT_SECURITY_DEPOSITS = Decimal("25000")
DEFAULT_EQUIPMENT_VALUE = Decimal("15000")
DEFAULT_ACCRUED_EXPENSES = Decimal("5000")
DEFAULT_LOANS = Decimal("50000")
DEFAULT_PROPERTY_VALUE = Decimal("500000")
DEFAULT_MORTGAGE_LTV = Decimal("0.7")

DEFAULT_LEASE_WINDOW_DAYS = 90
DEFAULT_EXPIRING_SOON_DAYS = 30

PAYABLE_HIGH_PRIORITY_DAYS = 30
PAYABLE_HIGH_PRIORITY_AMOUNT = Decimal("1000")
PAYABLE_MEDIUM_PRIORITY_DAYS = 7
PAYABLE_MEDIUM_PRIORITY_AMOUNT = Decimal("500")

UNKNOWN_PROPERTY = "Unknown Property"
UNKNOWN_TENANT = "Unknown Tenant"
UNKNOWN_VENDOR = "Unknown Vendor"
UNKNOWN_UNIT = "N/A"
NO_DESCRIPTION = "No description"


__all__ = [
    "AGING_BUCKETS",
    "TRANSACTION_TYPES",
    "OPEN_STATUSES",
    "DEFAULT_EXPENSE_RULES",
    "OTHER_EXPENSES_BUCKET",
    "EXPENSE_BUCKETS",
    "RENTAL_INCOME_KEYWORD",
    "RENTAL_INCOME_SUBTYPE",
    "DEFAULT_SECURITY_DEPOSITS",
    "DEFAULT_EQUIPMENT_VALUE",
    "DEFAULT_ACCRUED_EXPENSES",
    "DEFAULT_LOANS",
    "DEFAULT_PROPERTY_VALUE",
    "DEFAULT_MORTGAGE_LTV",
    "DEFAULT_LEASE_WINDOW_DAYS",
    "DEFAULT_EXPIRING_SOON_DAYS",
    "PAYABLE_HIGH_PRIORITY_DAYS",
    "PAYABLE_HIGH_PRIORITY_AMOUNT",
    "PAYABLE_MEDIUM_PRIORITY_DAYS",
    "PAYABLE_MEDIUM_PRIORITY_AMOUNT",
    "UNKNOWN_PROPERTY",
    "UNKNOWN_TENANT",
    "UNKNOWN_VENDOR",
    "UNKNOWN_UNIT",
    "NO_DESCRIPTION",
]
