"""CLI adapter printing ledger reports.

The report name is the first command-line argument. Filters come from
environment variables: ``REPORT_PROPERTY_ID``, ``REPORT_START_DATE``,
``REPORT_END_DATE`` and ``REPORT_AS_OF`` (dates as YYYY-MM-DD).
"""

from datetime import date
import os
import sys

from src.application.use_cases.get_aging_report import (
    GetPayablesAgingUseCase,
    GetReceivablesAgingUseCase,
)
from src.application.use_cases.get_delinquent_tenants import (
    GetDelinquentTenantsUseCase,
)
from src.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from src.application.use_cases.get_income_statement import (
    GetIncomeStatementUseCase,
)
from src.application.use_cases.get_rent_roll import GetRentRollUseCase
from src.application.use_cases.get_vacant_units import GetVacantUnitsUseCase
from src.application.use_cases.report_filters import ReportFilters
from src.domain.errors import LedgerError
from src.infrastructure.container import (
    build_balance_sheet_use_case,
    build_leases_ending_use_case,
    build_ledger_gateway,
)
from src.infrastructure.logging.logger import get_app_logger

REPORT_NAMES = (
    "receivables",
    "payables",
    "income-statement",
    "balance-sheet",
    "summary",
    "delinquent-tenants",
    "leases-ending",
    "vacant-units",
    "rent-roll",
)


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _filters_from_env(logger) -> ReportFilters:
    property_id = os.getenv("REPORT_PROPERTY_ID", "").strip()
    return ReportFilters(
        property_ids=(property_id,) if property_id else (),
        date_from=_parse_date(os.getenv("REPORT_START_DATE"), logger),
        date_to=_parse_date(os.getenv("REPORT_END_DATE"), logger),
    )


def _print_aging(title: str, report) -> None:
    totals = report.totals
    print(f"{title} as of {report.as_of}: {len(report.entries)} items")
    print(
        f"total={totals.total}, current={totals.current}, "
        f"overdue={totals.overdue}"
    )
    print(
        ", ".join(f"{label}={amount}" for label, amount in totals.buckets.items())
    )


def _run_report(name: str, filters: ReportFilters, today: date, logger) -> None:
    gateway = build_ledger_gateway()
    if name == "receivables":
        report = GetReceivablesAgingUseCase(gateway, logger=logger).execute(
            filters,
            today=today,
        )
        _print_aging("Receivables", report)
    elif name == "payables":
        report = GetPayablesAgingUseCase(gateway, logger=logger).execute(
            filters,
            today=today,
        )
        _print_aging("Payables", report)
        print(f"high_priority={report.totals.high_priority}")
    elif name == "income-statement":
        statement = GetIncomeStatementUseCase(gateway, logger=logger).execute(
            filters
        )
        print(
            f"Income statement: rental={statement.rental_income}, "
            f"other={statement.other_income}, "
            f"total_income={statement.total_income}"
        )
        print(
            f"maintenance={statement.maintenance}, "
            f"utilities={statement.utilities}, "
            f"insurance={statement.insurance}, "
            f"property_management={statement.property_management}, "
            f"other_expenses={statement.other_expenses}, "
            f"total_expenses={statement.total_expenses}"
        )
        print(f"net_income={statement.net_income}")
    elif name == "balance-sheet":
        sheet = build_balance_sheet_use_case(gateway).execute(
            filters,
            today=today,
        )
        print(
            f"Balance sheet as of {sheet.as_of}: "
            f"assets={sheet.assets.total_assets}, "
            f"liabilities={sheet.liabilities.total_liabilities}, "
            f"equity={sheet.equity.total_equity}"
        )
    elif name == "summary":
        summary = GetFinancialSummaryUseCase(gateway, logger=logger).execute(
            filters
        )
        print(
            f"Summary: outstanding={summary.outstanding}, "
            f"paid={summary.paid}, overdue={summary.overdue}, "
            f"net_income={summary.net_income}"
        )
    elif name == "delinquent-tenants":
        entries = GetDelinquentTenantsUseCase(gateway, logger=logger).execute(
            filters,
            today=today,
        )
        print(f"Delinquent tenants: {len(entries)}")
        for entry in entries:
            print(
                f"{entry.tenant_name} ({entry.property_name} {entry.unit_name}): "
                f"balance={entry.total_balance}, days={entry.days_overdue}, "
                f"status={entry.status}"
            )
    elif name == "leases-ending":
        entries = build_leases_ending_use_case(gateway).execute(
            filters,
            today=today,
        )
        print(f"Leases ending: {len(entries)}")
        for entry in entries:
            print(
                f"{entry.tenant_name} ({entry.property_name} {entry.unit_name}): "
                f"ends {entry.lease_end}, urgency={entry.urgency}"
            )
    elif name == "vacant-units":
        entries = GetVacantUnitsUseCase(gateway, logger=logger).execute(
            filters,
            today=today,
        )
        print(f"Vacant units: {len(entries)}")
        for entry in entries:
            print(
                f"{entry.property_name} {entry.unit_name}: "
                f"days={entry.days_vacant}, loss={entry.estimated_loss:.2f}"
            )
    elif name == "rent-roll":
        rent_roll = GetRentRollUseCase(gateway, logger=logger).execute(
            filters,
            today=today,
        )
        print(
            f"Rent roll: {len(rent_roll.entries)} units, "
            f"{rent_roll.occupied_units} occupied, "
            f"current_rent={rent_roll.totals.current_rent}, "
            f"balance_due={rent_roll.totals.balance_due}"
        )


def main(argv: list[str] | None = None) -> int:
    """Run one report and print its totals.

    Args:
        argv: Command-line arguments; defaults to ``sys.argv[1:]``.

    Returns:
        int: Process exit status.
    """
    logger = get_app_logger()
    args = sys.argv[1:] if argv is None else argv
    if not args or args[0] not in REPORT_NAMES:
        print(f"Usage: report_cli <{'|'.join(REPORT_NAMES)}>")
        return 2
    filters = _filters_from_env(logger)
    today = _parse_date(os.getenv("REPORT_AS_OF"), logger) or date.today()
    try:
        _run_report(args[0], filters, today, logger)
    except LedgerError as exc:
        logger.error(f"Report {args[0]} failed: {exc}")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
