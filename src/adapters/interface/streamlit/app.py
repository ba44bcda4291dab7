"""Streamlit entry point for the ledger reports."""

from collections.abc import Sequence
from dataclasses import asdict
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.use_cases.get_aging_report import (
    AgingReport,
    GetPayablesAgingUseCase,
    GetReceivablesAgingUseCase,
)
from src.application.use_cases.get_delinquent_tenants import (
    GetDelinquentTenantsUseCase,
)
from src.application.use_cases.get_financial_summary import (
    FinancialSummary,
    GetFinancialSummaryUseCase,
)
from src.application.use_cases.get_income_statement import (
    GetIncomeStatementUseCase,
    IncomeStatement,
)
from src.application.use_cases.get_rent_roll import GetRentRollUseCase, RentRoll
from src.application.use_cases.get_transaction_registers import (
    BankRegister,
    CheckEntry,
    GetBankRegisterUseCase,
    GetCheckRegisterUseCase,
)
from src.application.use_cases.get_vacant_units import GetVacantUnitsUseCase
from src.application.use_cases.report_filters import ReportFilters
from src.domain.constants import AGING_BUCKETS
from src.domain.models import (
    BalanceSheet,
    CurrentTenantEntry,
    DelinquentTenantEntry,
    LeaseExpiryEntry,
    PropertyRecord,
    VacantUnitEntry,
)
from src.infrastructure.container import (
    build_balance_sheet_use_case,
    build_current_tenants_use_case,
    build_leases_ending_use_case,
    build_ledger_gateway,
    build_report_settings,
)
from src.infrastructure.logging.logger import get_usage_logger

PAGES = [
    "Summary",
    "Accounts Receivable",
    "Unpaid Bills",
    "Income Statement",
    "Balance Sheet",
    "Rental",
    "Registers",
]


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Return whether numpy and pandas are usable by Altair."""
    import numpy
    import pandas

    if not hasattr(numpy, "ndarray"):
        return False, "numpy is installed but incomplete (missing ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas is installed but incomplete (missing Timestamp)."
    return True, None


def _fetch_properties() -> Sequence[PropertyRecord]:
    """Fetch properties for the sidebar filter."""
    return build_ledger_gateway().list_properties()


@st.cache_data(show_spinner=False)
def _load_properties() -> Sequence[PropertyRecord]:
    """Cached wrapper around _fetch_properties for Streamlit sessions."""
    return _fetch_properties()


def _fetch_financial_summary(filters: ReportFilters) -> FinancialSummary:
    """Fetch the financial summary."""
    use_case = GetFinancialSummaryUseCase(build_ledger_gateway())
    return use_case.execute(filters)


@st.cache_data(show_spinner=False)
def _load_financial_summary(filters: ReportFilters) -> FinancialSummary:
    """Cached wrapper around _fetch_financial_summary."""
    return _fetch_financial_summary(filters)


def _fetch_aging_report(
    kind: str,
    filters: ReportFilters,
    today: date,
) -> AgingReport:
    """Fetch the receivables or payables aging report."""
    gateway = build_ledger_gateway()
    if kind == "payables":
        use_case = GetPayablesAgingUseCase(gateway)
    else:
        use_case = GetReceivablesAgingUseCase(gateway)
    return use_case.execute(filters, today=today)


@st.cache_data(show_spinner=False)
def _load_aging_report(
    kind: str,
    filters: ReportFilters,
    today: date,
) -> AgingReport:
    """Cached wrapper around _fetch_aging_report."""
    return _fetch_aging_report(kind, filters, today)


def _fetch_income_statement(filters: ReportFilters) -> IncomeStatement:
    """Fetch the income statement."""
    use_case = GetIncomeStatementUseCase(build_ledger_gateway())
    return use_case.execute(filters)


@st.cache_data(show_spinner=False)
def _load_income_statement(filters: ReportFilters) -> IncomeStatement:
    """Cached wrapper around _fetch_income_statement."""
    return _fetch_income_statement(filters)


def _fetch_balance_sheet(filters: ReportFilters, today: date) -> BalanceSheet:
    """Fetch the balance sheet with configured assumptions."""
    return build_balance_sheet_use_case().execute(filters, today=today)


@st.cache_data(show_spinner=False)
def _load_balance_sheet(filters: ReportFilters, today: date) -> BalanceSheet:
    """Cached wrapper around _fetch_balance_sheet."""
    return _fetch_balance_sheet(filters, today)


def _fetch_rental_reports(
    filters: ReportFilters,
    today: date,
) -> tuple[
    list[DelinquentTenantEntry],
    list[LeaseExpiryEntry],
    list[CurrentTenantEntry],
    list[VacantUnitEntry],
    RentRoll,
]:
    """Fetch the rental operations reports."""
    gateway = build_ledger_gateway()
    return (
        GetDelinquentTenantsUseCase(gateway).execute(filters, today=today),
        build_leases_ending_use_case(gateway).execute(filters, today=today),
        build_current_tenants_use_case(gateway).execute(filters, today=today),
        GetVacantUnitsUseCase(gateway).execute(filters, today=today),
        GetRentRollUseCase(gateway).execute(filters, today=today),
    )


@st.cache_data(show_spinner=False)
def _load_rental_reports(filters: ReportFilters, today: date):
    """Cached wrapper around _fetch_rental_reports."""
    return _fetch_rental_reports(filters, today)


def _fetch_registers(
    filters: ReportFilters,
) -> tuple[BankRegister, list[CheckEntry]]:
    """Fetch the bank and check registers."""
    gateway = build_ledger_gateway()
    return (
        GetBankRegisterUseCase(gateway).execute(filters),
        GetCheckRegisterUseCase(gateway).execute(filters),
    )


@st.cache_data(show_spinner=False)
def _load_registers(filters: ReportFilters):
    """Cached wrapper around _fetch_registers."""
    return _fetch_registers(filters)


@st.cache_data(show_spinner=False)
def _load_currency() -> str:
    """Currency code from report settings."""
    return build_report_settings().currency


def _format_currency(value: Decimal, currency_code: str = "USD") -> str:
    """Format currency values for display."""
    if currency_code == "USD":
        sign = "-" if value < 0 else ""
        return f"{sign}${abs(value):,.2f}"
    return f"{value:,.2f} {currency_code}"


def _get_period_start(
    period: str,
    today: date,
) -> date | None:
    """Return the start date for the selected period."""
    if period == "All Time":
        return None
    if period == "YTD":
        return date(today.year, 1, 1)
    if period == "MTD":
        return date(today.year, today.month, 1)
    if period == "QTD":
        quarter = (today.month - 1) // 3
        start_month = quarter * 3 + 1
        return date(today.year, start_month, 1)
    return None


def _prepare_aging_chart_data(
    report: AgingReport,
    currency_code: str = "USD",
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready rows, one per aging bucket in order.

    Args:
        report: Aging report to chart.
        currency_code: Currency used for labels.

    Returns:
        List of rows with bucket, amount, label and item count.
    """
    counts = {label: 0 for label in AGING_BUCKETS}
    for entry in report.entries:
        counts[entry.aging_bucket] += 1
    data: list[dict[str, str | float]] = []
    for label in AGING_BUCKETS:
        amount = report.totals.buckets.get(label, Decimal("0"))
        data.append(
            {
                "bucket": label,
                "amount": float(amount),
                "amount_label": _format_currency(amount, currency_code),
                "items": counts[label],
            }
        )
    return data


def _render_aging_chart(
    report: AgingReport,
    title: str,
    currency_code: str = "USD",
) -> None:
    """Render a bar chart of amounts per aging bucket."""
    if not report.entries:
        st.info("No open items to chart.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    data = _prepare_aging_chart_data(report, currency_code)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=6,
        cornerRadiusTopRight=6,
    ).encode(
        x=alt.X("bucket:N", sort=list(AGING_BUCKETS), title="Days overdue"),
        y=alt.Y("amount:Q", title="Amount"),
        color=alt.Color(
            "bucket:N",
            scale=alt.Scale(
                domain=list(AGING_BUCKETS),
                range=["#2e7d32", "#f6c453", "#f4a261", "#e76f51"],
            ),
            legend=None,
        ),
        tooltip=[
            alt.Tooltip("bucket:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("items:Q"),
        ],
    ).properties(height=320)
    st.subheader(title)
    st.altair_chart(chart, width="stretch")


def _aging_rows(report: AgingReport, currency_code: str = "USD") -> list[dict]:
    rows = []
    for entry in report.entries:
        row = {
            "Property": entry.property_name,
            "Unit": entry.unit_name,
            "Counterparty": entry.counterparty_name,
            "Description": entry.description,
            "Due": entry.due_date.isoformat(),
            "Days Overdue": entry.days_overdue,
            "Bucket": entry.aging_bucket,
            "Amount": _format_currency(entry.amount_due, currency_code),
            "Status": entry.status,
        }
        if entry.priority is not None:
            row["Priority"] = entry.priority
            row["Reference"] = entry.reference_number
        rows.append(row)
    return rows


def _render_aging_page(
    kind: str,
    filters: ReportFilters,
    today: date,
    currency_code: str,
) -> None:
    title = "Unpaid Bills" if kind == "payables" else "Accounts Receivable"
    report = _load_aging_report(kind, filters, today)
    totals = report.totals
    total_col, current_col, overdue_col = st.columns(3)
    total_col.metric("Total", _format_currency(totals.total, currency_code))
    current_col.metric(
        "Current",
        _format_currency(totals.current, currency_code),
    )
    overdue_col.metric(
        "Overdue",
        _format_currency(totals.overdue, currency_code),
    )
    _render_aging_chart(report, f"{title} by Age", currency_code)
    st.dataframe(
        _aging_rows(report, currency_code),
        width="stretch",
        hide_index=True,
    )


def _render_income_statement(
    filters: ReportFilters,
    currency_code: str,
) -> None:
    statement = _load_income_statement(filters)
    rows = [
        {"Line": "Rental Income", "Amount": statement.rental_income},
        {"Line": "Other Income", "Amount": statement.other_income},
        {"Line": "Total Income", "Amount": statement.total_income},
        {"Line": "Maintenance", "Amount": statement.maintenance},
        {"Line": "Utilities", "Amount": statement.utilities},
        {"Line": "Insurance", "Amount": statement.insurance},
        {
            "Line": "Property Management",
            "Amount": statement.property_management,
        },
        {"Line": "Other Expenses", "Amount": statement.other_expenses},
        {"Line": "Total Expenses", "Amount": statement.total_expenses},
        {"Line": "Net Income", "Amount": statement.net_income},
    ]
    data = [
        {
            "Line": row["Line"],
            "Amount": _format_currency(row["Amount"], currency_code),
        }
        for row in rows
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_balance_sheet(
    filters: ReportFilters,
    today: date,
    currency_code: str,
) -> None:
    sheet = _load_balance_sheet(filters, today)
    st.caption(f"As of {sheet.as_of.isoformat()}")
    assets_col, liabilities_col, equity_col = st.columns(3)
    assets_col.metric(
        "Assets",
        _format_currency(sheet.assets.total_assets, currency_code),
    )
    liabilities_col.metric(
        "Liabilities",
        _format_currency(sheet.liabilities.total_liabilities, currency_code),
    )
    equity_col.metric(
        "Equity",
        _format_currency(sheet.equity.total_equity, currency_code),
    )
    st.dataframe(
        _balance_sheet_rows(sheet, currency_code),
        width="stretch",
        hide_index=True,
    )


def _balance_sheet_rows(
    sheet: BalanceSheet,
    currency_code: str = "USD",
) -> list[dict[str, str]]:
    """Flatten the nested balance sheet into display rows."""
    sections = (
        ("Current Assets", sheet.assets.current_assets),
        ("Fixed Assets", sheet.assets.fixed_assets),
        ("Current Liabilities", sheet.liabilities.current_liabilities),
        ("Long-Term Liabilities", sheet.liabilities.long_term_liabilities),
        ("Equity", sheet.equity),
    )
    rows = []
    for section, values in sections:
        for name, amount in asdict(values).items():
            rows.append(
                {
                    "Section": section,
                    "Line": name.replace("_", " ").title(),
                    "Amount": _format_currency(amount, currency_code),
                }
            )
    return rows


def _render_rental(filters: ReportFilters, today: date) -> None:
    delinquent, leases, tenants, vacant, rent_roll = _load_rental_reports(
        filters,
        today,
    )
    tabs = st.tabs(
        [
            "Delinquent Tenants",
            "Leases Ending",
            "Current Tenants",
            "Vacant Units",
            "Rent Roll",
        ]
    )
    sections = (delinquent, leases, tenants, vacant, rent_roll.entries)
    for tab, entries in zip(tabs, sections):
        with tab:
            st.caption(f"{len(entries)} rows")
            st.dataframe(
                [asdict(entry) for entry in entries],
                width="stretch",
                hide_index=True,
            )


def _render_registers(filters: ReportFilters, currency_code: str) -> None:
    register, checks = _load_registers(filters)
    income_col, expense_col, balance_col = st.columns(3)
    income_col.metric(
        "Income",
        _format_currency(register.total_income, currency_code),
    )
    expense_col.metric(
        "Expenses",
        _format_currency(register.total_expenses, currency_code),
    )
    balance_col.metric(
        "Ending Balance",
        _format_currency(register.ending_balance, currency_code),
    )
    st.subheader("Bank Register")
    st.dataframe(
        [asdict(entry) for entry in register.entries],
        width="stretch",
        hide_index=True,
    )
    st.subheader("Checks")
    st.dataframe(
        [asdict(entry) for entry in checks],
        width="stretch",
        hide_index=True,
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Property Ledger Reports", layout="wide")
    st.title("Property Ledger Reports")

    page = st.sidebar.selectbox("Report", PAGES)
    period = st.sidebar.selectbox("Period", ["YTD", "MTD", "QTD", "All Time"])
    properties = _load_properties()
    names_by_id = {record.id: record.name for record in properties}
    selected = st.sidebar.multiselect(
        "Properties",
        options=list(names_by_id),
        format_func=lambda property_id: names_by_id.get(
            property_id,
            property_id,
        ),
    )
    search = st.sidebar.text_input("Search", placeholder="Type to filter")
    today = date.today()
    currency_code = _load_currency()
    filters = ReportFilters(
        property_ids=tuple(selected),
        date_from=_get_period_start(period, today),
        search=search.strip() or None,
    )
    get_usage_logger().info(f"Report viewed: {page} ({period})")

    if page == "Summary":
        summary = _load_financial_summary(filters)
        outstanding_col, paid_col, overdue_col, net_col = st.columns(4)
        outstanding_col.metric(
            "Outstanding",
            _format_currency(summary.outstanding, currency_code),
        )
        paid_col.metric("Paid", _format_currency(summary.paid, currency_code))
        overdue_col.metric(
            "Overdue",
            _format_currency(summary.overdue, currency_code),
        )
        net_col.metric(
            "Net Income",
            _format_currency(summary.net_income, currency_code),
        )
    elif page == "Accounts Receivable":
        _render_aging_page("receivables", filters, today, currency_code)
    elif page == "Unpaid Bills":
        _render_aging_page("payables", filters, today, currency_code)
    elif page == "Income Statement":
        _render_income_statement(filters, currency_code)
    elif page == "Balance Sheet":
        _render_balance_sheet(filters, today, currency_code)
    elif page == "Rental":
        _render_rental(filters, today)
    else:
        _render_registers(filters, currency_code)


if __name__ == "__main__":  # pragma: no cover
    main()
