"""Use cases computing receivables and payables aging reports."""

from datetime import date

from src.application.ports.ledger_gateway import LedgerGatewayPort
from src.application.use_cases.report_filters import (
    ReportFilters,
    build_transaction_filter,
    filter_transactions,
    load_lookups,
)
from src.domain.constants import OPEN_STATUSES
from src.domain.models import AgingReport
from src.domain.services.aging import (
    PAYABLES,
    RECEIVABLES,
    build_aging_report,
    compute_aging_totals,
)
from src.infrastructure.logging.logger import get_app_logger

# "active" is the label the receivables page uses for not-yet-due items.
_ENTRY_STATUS_ALIASES = {"active": "current"}


class _AgingReportUseCase:
    """Shared flow for the receivables and payables reports."""

    _kind = RECEIVABLES
    _transaction_type = "income"

    def __init__(
        self,
        ledger_gateway: LedgerGatewayPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_gateway: Port providing ledger transactions and lookups.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_gateway = ledger_gateway
        self._logger = logger or get_app_logger()

    def execute(
        self,
        filters: ReportFilters | None = None,
        today: date | None = None,
    ) -> AgingReport:
        """Return aged open items and their totals.

        Args:
            filters: Optional report filters. ``status`` keeps only
                ``current`` (or ``active``) or ``overdue`` entries.
            today: Reference day; defaults to the current date.

        Returns:
            AgingReport: Entries most overdue first with bucketed totals.

        Raises:
            ValueError: If the status filter is not supported.
        """
        resolved_filters = filters or ReportFilters()
        as_of = today or date.today()
        entry_status = self._resolve_entry_status(resolved_filters.status)

        transactions = self._ledger_gateway.list_transactions(
            build_transaction_filter(
                resolved_filters,
                transaction_type=self._transaction_type,
                statuses=OPEN_STATUSES,
            )
        )
        lookups = load_lookups(self._ledger_gateway)
        selected = filter_transactions(transactions, resolved_filters, lookups)
        self._logger.info(
            f"Fetched {len(transactions)} open {self._transaction_type} "
            f"transactions, {len(selected)} after filters"
        )

        report = build_aging_report(
            selected,
            as_of,
            kind=self._kind,
            lookups=lookups,
            logger=self._logger,
        )
        if entry_status is not None:
            entries = [
                entry for entry in report.entries
                if entry.status == entry_status
            ]
            report = AgingReport(
                as_of=report.as_of,
                entries=entries,
                totals=compute_aging_totals(entries),
            )
        self._logger.info(
            f"{self._kind.capitalize()} aging computed: "
            f"total={report.totals.total}, current={report.totals.current}, "
            f"overdue={report.totals.overdue}"
        )
        return report

    @staticmethod
    def _resolve_entry_status(status: str | None) -> str | None:
        if not status or status == "all":
            return None
        normalized = _ENTRY_STATUS_ALIASES.get(status, status)
        if normalized not in ("current", "overdue"):
            raise ValueError(f"Unsupported aging status filter: {status}")
        return normalized


class GetReceivablesAgingUseCase(_AgingReportUseCase):
    """Age pending and overdue income owed by tenants."""

    _kind = RECEIVABLES
    _transaction_type = "income"


class GetPayablesAgingUseCase(_AgingReportUseCase):
    """Age pending and overdue bills owed to vendors."""

    _kind = PAYABLES
    _transaction_type = "expense"


__all__ = [
    "GetReceivablesAgingUseCase",
    "GetPayablesAgingUseCase",
    "AgingReport",
]
