"""Use case to derive the balance sheet."""

from datetime import date

from src.application.ports.ledger_gateway import LedgerGatewayPort
from src.application.use_cases.report_filters import (
    ReportFilters,
    build_transaction_filter,
    filter_transactions,
    load_lookups,
)
from src.domain.models import BalanceSheet, BalanceSheetAssumptions
from src.domain.services.balance_sheet import (
    compute_balance_sheet,
    default_balance_sheet_assumptions,
)
from src.domain.services.validation import (
    validate_balance_sheet,
    validate_transaction_amount,
)
from src.infrastructure.logging.logger import get_app_logger


class GetBalanceSheetUseCase:
    """Derive assets, liabilities and equity from ledger transactions."""

    def __init__(
        self,
        ledger_gateway: LedgerGatewayPort,
        logger=None,
        assumptions: BalanceSheetAssumptions | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_gateway: Port providing transactions and properties.
            logger: Optional logger compatible with logging.Logger-like API.
            assumptions: Figures not recorded in the ledger; placeholder
                defaults apply when omitted.
        """
        self._ledger_gateway = ledger_gateway
        self._logger = logger or get_app_logger()
        self._assumptions = assumptions or default_balance_sheet_assumptions()

    def execute(
        self,
        filters: ReportFilters | None = None,
        today: date | None = None,
    ) -> BalanceSheet:
        """Return the balance sheet for the selected properties.

        Args:
            filters: Optional property and period filters.
            today: Reporting date used when no period end is selected.

        Returns:
            BalanceSheet: Balanced sheet as of the period end.
        """
        resolved_filters = filters or ReportFilters()
        as_of = resolved_filters.date_to or today or date.today()
        transactions = self._ledger_gateway.list_transactions(
            build_transaction_filter(resolved_filters)
        )
        properties = self._ledger_gateway.list_properties()
        if resolved_filters.property_ids:
            selected_ids = set(resolved_filters.property_ids)
            properties = [
                record for record in properties if record.id in selected_ids
            ]
        if len(resolved_filters.property_ids) > 1 or resolved_filters.search:
            transactions = filter_transactions(
                transactions,
                resolved_filters,
                load_lookups(self._ledger_gateway),
            )
        self._logger.info(
            f"Fetched {len(transactions)} transactions and "
            f"{len(properties)} properties for balance sheet"
        )
        for transaction in transactions:
            validate_transaction_amount(transaction, self._logger)
        sheet = compute_balance_sheet(
            transactions,
            properties,
            self._assumptions,
            as_of=as_of,
        )
        validate_balance_sheet(sheet, self._logger)
        self._logger.info(
            f"Balance sheet computed: assets={sheet.assets.total_assets}, "
            f"liabilities={sheet.liabilities.total_liabilities}, "
            f"equity={sheet.equity.total_equity}"
        )
        return sheet


__all__ = ["GetBalanceSheetUseCase", "BalanceSheet"]
