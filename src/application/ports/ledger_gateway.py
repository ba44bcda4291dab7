"""Port for reading the property ledger."""

from typing import Protocol

from src.domain.models import (
    LeaseRecord,
    PropertyRecord,
    TenantRecord,
    Transaction,
    TransactionFilter,
    UnitRecord,
    VendorRecord,
)


class LedgerGatewayPort(Protocol):
    """Port exposing ledger transactions and their lookup records.

    Implementations apply ``TransactionFilter`` in the store and raise
    ``UpstreamFetchError`` when the store cannot be queried.
    """

    def list_transactions(
        self,
        transaction_filter: TransactionFilter,
    ) -> list[Transaction]:
        """Return transactions matching the filter."""

    def list_properties(self) -> list[PropertyRecord]:
        """Return all properties."""

    def list_units(self, property_id: str | None = None) -> list[UnitRecord]:
        """Return units, optionally for a single property."""

    def list_leases(self) -> list[LeaseRecord]:
        """Return all leases with their primary tenant."""

    def list_tenants(self) -> list[TenantRecord]:
        """Return all tenants."""

    def list_vendors(self) -> list[VendorRecord]:
        """Return all vendors."""


__all__ = ["LedgerGatewayPort"]
