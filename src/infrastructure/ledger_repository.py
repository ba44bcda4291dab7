"""SQLAlchemy-backed ledger gateway."""

from datetime import date

from sqlalchemy import Date, bindparam, text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_gateway import LedgerGatewayPort
from src.domain.errors import UpstreamFetchError
from src.domain.models import (
    LeaseRecord,
    PropertyRecord,
    TenantRecord,
    Transaction,
    TransactionFilter,
    UnitRecord,
    VendorRecord,
)
from src.utils.date_utils import coerce_date, coerce_datetime
from src.utils.decimal_utils import coerce_decimal, coerce_optional_decimal


class SqlAlchemyLedgerGateway(LedgerGatewayPort):
    """Ledger gateway reading the property management tables."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the gateway.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def list_transactions(
        self,
        transaction_filter: TransactionFilter,
    ) -> list[Transaction]:
        query, params = self._build_transactions_query(transaction_filter)
        rows = self._fetch_all(query, params, "transactions")
        transactions = [
            Transaction(
                id=str(row.id),
                type=row.type,
                status=row.status,
                amount=coerce_decimal(row.amount),
                created_at=coerce_datetime(row.created_at),
                subtype=row.subtype,
                due_date=coerce_date(row.due_date),
                paid_date=coerce_date(row.paid_date),
                property_id=self._optional_id(row.property_id),
                unit_id=self._optional_id(row.unit_id),
                tenant_id=self._optional_id(row.tenant_id),
                vendor_id=self._optional_id(row.vendor_id),
                lease_id=self._optional_id(row.lease_id),
                category_id=self._optional_id(row.category_id),
                category_name=row.category_name,
                description=row.description,
                payment_method=row.payment_method,
                reference_id=row.reference_id,
            )
            for row in rows
        ]
        return sorted(
            transactions,
            key=lambda item: (
                item.due_date or coerce_date(item.created_at) or date.min,
                item.id,
            ),
        )

    def list_properties(self) -> list[PropertyRecord]:
        query = text(
            """
            SELECT id, name, address, purchase_price
            FROM properties
            """
        )
        rows = self._fetch_all(query, {}, "properties")
        properties = [
            PropertyRecord(
                id=str(row.id),
                name=row.name,
                address=row.address,
                purchase_price=coerce_optional_decimal(row.purchase_price),
            )
            for row in rows
        ]
        return sorted(properties, key=lambda row: (row.name.lower(), row.id))

    def list_units(self, property_id: str | None = None) -> list[UnitRecord]:
        base_sql = """
        SELECT id, property_id, name, unit_type, status, beds, baths, size,
               market_rent, deposit, created_at
        FROM units
        WHERE 1=1
        """
        params = {}
        if property_id:
            base_sql += " AND property_id = :property_id"
            params["property_id"] = property_id
        rows = self._fetch_all(text(base_sql), params, "units")
        units = [
            UnitRecord(
                id=str(row.id),
                property_id=str(row.property_id),
                name=row.name,
                status=row.status,
                unit_type=row.unit_type,
                beds=row.beds,
                baths=coerce_optional_decimal(row.baths),
                size=row.size,
                market_rent=coerce_optional_decimal(row.market_rent),
                deposit=coerce_optional_decimal(row.deposit),
                created_at=coerce_datetime(row.created_at),
            )
            for row in rows
        ]
        return sorted(units, key=lambda row: (row.property_id, row.name))

    def list_leases(self) -> list[LeaseRecord]:
        lease_rows = self._fetch_all(
            text(
                """
                SELECT id, unit_id, start_date, end_date, rent_amount,
                       deposit_amount, renewal_status
                FROM leases
                """
            ),
            {},
            "leases",
        )
        link_rows = self._fetch_all(
            text(
                """
                SELECT lease_id, tenant_id, is_primary
                FROM lease_tenants
                ORDER BY lease_id, tenant_id
                """
            ),
            {},
            "lease_tenants",
        )
        primary_tenants = self._primary_tenants(link_rows)
        leases = [
            LeaseRecord(
                id=str(row.id),
                unit_id=str(row.unit_id),
                start_date=coerce_date(row.start_date),
                end_date=coerce_date(row.end_date),
                rent_amount=coerce_decimal(row.rent_amount),
                deposit_amount=coerce_optional_decimal(row.deposit_amount),
                primary_tenant_id=primary_tenants.get(str(row.id)),
                renewal_status=row.renewal_status,
            )
            for row in lease_rows
        ]
        return sorted(leases, key=lambda row: (row.end_date, row.id))

    def list_tenants(self) -> list[TenantRecord]:
        query = text(
            """
            SELECT id, first_name, last_name, email, phone, unit_id,
                   is_company, company_name
            FROM tenants
            """
        )
        rows = self._fetch_all(query, {}, "tenants")
        tenants = [
            TenantRecord(
                id=str(row.id),
                first_name=row.first_name,
                last_name=row.last_name,
                email=row.email,
                phone=row.phone,
                unit_id=self._optional_id(row.unit_id),
                is_company=bool(row.is_company),
                company_name=row.company_name,
            )
            for row in rows
        ]
        return sorted(tenants, key=lambda row: row.id)

    def list_vendors(self) -> list[VendorRecord]:
        query = text("SELECT id, name FROM vendors")
        rows = self._fetch_all(query, {}, "vendors")
        vendors = [VendorRecord(id=str(row.id), name=row.name) for row in rows]
        return sorted(vendors, key=lambda row: row.id)

    def _fetch_all(self, query, params: dict, source: str) -> list:
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                return conn.execute(query, params).all()
        except SQLAlchemyError as exc:
            raise UpstreamFetchError(
                f"Failed to read {source} from the ledger database"
            ) from exc

    @staticmethod
    def _optional_id(value) -> str | None:
        if value is None:
            return None
        return str(value)

    @staticmethod
    def _primary_tenants(link_rows) -> dict[str, str]:
        """Map lease ids to the primary tenant, else the first tenant."""
        primary: dict[str, str] = {}
        fallback: dict[str, str] = {}
        for row in link_rows:
            lease_id = str(row.lease_id)
            tenant_id = str(row.tenant_id)
            fallback.setdefault(lease_id, tenant_id)
            if row.is_primary and lease_id not in primary:
                primary[lease_id] = tenant_id
        return {**fallback, **primary}

    @staticmethod
    def _build_transactions_query(transaction_filter: TransactionFilter):
        base_sql = """
        SELECT t.id AS id,
               t.type AS type,
               t.subtype AS subtype,
               t.status AS status,
               t.amount AS amount,
               t.due_date AS due_date,
               t.paid_date AS paid_date,
               t.created_at AS created_at,
               t.property_id AS property_id,
               t.unit_id AS unit_id,
               t.tenant_id AS tenant_id,
               t.vendor_id AS vendor_id,
               t.lease_id AS lease_id,
               t.category_id AS category_id,
               c.name AS category_name,
               t.description AS description,
               t.payment_method AS payment_method,
               t.reference_id AS reference_id
        FROM transactions t
        LEFT JOIN transaction_categories c ON c.id = t.category_id
        WHERE 1=1
        """
        params: dict = {}
        bind_params = []
        columns = (
            ("property_id", "t.property_id"),
            ("unit_id", "t.unit_id"),
            ("tenant_id", "t.tenant_id"),
            ("vendor_id", "t.vendor_id"),
            ("category_id", "t.category_id"),
            ("type", "t.type"),
        )
        for field, column in columns:
            value = getattr(transaction_filter, field)
            if value:
                base_sql += f" AND {column} = :{field}"
                params[field] = value
        if transaction_filter.payment_method:
            base_sql += " AND LOWER(t.payment_method) = :payment_method"
            params["payment_method"] = transaction_filter.payment_method.lower()
        if transaction_filter.date_from:
            base_sql += " AND t.due_date >= :date_from"
            params["date_from"] = transaction_filter.date_from
            bind_params.append(bindparam("date_from", type_=Date))
        if transaction_filter.date_to:
            base_sql += " AND t.due_date <= :date_to"
            params["date_to"] = transaction_filter.date_to
            bind_params.append(bindparam("date_to", type_=Date))
        if transaction_filter.statuses:
            base_sql += " AND t.status IN :statuses"
            params["statuses"] = list(transaction_filter.statuses)
            bind_params.append(bindparam("statuses", expanding=True))
        query = text(base_sql)
        if bind_params:
            query = query.bindparams(*bind_params)
        return query, params


__all__ = ["SqlAlchemyLedgerGateway"]
