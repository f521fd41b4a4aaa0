# invoicing/db/store.py
"""
Keyed record storage, one store per collection.

Every write runs in its own transaction. Two requests writing the same record
at once are not coordinated: the later commit wins.
"""

import logging
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import Table, and_, func, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Connection, Engine

from invoicing.db.schema import customers, id_sequences, invoices, items, settings
from invoicing.errors import InvoicingError
from invoicing.models.company import SETTINGS_ID, CompanySettingsIn, CompanySettingsOut
from invoicing.models.customers import CustomerOut
from invoicing.models.invoices import InvoiceFilters, InvoiceItem, InvoiceOut
from invoicing.models.items import ItemOut
from invoicing.totals import compute_totals, reconcile_totals

logger = logging.getLogger(__name__)

OutModel = TypeVar("OutModel", bound=BaseModel)

TOTAL_FIELDS = ("subtotal", "tax", "total")

DEFAULT_COMPANY_SETTINGS = {
    "company_name": "My Billing Company",
    "company_address": "789 Freelance Lane, Digital Nomad City",
    "company_phone": "555-9999",
    "company_email": "hello@mybilling.com",
    "logo_url": None,
    "tax_percentage": 10.0,
}

# Dialects whose insert supports ON CONFLICT upserts.
_UPSERT_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": postgresql_insert,
}


def upsert_insert(conn: Connection):
    """The dialect-specific insert construct for the connection's database."""
    dialect = conn.dialect.name
    try:
        return _UPSERT_INSERTS[dialect]
    except KeyError:
        raise InvoicingError(f"Unsupported database dialect: {dialect}") from None


class RecordStore(Generic[OutModel]):
    table: Table
    out_model: Type[OutModel]

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def list(self) -> List[OutModel]:
        with self._engine.connect() as conn:
            rows = conn.execute(
                select(self.table).order_by(self.table.c.id)
            ).mappings().all()
        return [self._to_model(row) for row in rows]

    def get(self, record_id: int) -> Optional[OutModel]:
        with self._engine.connect() as conn:
            row = self._fetch(conn, record_id)
        return None if row is None else self._to_model(row)

    def create(self, data: BaseModel) -> OutModel:
        values = self._values_for_create(data.model_dump())
        with self._engine.begin() as conn:
            record_id = self._high_water(conn) + 1
            self._record_high_water(conn, record_id)
            conn.execute(self.table.insert().values(id=record_id, **values))
            row = self._fetch(conn, record_id)

        logger.info("Created %s record %s", self.table.name, record_id)
        return self._to_model(row)

    def update(self, record_id: int, data: BaseModel) -> Optional[OutModel]:
        """
        Shallow merge of the fields present in ``data`` over the stored record.

        Lists are replaced wholesale. Returns None when the id is unknown.
        """
        changes = data.model_dump(include=data.model_fields_set)
        with self._engine.begin() as conn:
            existing = self._fetch(conn, record_id)
            if existing is None:
                return None

            values = self._values_for_update(existing, changes)
            if values:
                conn.execute(
                    self.table.update()
                    .where(self.table.c.id == record_id)
                    .values(**values)
                )
            row = self._fetch(conn, record_id)

        logger.info("Updated %s record %s: %s", self.table.name, record_id, sorted(values))
        return self._to_model(row)

    def delete(self, record_id: int) -> None:
        """Remove the record if present. Unknown ids are not an error."""
        with self._engine.begin() as conn:
            # Remember the current maximum before it can disappear.
            self._record_high_water(conn, self._high_water(conn))
            result = conn.execute(
                self.table.delete().where(self.table.c.id == record_id)
            )

        if result.rowcount:
            logger.info("Deleted %s record %s", self.table.name, record_id)
        else:
            logger.debug("No %s record %s to delete", self.table.name, record_id)

    def count(self) -> int:
        with self._engine.connect() as conn:
            return conn.execute(
                select(func.count()).select_from(self.table)
            ).scalar_one()

    # ---- Helpers ----

    def _values_for_create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        return values

    def _values_for_update(
        self, existing: Mapping[str, Any], changes: Dict[str, Any]
    ) -> Dict[str, Any]:
        return changes

    def _fetch(self, conn: Connection, record_id: int):
        return conn.execute(
            select(self.table).where(self.table.c.id == record_id)
        ).mappings().first()

    def _to_model(self, row) -> OutModel:
        return self.out_model.model_validate(dict(row))

    def _high_water(self, conn: Connection) -> int:
        current_max = conn.execute(select(func.max(self.table.c.id))).scalar() or 0
        recorded = conn.execute(
            select(id_sequences.c.last_id)
            .where(id_sequences.c.collection == self.table.name)
        ).scalar() or 0
        return max(current_max, recorded)

    def _record_high_water(self, conn: Connection, last_id: int) -> None:
        stmt = upsert_insert(conn)(id_sequences).values(
            collection=self.table.name,
            last_id=last_id,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[id_sequences.c.collection],
            set_={"last_id": stmt.excluded.last_id},
        )
        conn.execute(stmt)


class CustomerStore(RecordStore[CustomerOut]):
    table = customers
    out_model = CustomerOut


class ItemStore(RecordStore[ItemOut]):
    table = items
    out_model = ItemOut


class InvoiceStore(RecordStore[InvoiceOut]):
    """
    Invoices, with subtotal/tax/total kept consistent with the line items.

    Totals sent by the client are checked against the items and rejected with
    RecordValidationError when they differ; missing totals are filled in.
    """

    table = invoices
    out_model = InvoiceOut

    def list(self, filters: Optional[InvoiceFilters] = None) -> List[InvoiceOut]:
        conditions = []
        if filters is not None:
            if filters.customer_id is not None:
                conditions.append(invoices.c.customer_id == filters.customer_id)
            if filters.status:
                conditions.append(invoices.c.status == filters.status)
            if filters.start_date is not None:
                conditions.append(invoices.c.invoice_date >= filters.start_date)
            if filters.end_date is not None:
                conditions.append(invoices.c.invoice_date <= filters.end_date)

        stmt = select(invoices).order_by(
            invoices.c.invoice_date.desc(),
            invoices.c.id.asc(),
        )
        if conditions:
            stmt = stmt.where(and_(*conditions))

        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [self._to_model(row) for row in rows]

    def invoice_numbers(self) -> List[str]:
        with self._engine.connect() as conn:
            return list(conn.execute(select(invoices.c.invoice_number)).scalars())

    def _values_for_create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        lines = [InvoiceItem.model_validate(line) for line in values["items"]]
        values.update(reconcile_totals(values, compute_totals(lines)))
        return values

    def _values_for_update(
        self, existing: Mapping[str, Any], changes: Dict[str, Any]
    ) -> Dict[str, Any]:
        # Status-only and similar patches leave the stored totals untouched.
        if "items" not in changes and not any(f in changes for f in TOTAL_FIELDS):
            return changes

        merged_items = changes.get("items", existing["items"])
        lines = [InvoiceItem.model_validate(line) for line in merged_items]
        changes.update(reconcile_totals(changes, compute_totals(lines)))
        return changes


class SettingsStore:
    """The single company profile row, always stored at SETTINGS_ID."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get(self) -> CompanySettingsOut:
        with self._engine.begin() as conn:
            row = self._fetch(conn)
            if row is None:
                logger.info("No company settings stored; writing defaults")
                stmt = upsert_insert(conn)(settings).values(
                    id=SETTINGS_ID, **DEFAULT_COMPANY_SETTINGS
                )
                # Another request may have written the defaults first.
                conn.execute(stmt.on_conflict_do_nothing(index_elements=[settings.c.id]))
                row = self._fetch(conn)
        return CompanySettingsOut.model_validate(dict(row))

    def update(self, data: CompanySettingsIn) -> CompanySettingsOut:
        """Overwrite the profile. Any id the caller had in mind is ignored."""
        values = data.model_dump()
        with self._engine.begin() as conn:
            stmt = upsert_insert(conn)(settings).values(id=SETTINGS_ID, **values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[settings.c.id],
                set_={name: getattr(stmt.excluded, name) for name in values},
            )
            conn.execute(stmt)
            row = self._fetch(conn)

        logger.info("Updated company settings")
        return CompanySettingsOut.model_validate(dict(row))

    def _fetch(self, conn: Connection):
        return conn.execute(
            select(settings).where(settings.c.id == SETTINGS_ID)
        ).mappings().first()
