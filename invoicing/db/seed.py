# invoicing/db/seed.py

import logging
from datetime import date, timedelta
from typing import Optional

from sqlalchemy import select
from sqlalchemy.engine import Engine

from invoicing.db.schema import customers, invoices, items, metadata, settings
from invoicing.db.store import CustomerStore, InvoiceStore, SettingsStore
from invoicing.models.customers import CustomerIn
from invoicing.models.invoices import InvoiceIn, InvoiceItem

logger = logging.getLogger(__name__)


def is_empty(engine: Engine) -> bool:
    """True when no collection holds a single record."""
    with engine.connect() as conn:
        for table in (customers, invoices, items, settings):
            if conn.execute(select(table.c.id).limit(1)).first() is not None:
                return False
    return True


def seed_example_data(engine: Engine, today: Optional[date] = None) -> bool:
    """
    Insert a small example data set into an empty database.

    Returns False (and writes nothing) if any collection already has data, so
    it is safe to call on every start.
    """
    if not is_empty(engine):
        logger.info("Database already has data; skipping example seed")
        return False

    today = today or date.today()

    customer_store = CustomerStore(engine)
    acme = customer_store.create(
        CustomerIn(
            name="Acme Corp",
            email="contact@acme.com",
            phone="555-0100",
            address="123 Industrial Way, Tech City, TC 90210",
        )
    )
    global_services = customer_store.create(
        CustomerIn(
            name="Global Services Inc",
            email="billing@globalservices.com",
            phone="555-0200",
            address="456 Corporate Blvd, Metropolis, NY 10001",
        )
    )

    invoice_store = InvoiceStore(engine)
    invoice_store.create(
        InvoiceIn(
            customer_id=acme.id,
            invoice_number="INV-001",
            invoice_date=today,
            due_date=today + timedelta(days=7),
            status="paid",
            notes="Consulting services for Q1",
            items=[
                InvoiceItem(
                    description="Strategy Session",
                    quantity=5,
                    unit_price=200,
                    tax_rate=10,
                )
            ],
        )
    )
    invoice_store.create(
        InvoiceIn(
            customer_id=global_services.id,
            invoice_number="INV-002",
            invoice_date=today,
            due_date=today + timedelta(days=14),
            status="pending",
            notes="Web development deposit",
            items=[
                InvoiceItem(
                    description="Frontend Development",
                    quantity=10,
                    unit_price=50,
                    tax_rate=10,
                )
            ],
        )
    )

    # Writes the default company profile.
    SettingsStore(engine).get()

    logger.info("Seeded example customers, invoices and company settings")
    return True


def init_db(engine: Engine, *, seed: bool = True) -> None:
    """Create missing tables and, if asked, seed an empty database."""
    metadata.create_all(engine)
    if seed:
        seed_example_data(engine)
