# invoicing/dependencies.py

from fastapi import Depends
from sqlalchemy.engine import Engine

from invoicing.db.engine import get_engine
from invoicing.db.store import CustomerStore, InvoiceStore, ItemStore, SettingsStore


def get_customer_store(engine: Engine = Depends(get_engine)) -> CustomerStore:
    return CustomerStore(engine)


def get_invoice_store(engine: Engine = Depends(get_engine)) -> InvoiceStore:
    return InvoiceStore(engine)


def get_item_store(engine: Engine = Depends(get_engine)) -> ItemStore:
    return ItemStore(engine)


def get_settings_store(engine: Engine = Depends(get_engine)) -> SettingsStore:
    return SettingsStore(engine)
