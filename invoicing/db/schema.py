# invoicing/db/schema.py

from sqlalchemy import (
    JSON, MetaData, Table, Column, Integer, String,
    Float, Date, CheckConstraint, Text
)

metadata = MetaData()

customers = Table(
    "customers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("name", String, nullable=False),
    Column("email", String, nullable=False),
    Column("phone", String, nullable=False),
    Column("address", Text, nullable=False),
)

# No foreign key on customer_id: invoices outlive their customer.
invoices = Table(
    "invoices",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("customer_id", Integer, nullable=False),
    Column("invoice_number", Text, nullable=False),
    Column("invoice_date", Date, nullable=False),
    Column("due_date", Date, nullable=False),
    Column("status", String, nullable=False),
    Column("subtotal", Float, nullable=False),
    Column("tax", Float, nullable=False),
    Column("total", Float, nullable=False),
    Column("notes", Text),
    Column("items", JSON, nullable=False),
)

items = Table(
    "items",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("name", String, nullable=False),
    Column("hsn_code", String, nullable=False),
    Column("selling_price", Float, nullable=False),
    Column("cost_price", Float, nullable=False),
    Column("tax_rate", Float, nullable=False),
    Column("description", Text),
    CheckConstraint("selling_price >= 0", name="ck_items_selling_price_nonneg"),
    CheckConstraint("cost_price >= 0", name="ck_items_cost_price_nonneg"),
)

settings = Table(
    "settings",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("company_name", String, nullable=False),
    Column("company_address", Text, nullable=False),
    Column("company_phone", String, nullable=False),
    Column("company_email", String, nullable=False),
    Column("logo_url", Text),
    Column("tax_percentage", Float, nullable=False),
    CheckConstraint("id = 1", name="ck_settings_singleton"),
)

# Highest id ever handed out per collection, so deleted ids are not reused.
id_sequences = Table(
    "id_sequences",
    metadata,
    Column("collection", String, primary_key=True),
    Column("last_id", Integer, nullable=False),
)
