# invoicing/models/invoices.py

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator

from invoicing.models.base import CamelModel, reject_null


class InvoiceStatus(str, Enum):
    """Statuses that can be stored. ``overdue`` is derived, never stored."""

    DRAFT = "draft"
    PENDING = "pending"
    PAID = "paid"


OVERDUE = "overdue"


class InvoiceItem(CamelModel):
    """One line of an invoice. unit_price is the price of a single unit."""

    description: str = Field(..., min_length=1)
    quantity: float = Field(..., ge=1)
    unit_price: float = Field(..., ge=0)
    tax_rate: float = Field(default=0, ge=0, le=100)


class InvoiceIn(CamelModel):
    model_config = ConfigDict(use_enum_values=True)

    customer_id: int
    invoice_number: str = Field(..., min_length=1)
    invoice_date: date = Field(..., alias="date")
    due_date: date
    status: InvoiceStatus
    # Omitted totals are computed from the items.
    subtotal: Optional[float] = None
    tax: Optional[float] = None
    total: Optional[float] = None
    notes: Optional[str] = None
    items: List[InvoiceItem] = Field(..., min_length=1)


class InvoiceUpdate(CamelModel):
    model_config = ConfigDict(use_enum_values=True)

    customer_id: Optional[int] = None
    invoice_number: Optional[str] = Field(default=None, min_length=1)
    invoice_date: Optional[date] = Field(default=None, alias="date")
    due_date: Optional[date] = None
    status: Optional[InvoiceStatus] = None
    subtotal: Optional[float] = None
    tax: Optional[float] = None
    total: Optional[float] = None
    notes: Optional[str] = None
    items: Optional[List[InvoiceItem]] = Field(default=None, min_length=1)

    @field_validator(
        "customer_id",
        "invoice_number",
        "invoice_date",
        "due_date",
        "status",
        "subtotal",
        "tax",
        "total",
        "items",
    )
    @classmethod
    def _not_null(cls, value):
        return reject_null(value)


class InvoiceOut(CamelModel):
    model_config = ConfigDict(use_enum_values=True)

    id: int
    customer_id: int
    invoice_number: str
    invoice_date: date = Field(..., alias="date")
    due_date: date
    status: InvoiceStatus
    subtotal: float
    tax: float
    total: float
    notes: Optional[str] = None
    items: List[InvoiceItem]


class InvoiceFilters(CamelModel):
    customer_id: Optional[int] = None
    status: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class NextInvoiceNumberOut(CamelModel):
    invoice_number: str
