# invoicing/totals.py
"""
Derived invoice fields: line amounts, subtotal/tax/total, numbering and status.

A line's amount is always quantity * unit_price; unit_price never carries the
quantity in it, whichever way the line was entered.
"""

import math
import re
from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, Mapping, Optional

from invoicing.errors import RecordValidationError
from invoicing.models.invoices import OVERDUE, InvoiceItem, InvoiceStatus
from invoicing.models.items import ItemOut

# Submitted totals may be rounded to cents by the client.
TOTALS_TOLERANCE = 0.01

DEFAULT_INVOICE_NUMBER = "INV-001"

_DIGITS = re.compile(r"\d+")


@dataclass(frozen=True)
class InvoiceTotals:
    subtotal: float
    tax: float
    total: float

    def as_dict(self) -> Dict[str, float]:
        return {"subtotal": self.subtotal, "tax": self.tax, "total": self.total}


def line_amount(line: InvoiceItem) -> float:
    return line.quantity * line.unit_price


def line_tax(line: InvoiceItem) -> float:
    return line_amount(line) * (line.tax_rate or 0) / 100


def line_total(line: InvoiceItem) -> float:
    """Amount of a single line including its tax."""
    return line_amount(line) + line_tax(line)


def compute_totals(lines: Iterable[InvoiceItem]) -> InvoiceTotals:
    subtotal = 0.0
    tax = 0.0
    for line in lines:
        subtotal += line_amount(line)
        tax += line_tax(line)
    return InvoiceTotals(subtotal=subtotal, tax=tax, total=subtotal + tax)


def reconcile_totals(
    submitted: Mapping[str, Optional[float]],
    computed: InvoiceTotals,
) -> Dict[str, float]:
    """
    Check client-submitted totals against the ones computed from the items.

    Missing values are filled in from ``computed``. A submitted value within
    TOTALS_TOLERANCE of the computed one is kept as submitted, so what the
    client sent is what gets stored. Anything further off is rejected.
    """
    reconciled: Dict[str, float] = {}
    for field, expected in computed.as_dict().items():
        if not math.isfinite(expected):
            raise RecordValidationError(field, f"{field} of the line items is too large")
        value = submitted.get(field)
        if value is None:
            reconciled[field] = expected
            continue
        if not math.isfinite(value) or abs(value - expected) > TOTALS_TOLERANCE:
            raise RecordValidationError(
                field,
                f"{field} {value:.2f} does not match the line items ({expected:.2f})",
            )
        reconciled[field] = value
    return reconciled


def line_from_catalog(item: ItemOut, quantity: float = 1) -> InvoiceItem:
    """Pre-fill an invoice line from a catalog item, copying it by value."""
    return InvoiceItem(
        description=item.name,
        quantity=quantity,
        unit_price=item.selling_price,
        tax_rate=item.tax_rate,
    )


def next_invoice_number(existing: Iterable[str]) -> str:
    """
    Suggest the number following the highest numbered invoice.

    "INV-009" -> "INV-010". The prefix is the non-digit text of the highest
    number and zero padding is kept.
    """
    best_value = -1
    best_number = None
    for number in existing:
        digits = "".join(_DIGITS.findall(number))
        value = int(digits) if digits else 0
        if value > best_value:
            best_value = value
            best_number = number

    if best_number is None:
        return DEFAULT_INVOICE_NUMBER

    digits = "".join(_DIGITS.findall(best_number))
    prefix = _DIGITS.sub("", best_number) or "INV-"
    return f"{prefix}{str(best_value + 1).zfill(len(digits))}"


def effective_status(status: str, due_date: date, today: date) -> str:
    if status == InvoiceStatus.PENDING.value and due_date < today:
        return OVERDUE
    return status


def format_money(value: float, symbol: str = "") -> str:
    return f"{symbol}{value:,.2f}"
