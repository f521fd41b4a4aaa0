# invoicing/api/invoices.py

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from fastapi.responses import HTMLResponse

from invoicing.config import Settings, get_settings
from invoicing.db.store import CustomerStore, InvoiceStore, SettingsStore
from invoicing.dependencies import (
    get_customer_store,
    get_invoice_store,
    get_settings_store,
)
from invoicing.models.invoices import (
    InvoiceFilters,
    InvoiceIn,
    InvoiceOut,
    InvoiceUpdate,
    NextInvoiceNumberOut,
)
from invoicing.render import render_invoice_html
from invoicing.totals import next_invoice_number

router = APIRouter(prefix="/api/invoices", tags=["invoices"])


@router.get("", response_model=List[InvoiceOut])
def list_invoices(
    customer_id: Optional[int] = Query(default=None, alias="customerId"),
    status: Optional[str] = Query(default=None),
    start_date: Optional[date] = Query(
        default=None,
        alias="startDate",
        description="ISO date (YYYY-MM-DD), inclusive",
    ),
    end_date: Optional[date] = Query(
        default=None,
        alias="endDate",
        description="ISO date (YYYY-MM-DD), inclusive",
    ),
    store: InvoiceStore = Depends(get_invoice_store),
) -> List[InvoiceOut]:
    """
    Returns every matching invoice, most recent invoice date first.
    """
    filters = InvoiceFilters(
        customer_id=customer_id,
        status=status,
        start_date=start_date,
        end_date=end_date,
    )
    return store.list(filters)


@router.get("/next-number", response_model=NextInvoiceNumberOut)
def suggest_invoice_number(
    store: InvoiceStore = Depends(get_invoice_store),
) -> NextInvoiceNumberOut:
    """
    Suggested number for a new invoice, one past the highest existing one.
    """
    return NextInvoiceNumberOut(
        invoice_number=next_invoice_number(store.invoice_numbers())
    )


@router.get("/{invoice_id}", response_model=InvoiceOut)
def get_invoice(
    invoice_id: int,
    store: InvoiceStore = Depends(get_invoice_store),
) -> InvoiceOut:
    invoice = store.get(invoice_id)
    if invoice is None:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return invoice


@router.get("/{invoice_id}/print", response_class=HTMLResponse)
def print_invoice(
    invoice_id: int,
    store: InvoiceStore = Depends(get_invoice_store),
    customer_store: CustomerStore = Depends(get_customer_store),
    settings_store: SettingsStore = Depends(get_settings_store),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    """
    Printable invoice document; use the browser's print dialog to get a PDF.
    """
    invoice = store.get(invoice_id)
    if invoice is None:
        raise HTTPException(status_code=404, detail="Invoice not found")

    content = render_invoice_html(
        invoice,
        customer_store.get(invoice.customer_id),
        settings_store.get(),
        today=date.today(),
        currency_symbol=settings.currency_symbol,
    )
    return HTMLResponse(content=content)


@router.post("", response_model=InvoiceOut, status_code=201)
def create_invoice(
    payload: InvoiceIn,
    store: InvoiceStore = Depends(get_invoice_store),
) -> InvoiceOut:
    """
    Create an invoice. subtotal/tax/total are filled in when omitted and must
    agree with the line items when given.
    """
    return store.create(payload)


@router.put("/{invoice_id}", response_model=InvoiceOut)
def update_invoice(
    invoice_id: int,
    payload: InvoiceUpdate,
    store: InvoiceStore = Depends(get_invoice_store),
) -> InvoiceOut:
    invoice = store.update(invoice_id, payload)
    if invoice is None:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return invoice


@router.delete("/{invoice_id}", status_code=204, response_class=Response)
def delete_invoice(
    invoice_id: int,
    store: InvoiceStore = Depends(get_invoice_store),
) -> Response:
    store.delete(invoice_id)
    return Response(status_code=204)
