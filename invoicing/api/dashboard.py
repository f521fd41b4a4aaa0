# invoicing/api/dashboard.py

from datetime import date

from fastapi import APIRouter, Depends

from invoicing.db.store import CustomerStore, InvoiceStore
from invoicing.dependencies import get_customer_store, get_invoice_store
from invoicing.models.dashboard import DashboardSummary
from invoicing.reports import build_dashboard_summary

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardSummary)
def dashboard_summary(
    invoice_store: InvoiceStore = Depends(get_invoice_store),
    customer_store: CustomerStore = Depends(get_customer_store),
) -> DashboardSummary:
    """
    Revenue, outstanding amounts and counts across all invoices.
    """
    return build_dashboard_summary(
        invoice_store.list(),
        customer_count=customer_store.count(),
        today=date.today(),
    )
