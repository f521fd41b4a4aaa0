# invoicing/reports.py

from datetime import date
from typing import Iterable

from invoicing.models.dashboard import DashboardSummary, MonthlyRevenue
from invoicing.models.invoices import OVERDUE, InvoiceOut, InvoiceStatus
from invoicing.totals import effective_status


def build_dashboard_summary(
    invoices: Iterable[InvoiceOut],
    customer_count: int,
    today: date,
) -> DashboardSummary:
    """
    Headline figures for the dashboard.

    Revenue counts paid invoices only; the monthly series sums every invoice
    by the month of its invoice date, oldest month first.
    """
    total_revenue = 0.0
    pending_amount = 0.0
    invoice_count = 0
    overdue_count = 0
    by_month = {}

    for invoice in invoices:
        invoice_count += 1
        if invoice.status == InvoiceStatus.PAID.value:
            total_revenue += invoice.total
        elif invoice.status == InvoiceStatus.PENDING.value:
            pending_amount += invoice.total

        if effective_status(invoice.status, invoice.due_date, today) == OVERDUE:
            overdue_count += 1

        month = invoice.invoice_date.strftime("%Y-%m")
        by_month[month] = by_month.get(month, 0.0) + invoice.total

    return DashboardSummary(
        total_revenue=total_revenue,
        pending_amount=pending_amount,
        invoice_count=invoice_count,
        customer_count=customer_count,
        overdue_count=overdue_count,
        revenue_by_month=[
            MonthlyRevenue(month=month, total=total)
            for month, total in sorted(by_month.items())
        ],
    )
