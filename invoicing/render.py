# invoicing/render.py
"""Printable HTML invoice. The browser's print dialog turns it into a PDF."""

import html
from datetime import date
from typing import List, Optional

from invoicing.models.company import CompanySettingsOut
from invoicing.models.customers import CustomerOut
from invoicing.models.invoices import InvoiceOut
from invoicing.totals import effective_status, format_money, line_total

UNKNOWN_CUSTOMER = "Unknown customer"


def _esc(value) -> str:
    if value is None:
        return ""
    return html.escape(str(value))


def _multiline(value: str) -> str:
    return "<br>".join(_esc(part) for part in value.splitlines())


def _long_date(value: date) -> str:
    return f"{value:%B} {value.day}, {value:%Y}"


def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _company_block(company: CompanySettingsOut) -> str:
    return (
        '<div class="company">'
        f"<h3>{_esc(company.company_name)}</h3>"
        f"<p>{_multiline(company.company_address)}</p>"
        f"<p>{_esc(company.company_phone)}<br>{_esc(company.company_email)}</p>"
        "</div>"
    )


def _customer_block(customer: Optional[CustomerOut]) -> str:
    if customer is None:
        return f'<div class="bill-to"><span class="label">Bill To</span><h3>{UNKNOWN_CUSTOMER}</h3></div>'
    return (
        '<div class="bill-to">'
        '<span class="label">Bill To</span>'
        f"<h3>{_esc(customer.name)}</h3>"
        f"<p>{_esc(customer.email)}<br>{_esc(customer.phone)}</p>"
        f"<p>{_multiline(customer.address)}</p>"
        "</div>"
    )


def _item_rows(invoice: InvoiceOut, symbol: str) -> str:
    rows: List[str] = []
    for line in invoice.items:
        rows.append(
            "<tr>"
            f"<td>{_esc(line.description)}</td>"
            f'<td class="num">{_number(line.quantity)}</td>'
            f'<td class="num">{_esc(format_money(line.unit_price, symbol))}</td>'
            f'<td class="num">{_esc(_number(line.tax_rate))}%</td>'
            f'<td class="num">{_esc(format_money(line_total(line), symbol))}</td>'
            "</tr>"
        )
    return "".join(rows)


def render_invoice_html(
    invoice: InvoiceOut,
    customer: Optional[CustomerOut],
    company: CompanySettingsOut,
    *,
    today: date,
    currency_symbol: str = "",
) -> str:
    """
    Render a complete, self-contained A4 invoice page.

    ``customer`` is None when the invoice points at a deleted customer.
    """
    logo = ""
    if company.logo_url:
        logo = f'<img class="logo" src="{_esc(company.logo_url)}" alt="Logo">'

    status = effective_status(invoice.status, invoice.due_date, today)

    notes = ""
    if invoice.notes:
        notes = (
            '<div class="notes"><span class="label">Notes</span>'
            f"<p>{_multiline(invoice.notes)}</p></div>"
        )

    return f"""<!DOCTYPE html>
<html>
    <head>
        <meta charset="utf-8">
        <title>Invoice {_esc(invoice.invoice_number)}</title>
        <style>
            body {{ font-family: Arial, sans-serif; color: #0f172a; font-size: 14px; }}
            .page {{ max-width: 210mm; min-height: 297mm; margin: 0 auto; padding: 2rem; }}
            .header, .parties {{ display: flex; justify-content: space-between; margin-bottom: 3rem; }}
            .parties {{ border-top: 1px solid #f1f5f9; border-bottom: 1px solid #f1f5f9; padding: 2rem 0; }}
            .company, .dates {{ text-align: right; }}
            .logo {{ height: 3rem; margin-bottom: 1rem; }}
            .label {{ display: block; font-size: 11px; font-weight: bold; text-transform: uppercase; color: #94a3b8; }}
            table {{ border-collapse: collapse; width: 100%; margin-bottom: 3rem; }}
            th {{ font-size: 11px; text-transform: uppercase; color: #94a3b8; border-bottom: 2px solid #f1f5f9; text-align: left; padding: 0.75rem 0; }}
            td {{ padding: 1rem 0; border-bottom: 1px solid #f8fafc; }}
            .num {{ text-align: right; font-family: monospace; }}
            .totals {{ width: 16rem; margin-left: auto; }}
            .totals div {{ display: flex; justify-content: space-between; padding: 0.25rem 0; }}
            .totals .grand {{ border-top: 1px solid #e2e8f0; font-size: 18px; font-weight: bold; }}
            .status {{ text-transform: capitalize; }}
            @media print {{ .page {{ padding: 0; }} }}
        </style>
    </head>
    <body>
        <div class="page">
            <div class="header">
                <div>
                    {logo}
                    <h1>INVOICE</h1>
                    <p>#{_esc(invoice.invoice_number)}</p>
                </div>
                {_company_block(company)}
            </div>
            <div class="parties">
                {_customer_block(customer)}
                <div class="dates">
                    <span class="label">Invoice Date</span><p>{_long_date(invoice.invoice_date)}</p>
                    <span class="label">Due Date</span><p>{_long_date(invoice.due_date)}</p>
                    <span class="label">Status</span><p class="status">{_esc(status)}</p>
                </div>
            </div>
            <table>
                <thead>
                    <tr><th>Description</th><th class="num">Qty</th><th class="num">Price</th><th class="num">Tax %</th><th class="num">Amount</th></tr>
                </thead>
                <tbody>{_item_rows(invoice, currency_symbol)}</tbody>
            </table>
            <div class="totals">
                <div><span>Subtotal</span><span class="num">{_esc(format_money(invoice.subtotal, currency_symbol))}</span></div>
                <div><span>Tax</span><span class="num">{_esc(format_money(invoice.tax, currency_symbol))}</span></div>
                <div class="grand"><span>Total</span><span class="num">{_esc(format_money(invoice.total, currency_symbol))}</span></div>
            </div>
            {notes}
        </div>
    </body>
</html>
"""
