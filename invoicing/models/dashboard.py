# invoicing/models/dashboard.py

from typing import List

from invoicing.models.base import CamelModel


class MonthlyRevenue(CamelModel):
    month: str
    total: float


class DashboardSummary(CamelModel):
    total_revenue: float
    pending_amount: float
    invoice_count: int
    customer_count: int
    overdue_count: int
    revenue_by_month: List[MonthlyRevenue]
