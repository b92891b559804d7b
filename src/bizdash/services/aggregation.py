from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from bizdash.domain.dates import format_date
from bizdash.domain.models import DashboardSummary, Expense, Sale


@dataclass(frozen=True)
class ChartSeries:
    labels: tuple[str, ...] = ()
    values: tuple[float, ...] = ()


def sales_by_date(sales: Iterable[Sale]) -> ChartSeries:
    """
    Sum sale amounts per formatted date.
    Labels keep first-seen order; values are index-aligned with labels.
    """
    totals: dict[str, float] = {}
    for sale in sales:
        label = format_date(sale.timestamp)
        totals[label] = totals.get(label, 0.0) + sale.amount
    return ChartSeries(labels=tuple(totals), values=tuple(totals.values()))


def expenses_by_category(expenses: Iterable[Expense]) -> dict[str, float]:
    totals: dict[str, float] = {}
    for exp in expenses:
        totals[exp.category] = totals.get(exp.category, 0.0) + exp.amount
    return totals


def format_money(value: float, symbol: str = "₹") -> str:
    return f"{symbol}{float(value):.2f}"


@dataclass(frozen=True)
class SummaryKpis:
    total_sales: str
    total_purchases: str
    total_expenses: str
    total_profit: str


def summary_kpis(summary: DashboardSummary, symbol: str = "₹") -> SummaryKpis:
    return SummaryKpis(
        total_sales=format_money(summary.total_sales_value, symbol),
        total_purchases=format_money(summary.total_purchase_value, symbol),
        total_expenses=format_money(summary.total_expenses, symbol),
        total_profit=format_money(summary.total_profit, symbol),
    )
