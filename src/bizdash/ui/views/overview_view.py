from __future__ import annotations

from tkinter import ttk

from bizdash.services.aggregation import ChartSeries, SummaryKpis
from bizdash.ui.charts import DoughnutChart, LineChart


class OverviewView:
    def __init__(self, notebook: ttk.Notebook, app):
        self.app = app
        self.frame = ttk.Frame(notebook)
        notebook.add(self.frame, text="Dashboard")

        kpi = ttk.Frame(self.frame)
        kpi.pack(fill="x", padx=10, pady=10)

        labels = ["Total Sales", "Total Purchases", "Total Expenses", "Total Profit"]
        values = []
        for i, lab in enumerate(labels):
            box = ttk.LabelFrame(kpi, text=lab)
            box.grid(row=0, column=i, sticky="ew", padx=6)
            w = ttk.Label(box, text="-", style="KPIValue.TLabel")
            w.pack(padx=12, pady=10)
            values.append(w)
            kpi.columnconfigure(i, weight=1)
        self.k_sales, self.k_purchases, self.k_expenses, self.k_profit = values

        charts = ttk.Frame(self.frame)
        charts.pack(fill="both", expand=True, padx=10, pady=(0, 10))
        charts.columnconfigure(0, weight=3)
        charts.columnconfigure(1, weight=2)
        charts.rowconfigure(0, weight=1)

        self.sales_chart = LineChart(charts, "Sales by day")
        self.sales_chart.canvas.grid(row=0, column=0, sticky="nsew", padx=6, pady=6)

        self.expense_chart = DoughnutChart(charts, "Expenses by category")
        self.expense_chart.canvas.grid(row=0, column=1, sticky="nsew", padx=6, pady=6)

    def show_summary(self, kpis: SummaryKpis, sales: ChartSeries, expenses: dict[str, float]) -> None:
        self.k_sales.config(text=kpis.total_sales)
        self.k_purchases.config(text=kpis.total_purchases)
        self.k_expenses.config(text=kpis.total_expenses)
        self.k_profit.config(text=kpis.total_profit)
        self.sales_chart.set_data(sales.labels, sales.values)
        self.expense_chart.set_data(list(expenses), list(expenses.values()))
