from .aggregation import ChartSeries, expenses_by_category, format_money, sales_by_date
from .auth_service import AuthService, SessionStore
from .dashboard_controller import DashboardController
from .export_service import export_table_xlsx
from .sequencing import RequestSequencer
from .table_renderer import render_rows

__all__ = [
    "ChartSeries",
    "expenses_by_category",
    "format_money",
    "sales_by_date",
    "AuthService",
    "SessionStore",
    "DashboardController",
    "export_table_xlsx",
    "RequestSequencer",
    "render_rows",
]
