from .login_view import LoginView
from .overview_view import OverviewView
from .products_view import ProductsView
from .purchases_view import PurchasesView
from .sales_view import SalesView
from .expenses_view import ExpensesView

__all__ = ["LoginView", "OverviewView", "ProductsView", "PurchasesView", "SalesView", "ExpensesView"]
