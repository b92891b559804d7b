from __future__ import annotations

import logging
import threading
import tkinter as tk
from tkinter import ttk, messagebox
from typing import Callable, Optional

from bizdash.domain.errors import AppError, AuthenticationError
from bizdash.domain.models import ProductOption, Session
from bizdash.domain.schema import CollectionSchema
from bizdash.services.aggregation import ChartSeries, SummaryKpis
from bizdash.services.dashboard_controller import PAGES, DashboardController
from bizdash.ui.views import (
    ExpensesView,
    LoginView,
    OverviewView,
    ProductsView,
    PurchasesView,
    SalesView,
)

log = logging.getLogger(__name__)


class App(tk.Tk):
    """
    Main window. Owns the login and dashboard screens and acts as the
    controller's view: every view call coming from a worker thread is
    re-scheduled on the Tk thread with `after(0, ...)`.
    """

    def __init__(self, api, auth_service, currency_symbol: str, logs_dir: str):
        super().__init__()
        self.title("Business Dashboard")
        self.geometry("1280x720")
        self.minsize(1120, 640)

        self.api = api
        self.auth = auth_service
        self.currency_symbol = currency_symbol
        self.logs_dir = logs_dir
        self.controller: Optional[DashboardController] = None

        self.header_var = tk.StringVar(value="Login")
        self.user_var = tk.StringVar(value="")
        self.status_var = tk.StringVar(value="")
        self.busy_var = tk.StringVar(value="")
        self._toast_after_id = None
        self._busy_lock = threading.Lock()
        self._busy_count = 0

        self.api.busy = self.set_busy

        self._build_styles()
        self._build_topbar()

        self.body = ttk.Frame(self)
        self.body.pack(fill="both", expand=True, padx=12, pady=(0, 8))

        self.login_view = LoginView(self.body, self.handle_login)
        self._build_dashboard()
        self._build_status_bar()

        self._show_login_screen()

    # ---------- layout ----------
    def _build_styles(self):
        style = ttk.Style(self)
        style.layout("Side.TNotebook.Tab", [])
        style.configure("Side.TNotebook", tabmargins=0)

        try:
            style.configure("Big.TButton", padding=(14, 10))
            style.configure("Title.TLabel", font=("Segoe UI", 14, "bold"))
            style.configure("KPIValue.TLabel", font=("Segoe UI", 13, "bold"))
        except tk.TclError as e:
            log.exception("UI style setup failed: %s", e)

    def _build_topbar(self):
        top = ttk.Frame(self)
        top.pack(fill="x", padx=12, pady=10)

        ttk.Label(top, textvariable=self.header_var, style="Title.TLabel").pack(side="left")
        self.logout_btn = ttk.Button(top, text="Logout", command=self.on_logout)
        self.logout_btn.pack(side="right")
        ttk.Label(top, textvariable=self.user_var).pack(side="right", padx=10)

    def _build_dashboard(self):
        self.dashboard = ttk.Frame(self.body)

        self.sidebar = ttk.Frame(self.dashboard)
        self.sidebar.pack(side="left", fill="y", padx=(0, 10))

        content = ttk.Frame(self.dashboard)
        content.pack(side="right", fill="both", expand=True)

        self.nb = ttk.Notebook(content, style="Side.TNotebook")
        self.nb.pack(fill="both", expand=True)

        # Views (tabs hidden)
        self.overview_view = OverviewView(self.nb, self)
        self.products_view = ProductsView(self.nb, self)
        self.purchases_view = PurchasesView(self.nb, self)
        self.sales_view = SalesView(self.nb, self)
        self.expenses_view = ExpensesView(self.nb, self)

        self.pages = {
            "dashboard": self.overview_view,
            "products": self.products_view,
            "purchases": self.purchases_view,
            "sales": self.sales_view,
            "expenses": self.expenses_view,
        }
        self.forms = {
            "product": self.products_view,
            "purchase": self.purchases_view,
            "sale": self.sales_view,
            "expense": self.expenses_view,
        }

        box = ttk.LabelFrame(self.sidebar, text="Navigation")
        box.pack(fill="x", pady=(0, 10))
        icons = {"dashboard": "📊", "products": "📦", "purchases": "🔁", "sales": "🧾", "expenses": "💸"}
        for name in PAGES:
            ttk.Button(
                box, text=f"{icons[name]} {name.capitalize()}", style="Big.TButton",
                command=lambda n=name: self.controller and self.controller.switch_view(n),
            ).pack(fill="x", padx=10, pady=6)

        ttk.Button(box, text="🔄 Refresh", style="Big.TButton",
                   command=lambda: self.controller and self.run_async(self.controller.enter))\
            .pack(fill="x", padx=10, pady=(6, 10))

    def _build_status_bar(self):
        bar = ttk.Frame(self)
        bar.pack(fill="x", padx=12, pady=(0, 10))
        ttk.Label(bar, textvariable=self.status_var).pack(side="left")
        ttk.Label(bar, textvariable=self.busy_var).pack(side="left", padx=20)
        ttk.Label(bar, text=f"Logs: {self.logs_dir}").pack(side="right")

    # ---------- threading ----------
    def _ui(self, fn: Callable[[], None]) -> None:
        self.after(0, fn)

    def run_async(self, fn: Callable, *args) -> None:
        def worker() -> None:
            try:
                fn(*args)
            except Exception as exc:
                log.exception("Background task failed: %s", exc)
                self.show_error("Error", f"An error occurred: {exc}")

        threading.Thread(target=worker, daemon=True).start()

    def set_busy(self, on: bool) -> None:
        with self._busy_lock:
            self._busy_count += 1 if on else -1
            self._busy_count = max(self._busy_count, 0)
        self._ui(self._sync_busy_label)

    def _sync_busy_label(self) -> None:
        # Callbacks may run out of order; the live count decides.
        with self._busy_lock:
            busy = self._busy_count > 0
        self.busy_var.set("⏳ Loading..." if busy else "")

    def toast(self, msg: str, kind: str = "info", ms: int = 2500):
        prefix = {"info": "ℹ ", "success": "✅ ", "warn": "⚠ ", "error": "❌ "}.get(kind, "")
        self.status_var.set(prefix + msg)
        if self._toast_after_id is not None:
            self.after_cancel(self._toast_after_id)
        self._toast_after_id = self.after(ms, lambda: self.status_var.set(""))

    # ---------- login ----------
    def handle_login(self, username: str, password: str) -> None:
        def worker() -> None:
            try:
                session = self.auth.login(username, password)
            except AuthenticationError as e:
                message = e.message
                self._ui(lambda: self.login_view.show_error(message))
                return
            except AppError as e:
                log.error("Login error: %s", e, exc_info=True)
                self._ui(lambda: self.login_view.show_error("An error occurred. Please try again."))
                return
            self._ui(lambda: self.enter_dashboard(session))

        threading.Thread(target=worker, daemon=True).start()

    def enter_dashboard(self, session: Session) -> None:
        self.controller = DashboardController(
            self.api, self.auth, session, view=self, currency_symbol=self.currency_symbol
        )
        self.login_view.frame.pack_forget()
        self.dashboard.pack(fill="both", expand=True)
        self.user_var.set(f"👤 {session.username}")
        self.logout_btn.state(["!disabled"])
        self.controller.switch_view("dashboard")
        self.run_async(self.controller.enter)

    def on_logout(self) -> None:
        if self.controller is not None:
            self.controller.logout()

    def _show_login_screen(self) -> None:
        self.controller = None
        self.dashboard.pack_forget()
        self.login_view.frame.pack(fill="both", expand=True)
        self.login_view.reset()
        self.header_var.set("Login")
        self.user_var.set("")
        self.logout_btn.state(["disabled"])

    # ---------- DashboardView ----------
    def show_summary(self, kpis: SummaryKpis, sales: ChartSeries, expenses: dict[str, float]) -> None:
        self._ui(lambda: self.overview_view.show_summary(kpis, sales, expenses))

    def show_product_choices(self, options: list[ProductOption]) -> None:
        def apply() -> None:
            self.purchases_view.set_product_choices(options)
            self.sales_view.set_product_choices(options)

        self._ui(apply)

    def show_table(self, schema: CollectionSchema, rows: list[tuple[str, ...]]) -> None:
        view = self.pages[schema.key]
        self._ui(lambda: view.show_rows(rows))

    def show_page(self, name: str, title: str) -> None:
        def apply() -> None:
            self.nb.select(self.pages[name].frame)
            self.header_var.set(title)

        self._ui(apply)

    def reset_form(self, form: str) -> None:
        self._ui(self.forms[form].clear_form)

    def show_info(self, message: str) -> None:
        self._ui(lambda: self.toast(message, kind="success"))

    def show_error(self, title: str, message: str) -> None:
        self._ui(lambda: messagebox.showerror(title, message, parent=self))

    def show_login(self) -> None:
        self._ui(self._show_login_screen)
