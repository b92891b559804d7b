from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Protocol

from bizdash.domain.errors import AppError, ApplicationError
from bizdash.domain.models import ActionResult, ProductOption, Session
from bizdash.domain.schema import (
    EXPENSES,
    PRODUCTS,
    PURCHASES,
    SALES,
    CollectionSchema,
    get_schema,
)
from bizdash.services.aggregation import (
    ChartSeries,
    SummaryKpis,
    expenses_by_category,
    sales_by_date,
    summary_kpis,
)
from bizdash.services.export_service import export_table_xlsx
from bizdash.services.sequencing import RequestSequencer
from bizdash.services.table_renderer import render_rows

log = logging.getLogger(__name__)

PAGES = ("dashboard", "products", "purchases", "sales", "expenses")


class DashboardView(Protocol):
    def show_summary(self, kpis: SummaryKpis, sales: ChartSeries, expenses: dict[str, float]) -> None: ...
    def show_product_choices(self, options: list[ProductOption]) -> None: ...
    def show_table(self, schema: CollectionSchema, rows: list[tuple[str, ...]]) -> None: ...
    def show_page(self, name: str, title: str) -> None: ...
    def reset_form(self, form: str) -> None: ...
    def show_info(self, message: str) -> None: ...
    def show_error(self, title: str, message: str) -> None: ...
    def show_login(self) -> None: ...


class DashboardController:
    """Orchestrates fetch -> aggregate/render -> display for the logged-in dashboard."""

    def __init__(
        self,
        api,
        auth,
        session: Session,
        view: DashboardView,
        currency_symbol: str = "₹",
        sequencer: RequestSequencer | None = None,
    ):
        if session is None:
            raise ApplicationError("A logged-in session is required.")
        self.api = api
        self.auth = auth
        self.session = session
        self.view = view
        self.currency_symbol = currency_symbol
        self.sequencer = sequencer or RequestSequencer()
        self.active_page = "dashboard"

        self._lock = threading.Lock()
        self._displayed: dict[str, list[tuple[str, ...]]] = {}

    # ---------- lifecycle ----------
    def enter(self) -> None:
        self.load_summary()
        self.load_product_choices()
        self.load_all_tables()

    def switch_view(self, name: str) -> None:
        if name not in PAGES:
            raise ValueError(f"Unknown page: {name}")
        self.active_page = name
        self.view.show_page(name, name[:1].upper() + name[1:])

    def logout(self) -> None:
        self.auth.logout()
        self.view.show_login()

    # ---------- loads ----------
    def _report(self, context: str, e: Exception) -> None:
        log.error("%s failed: %s", context, e, exc_info=True)
        self.view.show_error("Error", f"An error occurred: {e}")

    def _fetch(self, key: str, fetch: Callable[[], Any]) -> tuple[bool, Any]:
        ticket = self.sequencer.issue(key)
        try:
            data = fetch()
        except AppError as e:
            self._report(f"load {key}", e)
            return False, None
        if not self.sequencer.try_apply(key, ticket):
            log.info("stale_response_dropped key=%s ticket=%s", key, ticket)
            return False, None
        return True, data

    def load_summary(self) -> None:
        ok, summary = self._fetch("summary", self.api.get_dashboard_data)
        if not ok:
            return
        self.view.show_summary(
            summary_kpis(summary, self.currency_symbol),
            sales_by_date(summary.sales),
            expenses_by_category(summary.expenses),
        )

    def load_product_choices(self) -> None:
        ok, options = self._fetch("product_choices", self.api.get_products_list)
        if ok:
            self.view.show_product_choices(options)

    def load_table(self, schema: CollectionSchema) -> None:
        ticket = self.sequencer.issue(schema.key)
        try:
            data = self.api.get_data(schema)
        except AppError as e:
            self._report(f"load {schema.key}", e)
            data = []
        if not self.sequencer.try_apply(schema.key, ticket):
            log.info("stale_response_dropped key=%s ticket=%s", schema.key, ticket)
            return

        rows = render_rows(data, schema.column_count, schema.columns)
        with self._lock:
            self._displayed[schema.key] = rows
        self.view.show_table(schema, rows)

    def load_all_tables(self) -> None:
        for schema in (PRODUCTS, PURCHASES, SALES, EXPENSES):
            self.load_table(schema)

    def displayed_rows(self, key: str) -> list[tuple[str, ...]]:
        with self._lock:
            return list(self._displayed.get(key, []))

    # ---------- mutations ----------
    def _submit(
        self,
        form: str,
        success_message: str,
        submit: Callable[[], ActionResult],
        refresh: Iterable[Callable[[], None]],
    ) -> bool:
        try:
            result = submit()
        except AppError as e:
            self._report(f"submit {form}", e)
            return False

        if not result.ok:
            log.warning("submit_rejected form=%s message=%s", form, result.message)
            self.view.show_error("Error", result.message)
            return False

        log.info("submit_ok form=%s user=%s", form, self.session.username)
        self.view.show_info(success_message)
        self.view.reset_form(form)
        for step in refresh:
            step()
        return True

    def add_product(self, product_name: str, cost_price: float, sale_price: float) -> bool:
        return self._submit(
            "product",
            "Product added!",
            lambda: self.api.add_product(product_name, cost_price, sale_price),
            (self.load_product_choices, lambda: self.load_table(PRODUCTS)),
        )

    def add_purchase(self, product_id: str, quantity: int) -> bool:
        return self._submit(
            "purchase",
            "Purchase added!",
            lambda: self.api.add_purchase(product_id, quantity),
            (lambda: self.load_table(PURCHASES), lambda: self.load_table(PRODUCTS), self.load_summary),
        )

    def add_sale(self, product_id: str, quantity: int) -> bool:
        return self._submit(
            "sale",
            "Sale added!",
            lambda: self.api.add_sale(product_id, quantity),
            (lambda: self.load_table(SALES), lambda: self.load_table(PRODUCTS), self.load_summary),
        )

    def add_expense(self, expense_category: str, amount: float) -> bool:
        return self._submit(
            "expense",
            "Expense added!",
            lambda: self.api.add_expense(expense_category, amount),
            (lambda: self.load_table(EXPENSES), self.load_summary),
        )

    # ---------- export ----------
    def export_table(self, key: str, directory: Path | str) -> Optional[Path]:
        schema = get_schema(key)
        try:
            path = export_table_xlsx(directory, schema.table_id, schema.headings, self.displayed_rows(key))
        except OSError as e:
            self._report(f"export {key}", e)
            return None
        self.view.show_info(f"Exported {path.name}")
        return path
