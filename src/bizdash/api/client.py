from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional

import requests

from bizdash.domain.errors import ApplicationError, ParseError, TransportError
from bizdash.domain.models import ActionResult, DashboardSummary, ProductOption
from bizdash.domain.schema import CollectionSchema

log = logging.getLogger("bizdash.api")


def _no_busy(_on: bool) -> None:
    return None


class ApiClient:
    """Client for the spreadsheet web-app endpoint: POST <endpoint>?action=<name> with a JSON body."""

    def __init__(
        self,
        endpoint: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        busy: Callable[[bool], None] | None = None,
    ):
        self.endpoint = endpoint
        self.http = session or requests.Session()
        self.timeout = timeout
        self.busy = busy or _no_busy

    def call(self, action: str, payload: Optional[dict] = None) -> Any:
        body = json.dumps(payload or {})
        self.busy(True)
        try:
            try:
                r = self.http.post(
                    self.endpoint,
                    params={"action": action},
                    data=body,
                    timeout=self.timeout,
                )
                r.raise_for_status()
            except requests.RequestException as e:
                log.error("api_transport_failed action=%s error=%s", action, e)
                raise TransportError(str(e)) from e

            try:
                data = r.json()
            except ValueError as e:
                log.error("api_parse_failed action=%s status=%s", action, r.status_code)
                raise ParseError(f"Response to '{action}' is not valid JSON.") from e

            log.info("api_call action=%s status=%s", action, r.status_code)
            return data
        finally:
            self.busy(False)

    # ---------- mutations ----------
    def _mutation(self, action: str, payload: dict) -> ActionResult:
        return ActionResult.from_json(self.call(action, payload))

    def login(self, username: str, password: str) -> ActionResult:
        return self._mutation("login", {"username": username, "password": password})

    def add_product(self, product_name: str, cost_price: float, sale_price: float) -> ActionResult:
        return self._mutation(
            "addProduct",
            {"productName": product_name, "costPrice": cost_price, "salePrice": sale_price},
        )

    def add_purchase(self, product_id: str, quantity: int) -> ActionResult:
        return self._mutation("addPurchase", {"productId": product_id, "quantity": quantity})

    def add_sale(self, product_id: str, quantity: int) -> ActionResult:
        return self._mutation("addSale", {"productId": product_id, "quantity": quantity})

    def add_expense(self, expense_category: str, amount: float) -> ActionResult:
        return self._mutation("addExpense", {"expenseCategory": expense_category, "amount": amount})

    # ---------- queries ----------
    def _expect_list(self, action: str, data: Any) -> list:
        if isinstance(data, list):
            return data
        if isinstance(data, dict) and data.get("status") == "error":
            raise ApplicationError(str(data.get("message") or f"{action} failed."))
        if data is None:
            return []
        raise ParseError(f"Response to '{action}' must be a list, got {type(data).__name__}.")

    def get_dashboard_data(self) -> DashboardSummary:
        data = self.call("getDashboardData")
        if isinstance(data, dict) and data.get("status") == "error":
            raise ApplicationError(str(data.get("message") or "getDashboardData failed."))
        return DashboardSummary.from_json(data)

    def get_data(self, schema: CollectionSchema) -> list[list]:
        rows = self._expect_list("getData", self.call("getData", {"sheetName": schema.sheet_name}))
        out = []
        for row in rows:
            if not isinstance(row, list):
                raise ParseError(f"Row in '{schema.sheet_name}' must be a list, got {type(row).__name__}.")
            out.append(row)
        return out

    def get_products_list(self) -> list[ProductOption]:
        items = self._expect_list("getProductsList", self.call("getProductsList"))
        return [ProductOption.from_json(it) for it in items]
