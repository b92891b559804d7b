from datetime import datetime
from pathlib import Path

import pytest
from openpyxl import load_workbook

from bizdash.domain.errors import ApplicationError, TransportError
from bizdash.domain.models import ActionResult, DashboardSummary, ProductOption, Session
from bizdash.domain.schema import PRODUCTS, get_schema
from bizdash.services.auth_service import AuthService
from bizdash.services.dashboard_controller import DashboardController

PRODUCT_ROWS = [["P1", "Pen", 1, 2, 10, "Mon Jan 01 2024 00:00:00 GMT+0000 (Coordinated Universal Time)"]]


class FakeApi:
    def __init__(self):
        self.calls = []
        self.results = {}
        self.tables = {
            "Products": PRODUCT_ROWS,
            "Purchases": [],
            "Sales": [],
            "Expenses": [["E1", "Rent", 1000, "2024-01-01T00:00:00.000Z"]],
        }
        self.summary = {
            "totalSalesValue": 150,
            "totalPurchaseValue": 40,
            "totalExpenses": 1000,
            "totalProfit": -890,
            "salesData": [["S1", "P1", "Pen", 1, 100, 100, 10, "2024-01-01T00:00:00.000Z"],
                          ["S2", "P1", "Pen", 1, 50, 50, 5, "2024-01-01T00:00:00.000Z"]],
            "expensesData": [["E1", "Rent", 1000, "2024-01-01T00:00:00.000Z"]],
        }
        self.fail_actions = set()

    def _check(self, action):
        self.calls.append(action)
        if action in self.fail_actions:
            raise TransportError("connection refused")

    def get_dashboard_data(self):
        self._check("getDashboardData")
        return DashboardSummary.from_json(self.summary)

    def get_products_list(self):
        self._check("getProductsList")
        return [ProductOption(id="P1", name="Pen")]

    def get_data(self, schema):
        self._check(f"getData:{schema.sheet_name}")
        return self.tables[schema.sheet_name]

    def _mutation(self, action):
        self._check(action)
        return self.results.get(action, ActionResult("success"))

    def add_product(self, product_name, cost_price, sale_price):
        return self._mutation("addProduct")

    def add_purchase(self, product_id, quantity):
        return self._mutation("addPurchase")

    def add_sale(self, product_id, quantity):
        return self._mutation("addSale")

    def add_expense(self, expense_category, amount):
        return self._mutation("addExpense")


class RecordingView:
    def __init__(self):
        self.events = []

    def show_summary(self, kpis, sales, expenses):
        self.events.append(("summary", kpis, sales, expenses))

    def show_product_choices(self, options):
        self.events.append(("choices", options))

    def show_table(self, schema, rows):
        self.events.append(("table", schema.key, rows))

    def show_page(self, name, title):
        self.events.append(("page", name, title))

    def reset_form(self, form):
        self.events.append(("reset", form))

    def show_info(self, message):
        self.events.append(("info", message))

    def show_error(self, title, message):
        self.events.append(("error", title, message))

    def show_login(self):
        self.events.append(("login",))

    def of(self, kind):
        return [e for e in self.events if e[0] == kind]


def _controller():
    api = FakeApi()
    view = RecordingView()
    auth = AuthService(api)
    session = Session(username="admin", started_at=datetime(2024, 1, 1))
    auth.store.start(session)
    return DashboardController(api, auth, session, view), api, view


def test_enter_loads_summary_then_choices_then_four_tables():
    controller, api, view = _controller()

    controller.enter()

    assert api.calls == [
        "getDashboardData",
        "getProductsList",
        "getData:Products",
        "getData:Purchases",
        "getData:Sales",
        "getData:Expenses",
    ]
    _, kpis, sales, expenses = view.of("summary")[0]
    assert kpis.total_sales == "₹150.00"
    assert kpis.total_profit == "₹-890.00"
    assert sales.labels == ("1/1/2024",)
    assert sales.values == (150,)
    assert expenses == {"Rent": 1000}
    assert [e[1] for e in view.of("table")] == ["products", "purchases", "sales", "expenses"]
    assert controller.displayed_rows("products") == [("P1", "Pen", "1", "2", "10", "1/1/2024")]


def test_add_product_error_keeps_form_and_table():
    controller, api, view = _controller()
    controller.load_table(PRODUCTS)
    before = controller.displayed_rows("products")
    api.results["addProduct"] = ActionResult("error", "Duplicate name")
    api.calls.clear()
    view.events.clear()

    ok = controller.add_product("Pen", 1.0, 2.0)

    assert ok is False
    assert view.events == [("error", "Error", "Duplicate name")]
    assert api.calls == ["addProduct"]
    assert controller.displayed_rows("products") == before


@pytest.mark.parametrize(
    "method, args, form, expected_refresh",
    [
        ("add_product", ("Pen", 1.0, 2.0), "product", ["getProductsList", "getData:Products"]),
        ("add_purchase", ("P1", 3), "purchase", ["getData:Purchases", "getData:Products", "getDashboardData"]),
        ("add_sale", ("P1", 1), "sale", ["getData:Sales", "getData:Products", "getDashboardData"]),
        ("add_expense", ("Rent", 10.0), "expense", ["getData:Expenses", "getDashboardData"]),
    ],
)
def test_successful_add_resets_form_and_refreshes_changed_views(method, args, form, expected_refresh):
    controller, api, view = _controller()

    ok = getattr(controller, method)(*args)

    assert ok is True
    assert api.calls[1:] == expected_refresh
    assert ("reset", form) in view.events
    assert view.of("info")
    assert not view.of("error")


def test_transport_failure_on_submit_is_reported_and_form_kept():
    controller, api, view = _controller()
    api.fail_actions.add("addSale")

    ok = controller.add_sale("P1", 1)

    assert ok is False
    assert view.of("reset") == []
    (_, title, message), = view.of("error")
    assert message == "An error occurred: connection refused"


def test_failed_table_fetch_clears_table_and_reports():
    controller, api, view = _controller()
    api.fail_actions.add("getData:Expenses")

    controller.load_all_tables()

    assert ("table", "expenses", []) in view.events
    assert len(view.of("error")) == 1


def test_failed_summary_fetch_does_not_update_kpis():
    controller, api, view = _controller()
    api.fail_actions.add("getDashboardData")

    controller.load_summary()

    assert view.of("summary") == []
    assert len(view.of("error")) == 1


def test_stale_table_response_is_dropped():
    controller, api, view = _controller()
    old_rows = [["OLD", "Old pen"]]
    new_rows = [["NEW", "New pen"]]
    original_get_data = api.get_data
    state = {"first": True}

    def overlapping_get_data(schema):
        if state["first"]:
            state["first"] = False
            api.tables["Products"] = new_rows
            controller.load_table(PRODUCTS)
            return old_rows
        return original_get_data(schema)

    api.get_data = overlapping_get_data

    controller.load_table(PRODUCTS)

    tables = view.of("table")
    assert len(tables) == 1
    assert tables[0][2][0][0] == "NEW"
    assert controller.displayed_rows("products")[0][0] == "NEW"


def test_switch_view_sets_capitalized_title_without_reload():
    controller, api, view = _controller()

    controller.switch_view("purchases")

    assert view.events == [("page", "purchases", "Purchases")]
    assert api.calls == []
    with pytest.raises(ValueError):
        controller.switch_view("settings")


def test_logout_clears_session_and_shows_login():
    controller, _, view = _controller()

    controller.logout()

    assert controller.auth.session is None
    assert view.events == [("login",)]


def test_export_writes_displayed_rows(tmp_path: Path):
    controller, _, view = _controller()
    controller.load_table(PRODUCTS)

    path = controller.export_table("products", tmp_path)

    assert path == tmp_path / "productsTable.xlsx"
    wb = load_workbook(path)
    ws = wb.active
    assert ws.title == "Sheet1"
    values = [list(r) for r in ws.iter_rows(values_only=True)]
    assert values[0] == list(PRODUCTS.headings)
    assert values[1:] == [["P1", "Pen", "1", "2", "10", "1/1/2024"]]
    assert ("info", "Exported productsTable.xlsx") in view.events


def test_controller_requires_session():
    api = FakeApi()
    with pytest.raises(ApplicationError):
        DashboardController(api, AuthService(api), None, RecordingView())


def test_tables_show_backend_cell_text_without_float_coercion():
    controller, api, view = _controller()

    controller.load_table(get_schema("expenses"))

    assert controller.displayed_rows("expenses") == [("E1", "Rent", "1000", "1/1/2024")]
