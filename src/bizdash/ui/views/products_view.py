from __future__ import annotations

from tkinter import ttk

from bizdash.domain.schema import PRODUCTS
from bizdash.ui.views.records_view import RecordsView


class ProductsView(RecordsView):
    form_title = "Add product"

    def __init__(self, notebook: ttk.Notebook, app):
        super().__init__(notebook, app, PRODUCTS)

    def _build_form(self) -> None:
        self.p_name = self._entry("Name")
        self.p_cost = self._entry("Cost price")
        self.p_price = self._entry("Sale price")

    def collect(self):
        name = self._required(self.p_name.get(), "Name")
        cost = self._parse_float(self.p_cost.get(), "Cost price")
        price = self._parse_float(self.p_price.get(), "Sale price")
        return self.app.controller.add_product, (name, cost, price)
