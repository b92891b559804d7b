from __future__ import annotations

from tkinter import ttk

from bizdash.domain.schema import EXPENSES
from bizdash.ui.views.records_view import RecordsView


class ExpensesView(RecordsView):
    form_title = "Add expense"

    def __init__(self, notebook: ttk.Notebook, app):
        super().__init__(notebook, app, EXPENSES)

    def _build_form(self) -> None:
        self.category_e = self._entry("Category")
        self.amount_e = self._entry("Amount")

    def collect(self):
        category = self._required(self.category_e.get(), "Category")
        amount = self._parse_float(self.amount_e.get(), "Amount")
        return self.app.controller.add_expense, (category, amount)
