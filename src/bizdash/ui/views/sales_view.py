from __future__ import annotations

from tkinter import ttk

from bizdash.domain.schema import SALES
from bizdash.ui.views._product_pick import ProductPickView


class SalesView(ProductPickView):
    form_title = "Add sale"
    action_name = "add_sale"

    def __init__(self, notebook: ttk.Notebook, app):
        super().__init__(notebook, app, SALES)
