from __future__ import annotations

from tkinter import ttk

from bizdash.domain.schema import PURCHASES
from bizdash.ui.views._product_pick import ProductPickView


class PurchasesView(ProductPickView):
    form_title = "Add purchase"
    action_name = "add_purchase"

    def __init__(self, notebook: ttk.Notebook, app):
        super().__init__(notebook, app, PURCHASES)
