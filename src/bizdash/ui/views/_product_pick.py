from __future__ import annotations

from bizdash.domain.errors import ValidationError
from bizdash.domain.models import ProductOption
from bizdash.ui.views.records_view import RecordsView


class ProductPickView(RecordsView):
    """Records view whose form picks a product and a quantity."""

    action_name = ""

    def _build_form(self) -> None:
        self.product_pick = self._combo("Product")
        self.qty_e = self._entry("Quantity")
        self._choice_ids: dict[str, str] = {}

    def set_product_choices(self, options: list[ProductOption]) -> None:
        self._choice_ids = {f"{o.name} ({o.id})": o.id for o in options}
        self.product_pick["values"] = list(self._choice_ids)
        if self.product_pick.get() not in self._choice_ids:
            self.product_pick.set("")

    def collect(self):
        picked = self.product_pick.get().strip()
        if not picked:
            raise ValidationError("Select a product.")
        product_id = self._choice_ids.get(picked)
        if product_id is None:
            raise ValidationError("Pick a product from the dropdown list.")
        qty = self._parse_int(self.qty_e.get(), "Quantity", 1)
        return getattr(self.app.controller, self.action_name), (product_id, qty)
