from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Sequence

from bizdash.domain.errors import ParseError


def _at(row: Sequence[Any], index: int) -> Any:
    return row[index] if index < len(row) else None


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _number(value: Any, field_name: str) -> float:
    if value is None or value == "":
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ParseError(f"Field '{field_name}' is not numeric: {value!r}") from None


@dataclass(frozen=True)
class ProductOption:
    id: str
    name: str

    @classmethod
    def from_json(cls, obj: dict) -> "ProductOption":
        if not isinstance(obj, dict):
            raise ParseError(f"Product option must be an object, got {type(obj).__name__}.")
        return cls(id=_text(obj.get("id")), name=_text(obj.get("name")))


@dataclass(frozen=True)
class Sale:
    id: str
    product_id: str
    product_name: str
    quantity: float
    unit_price: float
    amount: float
    profit: float
    timestamp: Optional[str]

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Sale":
        return cls(
            id=_text(_at(row, 0)),
            product_id=_text(_at(row, 1)),
            product_name=_text(_at(row, 2)),
            quantity=_number(_at(row, 3), "quantity"),
            unit_price=_number(_at(row, 4), "unit_price"),
            amount=_number(_at(row, 5), "amount"),
            profit=_number(_at(row, 6), "profit"),
            timestamp=_at(row, 7),
        )


@dataclass(frozen=True)
class Expense:
    id: str
    category: str
    amount: float
    timestamp: Optional[str]

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Expense":
        return cls(
            id=_text(_at(row, 0)),
            category=_text(_at(row, 1)),
            amount=_number(_at(row, 2), "amount"),
            timestamp=_at(row, 3),
        )


@dataclass(frozen=True)
class DashboardSummary:
    total_sales_value: float
    total_purchase_value: float
    total_expenses: float
    total_profit: float
    sales: list[Sale] = field(default_factory=list)
    expenses: list[Expense] = field(default_factory=list)

    @classmethod
    def from_json(cls, obj: dict) -> "DashboardSummary":
        if not isinstance(obj, dict):
            raise ParseError(f"Dashboard data must be an object, got {type(obj).__name__}.")
        return cls(
            total_sales_value=_number(obj.get("totalSalesValue"), "totalSalesValue"),
            total_purchase_value=_number(obj.get("totalPurchaseValue"), "totalPurchaseValue"),
            total_expenses=_number(obj.get("totalExpenses"), "totalExpenses"),
            total_profit=_number(obj.get("totalProfit"), "totalProfit"),
            sales=[Sale.from_row(r) for r in obj.get("salesData") or []],
            expenses=[Expense.from_row(r) for r in obj.get("expensesData") or []],
        )


@dataclass(frozen=True)
class ActionResult:
    status: str
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @classmethod
    def from_json(cls, obj: Any) -> "ActionResult":
        if not isinstance(obj, dict):
            raise ParseError(f"Action response must be an object, got {type(obj).__name__}.")
        return cls(status=_text(obj.get("status")), message=_text(obj.get("message")))


@dataclass(frozen=True)
class Session:
    username: str
    started_at: datetime
