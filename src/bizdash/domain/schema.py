from __future__ import annotations

from dataclasses import dataclass

TEXT = "text"
NUMBER = "number"
MONEY = "money"
TIMESTAMP = "timestamp"


@dataclass(frozen=True)
class Column:
    name: str
    heading: str
    kind: str = TEXT


@dataclass(frozen=True)
class CollectionSchema:
    """One backend sheet: its collection key, table id and ordered columns."""

    key: str
    table_id: str
    columns: tuple[Column, ...]

    @property
    def sheet_name(self) -> str:
        return self.key[:1].upper() + self.key[1:]

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def headings(self) -> tuple[str, ...]:
        return tuple(c.heading for c in self.columns)


PRODUCTS = CollectionSchema(
    key="products",
    table_id="productsTable",
    columns=(
        Column("id", "ID"),
        Column("name", "Name"),
        Column("cost_price", "Cost Price", MONEY),
        Column("sale_price", "Sale Price", MONEY),
        Column("stock_qty", "Stock", NUMBER),
        Column("updated_at", "Updated", TIMESTAMP),
    ),
)

PURCHASES = CollectionSchema(
    key="purchases",
    table_id="purchasesTable",
    columns=(
        Column("id", "ID"),
        Column("product_id", "Product ID"),
        Column("product_name", "Product"),
        Column("quantity", "Qty", NUMBER),
        Column("unit_cost", "Unit Cost", MONEY),
        Column("total_cost", "Total Cost", MONEY),
        Column("timestamp", "Date", TIMESTAMP),
    ),
)

SALES = CollectionSchema(
    key="sales",
    table_id="salesTable",
    columns=(
        Column("id", "ID"),
        Column("product_id", "Product ID"),
        Column("product_name", "Product"),
        Column("quantity", "Qty", NUMBER),
        Column("unit_price", "Unit Price", MONEY),
        Column("amount", "Amount", MONEY),
        Column("profit", "Profit", MONEY),
        Column("timestamp", "Date", TIMESTAMP),
    ),
)

EXPENSES = CollectionSchema(
    key="expenses",
    table_id="expensesTable",
    columns=(
        Column("id", "ID"),
        Column("category", "Category"),
        Column("amount", "Amount", MONEY),
        Column("timestamp", "Date", TIMESTAMP),
    ),
)

COLLECTIONS: dict[str, CollectionSchema] = {
    s.key: s for s in (PRODUCTS, PURCHASES, SALES, EXPENSES)
}


def get_schema(key: str) -> CollectionSchema:
    try:
        return COLLECTIONS[key]
    except KeyError:
        raise KeyError(f"Unknown collection: {key}") from None
