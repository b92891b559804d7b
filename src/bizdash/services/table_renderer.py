from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from bizdash.domain.dates import format_date, looks_like_timestamp
from bizdash.domain.schema import TIMESTAMP, Column


def _cell_text(value: Any, column: Optional[Column]) -> str:
    if value is None:
        return ""
    if column is not None:
        is_timestamp = column.kind == TIMESTAMP
    else:
        is_timestamp = looks_like_timestamp(value)
    if is_timestamp:
        return format_date(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_rows(
    rows: Iterable[Sequence[Any]],
    column_count: int,
    columns: Optional[Sequence[Column]] = None,
) -> list[tuple[str, ...]]:
    """
    Turn raw backend rows into display rows of exactly `column_count` cells.

    Longer rows are truncated, shorter rows are padded with "".
    With `columns`, a column tagged as timestamp is date-formatted; without it,
    any value containing the GMT marker is treated as a timestamp.
    """
    if column_count < 0:
        raise ValueError("column_count must be >= 0.")

    out = []
    for row in rows:
        cells = []
        for i in range(column_count):
            value = row[i] if i < len(row) else None
            column = columns[i] if columns is not None and i < len(columns) else None
            cells.append(_cell_text(value, column))
        out.append(tuple(cells))
    return out
