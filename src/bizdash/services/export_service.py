from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

log = logging.getLogger(__name__)


def export_table_xlsx(
    directory: Path | str,
    table_id: str,
    headings: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> Path:
    """Write `<table_id>.xlsx` with exactly the headings and rows currently on screen."""
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / f"{table_id}.xlsx"

    wb = Workbook()
    ws = wb.active
    ws.title = "Sheet1"

    ws.append(list(headings))
    for c in ws[1]:
        c.font = Font(bold=True)
    for row in rows:
        ws.append(list(row))

    for idx, heading in enumerate(headings, start=1):
        longest = max([len(str(heading))] + [len(str(r[idx - 1])) for r in rows if len(r) >= idx])
        ws.column_dimensions[get_column_letter(idx)].width = min(max(longest + 2, 8), 60)
    ws.freeze_panes = "A2"

    wb.save(path)
    log.info("table_exported table=%s rows=%s path=%s", table_id, len(rows), path)
    return path
