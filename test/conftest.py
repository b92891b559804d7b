import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def sale_row(amount, timestamp, sale_id="S1"):
    return [sale_id, "P1", "Pen", 1, amount, amount, 10, timestamp]


def expense_row(category, amount, expense_id="E1"):
    return [expense_id, category, amount, "2024-01-01T00:00:00.000Z"]
