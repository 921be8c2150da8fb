import csv
import os
from typing import Iterable, List

from data_models import CardRecord

FIELDNAMES: List[str] = [
    "title",
    "code",
    "value",
    "expiry",
    "purchase_date",
    "status",
    "order_id",
    "order_total",
]


def _ensure_dir(path: str) -> None:
    d = os.path.dirname(os.path.abspath(path))
    if d and not os.path.exists(d):
        os.makedirs(d, exist_ok=True)


def export_records_csv(path: str, records: Iterable[CardRecord], append: bool = False) -> int:
    rows = [r.as_row() for r in records]
    if not rows:
        return 0
    _ensure_dir(path)
    mode = "a" if append and os.path.exists(path) else "w"
    with open(path, mode, newline="", encoding="utf-8-sig") as f:
        w = csv.DictWriter(f, fieldnames=FIELDNAMES)
        if mode == "w":
            w.writeheader()
        w.writerows(rows)
    return len(rows)
