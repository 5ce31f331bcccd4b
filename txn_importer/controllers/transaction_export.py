# txn_importer/controllers/transaction_export.py
"""
Hand-off helpers for a validated batch: DataFrame, CSV file and display formatting.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Iterable, List, Optional

import pandas as pd

from txn_importer.data_model import Transaction

EXPORT_COLUMNS: List[str] = ["id", "date", "description", "amount", "total", "account"]


def transactions_to_frame(txns: Iterable[Transaction]) -> pd.DataFrame:
    """One row per transaction, columns in `EXPORT_COLUMNS` order.

    Dates stay ``datetime.date`` and amounts stay ``Decimal`` (object dtype),
    so no float rounding happens on the way out.
    """
    records = [
        {
            "id": t.id,
            "date": t.date,
            "description": t.description,
            "amount": t.amount,
            "total": t.total,
            "account": t.account,
        }
        for t in txns
    ]
    return pd.DataFrame.from_records(records, columns=EXPORT_COLUMNS)


def write_transactions_csv(txns: Iterable[Transaction], out_path: Path) -> int:
    """Write `txns` as CSV; returns the number of rows written."""
    df = transactions_to_frame(txns)
    df["date"] = [d.isoformat() for d in df["date"]]
    df["total"] = ["" if v is None else v for v in df["total"]]
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_path, index=False, encoding="utf-8")
    return len(df)


def format_amount(value: Optional[Decimal], round_amount: bool = False) -> str:
    """Render an amount with grouping; whole units when `round_amount`."""
    if value is None:
        return ""
    places = Decimal("1") if round_amount else Decimal("0.01")
    q = Decimal(value).quantize(places, rounding=ROUND_HALF_UP)
    return f"{q:,.0f}" if round_amount else f"{q:,.2f}"
