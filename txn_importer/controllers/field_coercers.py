# txn_importer/controllers/field_coercers.py
"""
Per-role cell coercers.

Each coercer is a pure function ``(raw, date_format) -> value`` that either
returns a typed value or raises `CoercionError`. Failures carry no row
context; the row assembler adds it.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Callable, Mapping, Optional

from txn_importer.data_model.interfaces import ColumnRole
from txn_importer.errors import CoercionError
from txn_importer.utilities.converters_scalar import to_date, to_date_with_format, to_decimal

Coercer = Callable[[Any, str], Any]


def coerce_date(raw: Any, date_format: str = "") -> date:
    """Strict parse against `date_format`, or permissive parse when it is empty."""
    try:
        if date_format:
            return to_date_with_format(raw, date_format)
        return to_date(raw)
    except ValueError as e:
        raise CoercionError(str(e)) from e


def coerce_amount(raw: Any, date_format: str = "") -> Decimal:
    """Numbers pass through; strings lose currency and grouping marks first."""
    try:
        return to_decimal(raw)
    except ValueError as e:
        raise CoercionError(str(e)) from e


def coerce_description(raw: Any, date_format: str = "") -> str:
    if raw is None:
        return ""
    return raw if isinstance(raw, str) else str(raw)


COERCERS: Mapping[ColumnRole, Optional[Coercer]] = {
    ColumnRole.DATE: coerce_date,
    ColumnRole.DESCRIPTION: coerce_description,
    ColumnRole.AMOUNT: coerce_amount,
    ColumnRole.TOTAL: coerce_amount,
    ColumnRole.UNUSED: None,
}


def coerce(role: ColumnRole, raw: Any, date_format: str = "") -> Any:
    """Dispatch `raw` to the coercer registered for `role`."""
    fn = COERCERS[role]
    if fn is None:
        raise CoercionError(f"Column role {role.value!r} has no value")
    return fn(raw, date_format)
