# txn_importer/controllers/row_assembler.py
"""
Row assembly: apply a ColumnSpec and the field coercers to every data row.

Rows are not rejected one by one in the reported result. Instead one pass
tallies, per required field, how many rows were attempted and how many
converted; the validator turns "none converted" into a batch-level issue.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, List, Optional, Sequence

from txn_importer.data_model import ColumnRole, ColumnSpec, ImportConfig, Transaction
from txn_importer.errors import CoercionError

from .field_coercers import coerce

log = logging.getLogger(__name__)

_MISSING = object()


@dataclass
class FieldTally:
    """Attempted/succeeded counters for one field across a batch."""

    attempted: int = 0
    succeeded: int = 0

    def record(self, ok: bool) -> None:
        self.attempted += 1
        if ok:
            self.succeeded += 1

    @property
    def none_parsed(self) -> bool:
        return self.succeeded == 0

    @property
    def any_failed(self) -> bool:
        return self.succeeded < self.attempted


@dataclass
class RowFailure:
    """A data row that could not become a Transaction."""

    row_index: int  # index in the full grid, header rows included
    roles: tuple[ColumnRole, ...]
    messages: tuple[str, ...]


@dataclass
class AssembledBatch:
    transactions: List[Transaction] = field(default_factory=list)
    failures: List[RowFailure] = field(default_factory=list)
    dates: FieldTally = field(default_factory=FieldTally)
    amounts: FieldTally = field(default_factory=FieldTally)

    @property
    def row_count(self) -> int:
        return len(self.transactions) + len(self.failures)


def _cell(row: Sequence[Any], index: Optional[int]) -> Any:
    if index is None:
        return None
    if index >= len(row):
        return _MISSING
    return row[index]


def assemble_rows(grid: Sequence[Sequence[Any]], config: ImportConfig) -> AssembledBatch:
    """Convert data rows of `grid` into transactions under `config`.

    Assumes `config.column_spec` is structurally valid (date and amount
    assigned). Rows with a failed date or amount are recorded in
    ``failures``; they never appear in ``transactions``.
    """
    spec: ColumnSpec = config.column_spec
    date_col = spec.index_of(ColumnRole.DATE)
    amount_col = spec.index_of(ColumnRole.AMOUNT)
    desc_col = spec.index_of(ColumnRole.DESCRIPTION)
    total_col = spec.index_of(ColumnRole.TOTAL)

    batch = AssembledBatch()
    for i in range(config.skip_rows, len(grid)):
        row = grid[i]
        failed: list[ColumnRole] = []
        messages: list[str] = []
        values: dict[ColumnRole, Any] = {}

        for role, col in ((ColumnRole.DATE, date_col), (ColumnRole.AMOUNT, amount_col)):
            raw = _cell(row, col)
            try:
                if raw is _MISSING:
                    raise CoercionError(f"row has no column {col}")
                values[role] = coerce(role, raw, config.date_format)
                ok = True
            except CoercionError as e:
                failed.append(role)
                messages.append(str(e))
                ok = False
            (batch.dates if role is ColumnRole.DATE else batch.amounts).record(ok)

        if failed:
            batch.failures.append(RowFailure(i, tuple(failed), tuple(messages)))
            log.debug("Row %d: %s", i, "; ".join(messages))
            continue

        raw_desc = _cell(row, desc_col)
        description = coerce(ColumnRole.DESCRIPTION, None if raw_desc is _MISSING else raw_desc)

        total: Optional[Decimal] = None
        raw_total = _cell(row, total_col)
        if raw_total is not None and raw_total is not _MISSING:
            try:
                total = coerce(ColumnRole.TOTAL, raw_total)
            except CoercionError as e:
                log.debug("Row %d: total ignored (%s)", i, e)

        batch.transactions.append(
            Transaction(
                date=values[ColumnRole.DATE],
                description=description,
                amount=values[ColumnRole.AMOUNT],
                total=total,
                account=config.account,
            )
        )

    return batch
