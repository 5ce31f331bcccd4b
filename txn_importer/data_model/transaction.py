# txn_importer/data_model/transaction.py
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from functools import total_ordering
from typing import TYPE_CHECKING, Optional

from .interfaces import FlatRecord, IRecord, ITransaction


def _new_id() -> str:
    return uuid.uuid4().hex


@total_ordering
@dataclass(frozen=True)
class Transaction:
    """
    A fully-typed financial record produced by an import run.

    ``date`` and ``amount`` are always converted values. ``total`` is the running
    balance reported by the source, or None when the file has no usable total.
    ``id`` is generated per record and ignored by equality.
    """

    date: date
    description: str
    amount: Decimal
    account: str
    total: Optional[Decimal] = None
    id: str = field(default_factory=_new_id, compare=False)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Transaction):
            return NotImplemented
        return (self.date, self.amount, self.description) < (
            other.date,
            other.amount,
            other.description,
        )

    def to_dict(self) -> FlatRecord:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "description": self.description,
            "amount": str(self.amount),
            "total": "" if self.total is None else str(self.total),
            "account": self.account,
        }


if TYPE_CHECKING:
    _is_ITransaction: type[ITransaction] = Transaction
    _is_IRecord: type[IRecord] = Transaction
