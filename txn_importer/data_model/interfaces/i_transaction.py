# txn_importer/data_model/interfaces/i_transaction.py
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from typing_extensions import Protocol, runtime_checkable

from .i_record import IRecord


@runtime_checkable
class ITransaction(IRecord, Protocol):
    """Structural shape of a fully-typed imported transaction."""

    id: str
    date: date
    description: str
    amount: Decimal
    total: Optional[Decimal]
    account: str
