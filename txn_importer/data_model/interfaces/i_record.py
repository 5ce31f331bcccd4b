# txn_importer/data_model/interfaces/i_record.py
from __future__ import annotations

from typing_extensions import Protocol, TypeAlias, runtime_checkable

# Export rows and issue payloads are flat: every value is already text.
FlatRecord: TypeAlias = dict[str, str]


@runtime_checkable
class IRecord(Protocol):
    """Anything the import layer hands out as a flat, string-valued mapping."""

    def to_dict(self) -> FlatRecord: ...
