# txn_importer/data_model/interfaces/enum_column_role.py
from __future__ import annotations

from enum import Enum
from typing import Optional


class ColumnRole(Enum):
    """
    Semantic role a source column plays in an imported transaction.

    Lookup by value is lenient: ``None`` and blank tags mean UNUSED, and tags
    are matched case-insensitively after stripping. Anything that is not a
    string (e.g. ``1`` from a hand-edited profile) is rejected.
    """

    DATE = "date"
    DESCRIPTION = "description"
    AMOUNT = "amount"
    TOTAL = "total"
    UNUSED = "unused"

    @classmethod
    def _missing_(cls, value: object) -> Optional[ColumnRole]:
        if value is None:
            return cls.UNUSED
        if not isinstance(value, str):
            return None
        tag = value.strip().lower()
        if tag == "":
            return cls.UNUSED
        for member in cls:
            if member.value == tag:
                return member
        return None

    @classmethod
    def parse(cls, tag: object) -> ColumnRole:
        """Map a role tag to a member; raises ValueError for unknown tags."""
        if isinstance(tag, ColumnRole):
            return tag
        try:
            return cls(tag)
        except (TypeError, ValueError):
            raise ValueError(f"Unknown column type: {tag!r}") from None
