# txn_importer/data_model/import_issue.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Mapping

from .interfaces import FlatRecord, ImportErrorType, IRecord
from .transaction import Transaction

# Message strings are part of the public contract; UIs and tests match them verbatim.
MSG_MISSING_DATE_COLUMN = "Please select a date column"
MSG_MISSING_AMOUNT_COLUMN = "Please select an amount column"
MSG_DUPLICATE_COLUMN = "Please select only one {role} column"
MSG_AMOUNT = "Cannot parse all amounts as numbers, perhaps you need to skip a header?"
MSG_DATE = (
    "Cannot parse all dates correctly, "
    "perhaps you need to skip a header, or change the date format?"
)
MSG_ACCOUNT = "Account is required"
MSG_UPLOAD = "Cannot parse the file"


@dataclass(frozen=True)
class ImportIssue:
    """One reported problem; ``type`` identifies the category."""

    type: ImportErrorType
    message: str

    def to_dict(self) -> FlatRecord:
        return {"type": self.type.value, "message": self.message}

    def __str__(self) -> str:
        return f"{self.type.value}: {self.message}"


@dataclass(frozen=True)
class ImportResult:
    """Outcome of one run: either transactions or issues, never both."""

    transactions: tuple[Transaction, ...] = ()
    errors: tuple[ImportIssue, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.errors

    @classmethod
    def failed(cls, issues: Mapping[ImportErrorType, ImportIssue] | Iterable[ImportIssue]) -> ImportResult:
        values = issues.values() if isinstance(issues, Mapping) else issues
        return cls(transactions=(), errors=tuple(values))

    @classmethod
    def succeeded(cls, transactions: Iterable[Transaction]) -> ImportResult:
        return cls(transactions=tuple(transactions), errors=())


if TYPE_CHECKING:
    _is_IRecord: type[IRecord] = ImportIssue
