# txn_importer/data_model/__init__.py
from .column_spec import ColumnSpec
from .import_config import ImportConfig, load_import_config
from .import_issue import ImportIssue, ImportResult
from .interfaces import ColumnRole, ImportErrorType, IRecord, ITransaction
from .transaction import Transaction

__all__ = [
    "ColumnRole",
    "ColumnSpec",
    "ImportConfig",
    "ImportErrorType",
    "ImportIssue",
    "ImportResult",
    "IRecord",
    "ITransaction",
    "Transaction",
    "load_import_config",
]
