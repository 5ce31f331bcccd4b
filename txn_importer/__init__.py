# txn_importer/__init__.py
"""
Transaction import pipeline: tabular file → typed, validated transactions.
"""

from .controllers import ImportController, parse_table, validate_batch
from .data_model import (
    ColumnRole,
    ColumnSpec,
    ImportConfig,
    ImportErrorType,
    ImportIssue,
    ImportResult,
    Transaction,
)

__version__ = "0.1.0"

__all__ = [
    "ColumnRole",
    "ColumnSpec",
    "ImportConfig",
    "ImportController",
    "ImportErrorType",
    "ImportIssue",
    "ImportResult",
    "Transaction",
    "parse_table",
    "validate_batch",
]
