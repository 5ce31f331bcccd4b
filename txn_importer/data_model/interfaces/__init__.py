# txn_importer/data_model/interfaces/__init__.py
"""
Interfaces and Enums for the import data model.
"""

from .enum_column_role import ColumnRole
from .enum_import_error_type import ImportErrorType
from .i_record import FlatRecord, IRecord
from .i_transaction import ITransaction

__all__ = [
    "ColumnRole",
    "ImportErrorType",
    "IRecord",
    "ITransaction",
    "FlatRecord",
]
