# txn_importer/controllers/__init__.py
from .field_coercers import COERCERS, coerce, coerce_amount, coerce_date, coerce_description
from .import_controller import (
    IMPORT_PARSE_TRANSACTIONS_END,
    IMPORT_PARSE_TRANSACTIONS_START,
    IMPORT_SAVE_TRANSACTIONS,
    ImportController,
    ImportEvent,
    ImportState,
)
from .row_assembler import AssembledBatch, FieldTally, assemble_rows
from .tabular_parser import RawGrid, find_ragged_rows, load_grid, parse_table, read_workbook
from .transaction_export import format_amount, transactions_to_frame, write_transactions_csv
from .validator import validate_batch

__all__ = [
    "COERCERS",
    "coerce",
    "coerce_amount",
    "coerce_date",
    "coerce_description",
    "IMPORT_PARSE_TRANSACTIONS_END",
    "IMPORT_PARSE_TRANSACTIONS_START",
    "IMPORT_SAVE_TRANSACTIONS",
    "ImportController",
    "ImportEvent",
    "ImportState",
    "AssembledBatch",
    "FieldTally",
    "assemble_rows",
    "RawGrid",
    "find_ragged_rows",
    "load_grid",
    "parse_table",
    "read_workbook",
    "format_amount",
    "transactions_to_frame",
    "write_transactions_csv",
    "validate_batch",
]
