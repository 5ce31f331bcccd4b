from enum import Enum


class ImportErrorType(Enum):
    """
    Category of a problem reported by an import run. At most one issue per category.
    """
    COLUMN_SPEC = "columnSpec"
    AMOUNT = "amount"
    DATE = "date"
    ACCOUNT = "account"
    UPLOAD = "upload"
