from .config_logging import LOGGING, configure_logging
from .converters_scalar import to_date, to_date_with_format, to_decimal
from .core_util import (
    convert_value,
    from_dict,
    is_null_or_whitespace,
    open_for_read,
)

__all__ = [
    "is_null_or_whitespace",
    "to_date",
    "to_date_with_format",
    "to_decimal",
    "convert_value",
    "from_dict",
    "open_for_read",
    "LOGGING",
    "configure_logging",
]
