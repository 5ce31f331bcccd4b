# txn_importer/utilities/converters_scalar.py
from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Final, Optional, overload


def _bad(value: Any, target: str) -> ValueError:
    return ValueError(f"Cannot convert {type(value).__name__} to {target}")


def to_decimal(value: Any) -> Decimal:
    """
    Convert various inputs to Decimal with lenient, locale-aware-ish parsing.

    Supported string formats:
      - "1234", "-1234", "1234-", "(1,234.56)", "-3,188.32"
      - "1,234.56" (US) and "1.234,56" (EU); auto-detects decimal vs thousands
      - Currency symbols/words ignored: "$1,234.56", "EUR 1.234,56", "12,50 €"

    Rules for decimal/thousands detection:
      * If both ',' and '.' appear: the *last* separator is treated as decimal;
        the other is treated as thousands and removed.
      * If only one of ',' or '.' appears:
          - If exactly 3 digits follow it, treat it as thousands (remove it).
          - If 1–2 digits follow it, treat it as decimal.
          - Otherwise, treat as thousands (remove).

    Raises:
        ValueError: if no digits are present, the cleaned value is invalid,
        or the result is not a finite number (NaN, Infinity).

    Examples:
        to_decimal("-3,188.32")        -> Decimal('-3188.32')
        to_decimal("1.234,56")         -> Decimal('1234.56')
        to_decimal("(1,234.56)")       -> Decimal('-1234.56')
        to_decimal("1,234")            -> Decimal('1234')
        to_decimal(123)                -> Decimal('123')
    """
    if isinstance(value, bool):
        raise _bad(value, "Decimal")
    if isinstance(value, Decimal):
        return _finite(value, value)
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        # Avoid binary float artifacts
        return _finite(Decimal(str(value)), value)

    if not isinstance(value, str):
        raise ValueError(
            f"Unsupported type for Decimal conversion: {type(value).__name__}"
        )

    cleaned = clean_number_like_string(value)

    try:
        return _finite(Decimal(cleaned), value)
    except InvalidOperation as e:
        raise ValueError(
            f"Could not parse Decimal from {value!r} (normalized to {cleaned!r})"
        ) from e


def _finite(d: Decimal, original: Any) -> Decimal:
    if not d.is_finite():
        raise ValueError(f"Not a finite number: {original!r}")
    return d


def clean_number_like_string(value: str) -> str:
    s = value.strip()
    if not s:
        raise ValueError("Empty string cannot be converted to Decimal")

    # NBSP, narrow NBSP (EU thousands), unicode minus
    s = s.replace("\xa0", " ").replace("\u202f", " ").replace(_UNICODE_MINUS, "-")
    s = s.strip()

    # Detect negative via parentheses or trailing minus
    neg = False
    if s.startswith("(") and s.endswith(")"):
        neg = True
        s = s[1:-1].strip()
    if s.endswith("-"):
        neg = not neg
        s = s[:-1].strip()

    # Remove currency symbols/letters and anything not in [digits , . - ( )]
    s = _NON_DIGIT_KEEP_SEP.sub("", s)

    if s.startswith("+"):
        s = s[1:]
    if s.startswith("-"):
        neg = not neg
        s = s[1:]

    digits = re.sub(r"[^\d]", "", s)
    if not digits:
        raise ValueError(f"No digits found in input: {value!r}")

    has_comma = "," in s
    has_dot = "." in s

    def _apply_decimal_sep(txt: str, decimal_sep: Optional[str]) -> str:
        if decimal_sep is None:
            return txt.replace(",", "").replace(".", "")
        if decimal_sep == ".":
            return txt.replace(",", "")
        return txt.replace(".", "").replace(",", ".")

    if has_comma and has_dot:
        # Use the last separator as the decimal mark
        dec_sep = "," if s.rfind(",") > s.rfind(".") else "."
        cleaned = _apply_decimal_sep(s, dec_sep)
    elif has_comma or has_dot:
        ch = "," if has_comma else "."
        idx = s.rfind(ch)
        after = len(s) - idx - 1
        dec_sep = ch if after in (1, 2) else None
        cleaned = _apply_decimal_sep(s, dec_sep)
    else:
        cleaned = s

    cleaned = cleaned.strip()
    if neg and cleaned and cleaned[0] != "-":
        cleaned = "-" + cleaned
    return cleaned


def _to_int(v: Any) -> int:
    if isinstance(v, bool):
        raise _bad(v, "int")
    if isinstance(v, int):
        return v
    if isinstance(v, Decimal):
        return int(v)
    if isinstance(v, float):
        if not v.is_integer():
            raise ValueError(f"Non-integer float {v} for int field")
        return int(v)
    if not isinstance(v, str):
        raise ValueError(f"Unsupported type for integer conversion: {type(v).__name__}")
    try:
        return int(v.strip())
    except ValueError as e:
        raise ValueError(f"Could not parse int from {v!r}") from e


def _to_str(v: Any) -> str:
    return "" if v is None else str(v)


@overload
def to_date(s: datetime, /) -> date: ...
@overload
def to_date(s: date, /) -> date: ...
@overload
def to_date(s: str, /) -> date: ...


def to_date(s: object, /) -> date:
    """
    Permissive parse of common date encodings into a date.

    Supported examples:
      - 2024-12-31            (ISO)
      - 2024-12-31T23:59:59Z  (ISO datetime; time/offset ignored)
      - 2024-12-31 23:59:59   (ISO datetime, space separated)
      - 12/31/2024            (US)
      - 12-31-2024, 12.31.2024
      - 2024/12/31, 2024.12.31
      - 20241231              (ISO compact)
      - 31/12/2024            (D/M/Y when unambiguous: first token > 12)
      - 12/31/24              (two-digit year)

    Raises:
        ValueError if the value is empty or no pattern matches.
    """
    if isinstance(s, datetime):
        return s.date()
    if isinstance(s, date):
        return s
    if s is None or not isinstance(s, str):
        raise _bad(s, "date")

    txt = s.strip()
    if not txt:
        raise ValueError("Empty string cannot be converted to date")

    if _ISO_DATE_PREFIX_RE.match(txt):
        iso_dt_clean = re.sub(r"Z$", "", txt)
        try:
            return datetime.fromisoformat(iso_dt_clean).date()
        except ValueError:
            pass

    for fmt in _PERMISSIVE_PATTERNS:
        try:
            return datetime.strptime(txt, fmt).date()
        except ValueError:
            continue

    # Compact ISO: exactly eight digits
    if _COMPACT_ISO_RE.fullmatch(txt):
        try:
            return datetime.strptime(txt, "%Y%m%d").date()
        except ValueError:
            pass

    # D/M/Y vs M/D/Y ambiguity
    m = _DATE_RE_01.match(txt)
    if m:
        a, b, c = m.groups()
        sep = _DATE_RE_02.search(txt).group(0)  # type: ignore[union-attr]
        first = int(a)
        second = int(b)
        year_fmt = "%Y" if len(c) == 4 else "%y"
        is_dmy = first > 12 and second <= 12
        fmt = ("%d{sep}%m{sep}" + year_fmt) if is_dmy else ("%m{sep}%d{sep}" + year_fmt)
        try:
            return datetime.strptime(txt, fmt.format(sep=sep)).date()
        except ValueError:
            pass

    raise ValueError(f"Unrecognized date format: {s!r}")


def translate_date_format(fmt: str) -> str:
    """Return a strptime pattern for ``fmt``.

    ``fmt`` may already be strptime style (contains ``%``) or use the
    moment-style tokens common in bank export settings: ``YYYY YY MMMM MMM MM M
    DD D HH mm ss``. Anything else is kept literally.
    """
    if "%" in fmt:
        return fmt
    return _MOMENT_TOKEN_RE.sub(lambda m: _MOMENT_TOKENS[m.group(0)], fmt)


def to_date_with_format(s: object, fmt: str, /) -> date:
    """Strict parse of ``s`` against one format (see ``translate_date_format``)."""
    if isinstance(s, datetime):
        return s.date()
    if isinstance(s, date):
        return s
    if not isinstance(s, str):
        raise _bad(s, "date")
    txt = s.strip()
    if not txt:
        raise ValueError("Empty string cannot be converted to date")
    pattern = translate_date_format(fmt)
    try:
        return datetime.strptime(txt, pattern).date()
    except ValueError as e:
        raise ValueError(f"{s!r} does not match date format {fmt!r}") from e


_PERMISSIVE_PATTERNS: Final[tuple[str, ...]] = (
    "%Y-%m-%d",  # 2025-01-02
    "%m/%d/%Y",  # 01/02/2025
    "%Y/%m/%d",  # 2025/01/02
    "%Y.%m.%d",  # 2025.01.02
    "%m-%d-%Y",  # 01-02-2025
    "%m.%d.%Y",  # 01.02.2025
)
_MOMENT_TOKENS: Final[Dict[str, str]] = {
    "YYYY": "%Y",
    "YY": "%y",
    "MMMM": "%B",
    "MMM": "%b",
    "MM": "%m",
    "M": "%m",
    "DD": "%d",
    "D": "%d",
    "HH": "%H",
    "mm": "%M",
    "ss": "%S",
}
# Longest tokens first so "YYYY" wins over "YY" and "MMMM" over "MM".
_MOMENT_TOKEN_RE: Final[re.Pattern[str]] = re.compile(
    "|".join(sorted(_MOMENT_TOKENS, key=len, reverse=True))
)
_DATE_RE_01: Final[re.Pattern[str]] = re.compile(
    r"^\s*(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{2,4})\s*$"
)
_COMPACT_ISO_RE: Final[re.Pattern[str]] = re.compile(r"\d{8}")
_ISO_DATE_PREFIX_RE: Final[re.Pattern[str]] = re.compile(r"\d{4}-\d{2}-\d{2}")
_DATE_RE_02: Final[re.Pattern[str]] = re.compile(r"[/\-.]")
SCALAR_CONVERTERS: Dict[type, Any] = {
    int: _to_int,
    str: _to_str,
}
_NON_DIGIT_KEEP_SEP: Final[re.Pattern[str]] = re.compile(r"[^\d,.\-\(\)]+")
_UNICODE_MINUS = "\u2212"  # '−'
