"""
Tabular parsing: raw file content → RawGrid.

The parser knows nothing about transaction fields. It splits delimited text
(delimiter sniffed from the content) or reads the first sheet of a workbook,
and hands back rows exactly as found. Rows are never padded or truncated, so
ragged input stays visible to the caller through `find_ragged_rows`.
"""

# txn_importer/controllers/tabular_parser.py
from __future__ import annotations

import csv
import io
import logging
import zipfile
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional, Union

import pandas as pd

from txn_importer.errors import UploadError
from txn_importer.data_model.import_issue import MSG_UPLOAD
from txn_importer.utilities.core_util import is_null_or_whitespace, open_for_read

log = logging.getLogger(__name__)

Cell = Any  # str from text files; str/number/date from workbooks
RawGrid = List[List[Cell]]
Source = Union[str, bytes, Path]

DELIMITERS = ",;\t|"
# openpyxl is the only workbook engine installed
WORKBOOK_SUFFIXES = (".xlsx", ".xlsm")
UNSUPPORTED_WORKBOOK_SUFFIXES = (".xls", ".ods")
_SNIFF_SAMPLE = 64 * 1024


def _upload_error(detail: str) -> UploadError:
    return UploadError(f"{MSG_UPLOAD}: {detail}")


def decode_content(content: Union[str, bytes], encoding: str = "utf-8") -> str:
    """Return text for `content`; bytes are decoded with a BOM-tolerant codec."""
    if isinstance(content, str):
        return content
    codec = "utf-8-sig" if encoding.lower().replace("_", "-") in ("utf-8", "utf8") else encoding
    try:
        return content.decode(codec)
    except (UnicodeDecodeError, LookupError) as e:
        raise _upload_error(f"file is not valid {encoding} text ({e})") from e


def sniff_delimiter(text: str) -> str:
    """Guess the field delimiter among `DELIMITERS`; comma when undecidable."""
    sample = text[:_SNIFF_SAMPLE]
    try:
        return csv.Sniffer().sniff(sample, delimiters=DELIMITERS).delimiter
    except csv.Error:
        return ","


def parse_table(
    content: Union[str, bytes],
    *,
    delimiter: Optional[str] = None,
    encoding: str = "utf-8",
) -> RawGrid:
    """Split delimited text into rows of string cells.

    Parameters
    ----------
    content : str | bytes
        Whole file content.
    delimiter : str, optional
        Field delimiter; sniffed from the content when omitted.
    encoding : str
        Codec for bytes input.

    Returns
    -------
    RawGrid
        One list of cells per non-blank line, in file order.

    Raises
    ------
    UploadError
        If the content is empty, cannot be tokenized, or collapses into a
        single degenerate cell.
    """
    text = decode_content(content, encoding)
    if is_null_or_whitespace(text):
        raise _upload_error("the file is empty")

    delim = delimiter or sniff_delimiter(text)
    try:
        reader = csv.reader(io.StringIO(text, newline=""), delimiter=delim)
        grid: RawGrid = [row for row in reader if any(c.strip() for c in row)]
    except csv.Error as e:
        raise _upload_error(str(e)) from e

    if not grid:
        raise _upload_error("no rows found")
    if len(grid) == 1 and len(grid[0]) == 1:
        raise _upload_error("no columns found")

    log.debug("Parsed %d rows with delimiter %r", len(grid), delim)
    return grid


def _workbook_cell(value: Any) -> Cell:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    if value is pd.NaT:
        return ""
    if isinstance(value, pd.Timestamp):
        return value.date()
    if isinstance(value, datetime):
        return value.date()
    return value


def read_workbook(source: Union[bytes, Path], *, sheet: Union[int, str] = 0) -> RawGrid:
    """Read one worksheet into a RawGrid (no header inference).

    Empty cells become ``""`` and date cells become ``datetime.date``; numbers
    are kept as numbers. Fully empty rows are dropped.

    Requires pandas and openpyxl (.xlsx/.xlsm only).
    """
    handle = io.BytesIO(source) if isinstance(source, (bytes, bytearray)) else source
    try:
        df = pd.read_excel(handle, sheet_name=sheet, header=None, dtype=object)
    except (ValueError, OSError, KeyError, ImportError, zipfile.BadZipFile) as e:
        raise _upload_error(f"workbook could not be read ({e})") from e

    grid: RawGrid = []
    for values in df.itertuples(index=False, name=None):
        row = [_workbook_cell(v) for v in values]
        if any(c != "" for c in row):
            grid.append(row)

    if not grid:
        raise _upload_error("no rows found")
    if len(grid) == 1 and len(grid[0]) == 1:
        raise _upload_error("no columns found")
    log.debug("Read %d rows from worksheet %r", len(grid), sheet)
    return grid


def is_workbook_name(name: Optional[Union[str, Path]]) -> bool:
    return name is not None and Path(name).suffix.lower() in WORKBOOK_SUFFIXES


def load_grid(
    source: Source,
    *,
    name: Optional[Union[str, Path]] = None,
    encoding: str = "utf-8",
) -> RawGrid:
    """Read `source` into a RawGrid.

    A `Path` is read from disk; its suffix (or `name`, for in-memory content)
    selects workbook vs delimited-text parsing.
    """
    if isinstance(source, Path):
        name = name or source
        try:
            with open_for_read(source, binary=True) as f:
                content: Union[str, bytes] = f.read()
        except OSError as e:
            raise _upload_error(f"{source} could not be read ({e})") from e
    else:
        content = source

    suffix = Path(name).suffix.lower() if name is not None else ""
    if suffix in UNSUPPORTED_WORKBOOK_SUFFIXES:
        raise _upload_error(f"{suffix} workbooks are not supported, save the sheet as .xlsx or .csv")
    if is_workbook_name(name):
        if isinstance(content, str):
            raise _upload_error("workbook content must be bytes")
        return read_workbook(content)
    return parse_table(content, encoding=encoding)


def find_ragged_rows(grid: RawGrid) -> list[int]:
    """Indexes of rows whose length differs from the first row's."""
    if not grid:
        return []
    width = len(grid[0])
    return [i for i, row in enumerate(grid) if len(row) != width]


def ensure_rectangular(grid: RawGrid) -> RawGrid:
    """Return `grid` unchanged, or raise UploadError naming the first ragged row."""
    ragged = find_ragged_rows(grid)
    if ragged:
        i = ragged[0]
        raise _upload_error(
            f"row {i + 1} has {len(grid[i])} fields, expected {len(grid[0])}"
        )
    return grid
