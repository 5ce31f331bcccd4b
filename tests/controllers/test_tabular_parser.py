from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

import pandas as pd
import pytest

import txn_importer.controllers.tabular_parser as tp
from txn_importer.errors import UploadError

# --------------------------- parse_table ----------------------------------


def test_parse_table_splits_rows_and_fields():
    # Arrange
    text = "Date,Description,Amount\n2018-01-01,Cool stuff,123\n"
    # Act
    grid = tp.parse_table(text)
    # Assert
    assert grid == [["Date", "Description", "Amount"], ["2018-01-01", "Cool stuff", "123"]]


def test_parse_table_sniffs_semicolon_and_keeps_quoted_commas():
    text = 'Datum;Text;Betrag\n03.04.2021;"Miete, April";-1.234,56\n'
    grid = tp.parse_table(text)
    assert grid[1] == ["03.04.2021", "Miete, April", "-1.234,56"]


def test_parse_table_decodes_bytes_with_bom_and_skips_blank_lines():
    content = "\ufeffa,b\r\n\r\n1,2\r\n".encode("utf-8")
    assert tp.parse_table(content) == [["a", "b"], ["1", "2"]]


def test_parse_table_explicit_delimiter():
    assert tp.parse_table("a|b\n1|2", delimiter="|") == [["a", "b"], ["1", "2"]]


def test_parse_table_keeps_ragged_rows():
    """Rows are neither padded nor truncated; raggedness is left to the caller."""
    grid = tp.parse_table("a,b,c\ne,f")
    assert grid == [["a", "b", "c"], ["e", "f"]]
    assert tp.find_ragged_rows(grid) == [1]


@pytest.mark.parametrize("content", ["", "   \n\n", b"", "hello"])
def test_parse_table_rejects_empty_or_degenerate(content):
    with pytest.raises(UploadError) as ei:
        tp.parse_table(content)
    assert "Cannot parse the file" in str(ei.value)


def test_parse_table_rejects_undecodable_bytes():
    with pytest.raises(UploadError):
        tp.parse_table(b"\xff\xfe\x00bad", encoding="ascii")


# --------------------------- raggedness ----------------------------------


def test_find_ragged_rows_empty_grid():
    assert tp.find_ragged_rows([]) == []


def test_ensure_rectangular_names_first_bad_row():
    with pytest.raises(UploadError) as ei:
        tp.ensure_rectangular([["a", "b", "c"], ["1", "2", "3"], ["e", "f"]])
    assert "row 3 has 2 fields, expected 3" in str(ei.value)


# --------------------------- workbooks ----------------------------------


def test_read_workbook_converts_cells(monkeypatch):
    """read_workbook: NaN → "", timestamps → date, numbers kept, blank rows dropped."""
    df = pd.DataFrame(
        [
            ["Date", "Description", "Amount"],
            [pd.Timestamp("2018-01-01"), "Cool stuff", 123],
            [None, None, None],
            [datetime(2018, 1, 2, 9, 30), float("nan"), -4.5],
        ],
        dtype=object,
    )
    seen = {}

    def fake_read_excel(handle, **kwargs):
        seen.update(kwargs)
        return df

    monkeypatch.setattr(pd, "read_excel", fake_read_excel)

    grid = tp.read_workbook(b"PK fake workbook")

    assert seen["header"] is None
    assert grid == [
        ["Date", "Description", "Amount"],
        [date(2018, 1, 1), "Cool stuff", 123],
        [date(2018, 1, 2), "", -4.5],
    ]


def test_read_workbook_wraps_reader_errors(monkeypatch):
    def boom(handle, **kwargs):
        raise ValueError("Excel file format cannot be determined")

    monkeypatch.setattr(pd, "read_excel", boom)
    with pytest.raises(UploadError):
        tp.read_workbook(b"not a workbook")


def test_load_grid_dispatches_on_suffix(monkeypatch, tmp_path):
    # Arrange
    calls = []
    monkeypatch.setattr(tp, "read_workbook", lambda content: calls.append(content) or [["x", "y"]])
    csv_path = tmp_path / "in.csv"
    csv_path.write_text("a,b\n1,2\n", encoding="utf-8")
    # Act
    from_csv = tp.load_grid(csv_path)
    from_xlsx = tp.load_grid(b"bytes", name="statement.XLSX")
    # Assert
    assert from_csv == [["a", "b"], ["1", "2"]]
    assert from_xlsx == [["x", "y"]]
    assert calls == [b"bytes"]


def test_load_grid_missing_file_is_upload_error(tmp_path):
    with pytest.raises(UploadError):
        tp.load_grid(Path(tmp_path / "nope.csv"))


@pytest.mark.parametrize("name, expected", [("a.xlsx", True), ("B.XLSM", True), ("a.xls", False), ("a.ods", False), (None, False)])
def test_is_workbook_name(name, expected):
    assert tp.is_workbook_name(name) is expected


def test_load_grid_rejects_legacy_workbooks_by_name():
    with pytest.raises(UploadError) as ei:
        tp.load_grid(b"\xd0\xcf\x11\xe0", name="old.xls")
    assert ".xls workbooks are not supported" in str(ei.value)
