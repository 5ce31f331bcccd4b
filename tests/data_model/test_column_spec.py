from __future__ import annotations

import pytest

from txn_importer.data_model import ColumnRole, ColumnSpec, ImportErrorType, ImportIssue


def _issue(message: str) -> ImportIssue:
    return ImportIssue(ImportErrorType.COLUMN_SPEC, message)


@pytest.mark.parametrize(
    "tag, expected",
    [
        ("date", ColumnRole.DATE),
        ("Amount", ColumnRole.AMOUNT),
        (" total ", ColumnRole.TOTAL),
        ("", ColumnRole.UNUSED),
        (None, ColumnRole.UNUSED),
        (ColumnRole.DESCRIPTION, ColumnRole.DESCRIPTION),
    ],
)
def test_column_role_parse(tag, expected):
    assert ColumnRole.parse(tag) is expected


@pytest.mark.parametrize("tag", ["payee", 1, 2.5, ["date"]])
def test_column_role_parse_unknown_tag_raises(tag):
    with pytest.raises(ValueError) as ei:
        ColumnRole.parse(tag)
    assert "Unknown column type" in str(ei.value)


def test_column_role_lookup_by_value_is_lenient():
    assert ColumnRole(" Date ") is ColumnRole.DATE
    assert ColumnRole("") is ColumnRole.UNUSED
    with pytest.raises(ValueError):
        ColumnRole(1)


def test_from_entries_accepts_mappings_and_tags():
    # Arrange
    entries = [{"type": "date"}, {"type": ""}, "amount", {}]
    # Act
    spec = ColumnSpec.from_entries(entries)
    # Assert
    assert spec.roles == (
        ColumnRole.DATE,
        ColumnRole.UNUSED,
        ColumnRole.AMOUNT,
        ColumnRole.UNUSED,
    )
    assert spec.index_of(ColumnRole.AMOUNT) == 2
    assert spec.index_of(ColumnRole.TOTAL) is None
    assert spec.to_entries()[0] == {"type": "date"}


def test_valid_spec_has_no_issue():
    spec = ColumnSpec.of("date", "description", "amount", "total")
    assert spec.validate() is None


def test_description_and_total_are_optional():
    assert ColumnSpec.of("amount", "date").validate() is None


def test_missing_date_column():
    spec = ColumnSpec.of("", "description", "amount", "total")
    assert spec.validate() == _issue("Please select a date column")


def test_missing_amount_column():
    spec = ColumnSpec.of("date", "description", "unused", "total")
    assert spec.validate() == _issue("Please select an amount column")


def test_missing_both_reports_date_first():
    spec = ColumnSpec.of("description", "total")
    assert spec.validate() == _issue("Please select a date column")


def test_empty_spec_reports_date_first():
    assert ColumnSpec().validate() == _issue("Please select a date column")


@pytest.mark.parametrize(
    "roles, role_name",
    [
        (("date", "date", "amount"), "date"),
        (("date", "amount", "amount"), "amount"),
        (("date", "amount", "description", "description"), "description"),
        (("date", "amount", "total", "total"), "total"),
    ],
)
def test_duplicate_roles_are_rejected(roles, role_name):
    spec = ColumnSpec.of(*roles)
    assert spec.validate() == _issue(f"Please select only one {role_name} column")


def test_unused_may_repeat():
    assert ColumnSpec.of("unused", "date", "unused", "amount", "").validate() is None
