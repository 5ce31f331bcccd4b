# txn_importer/controllers/validator.py
"""
Batch validation with fixed precedence.

1. A structural ColumnSpec problem is reported alone.
2. Otherwise the amount, date and account checks all run and may all report.
Issues are keyed by type, so a category is reported at most once per run.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Sequence

from txn_importer.data_model import ImportConfig, ImportErrorType, ImportIssue, ImportResult
from txn_importer.data_model.import_issue import MSG_ACCOUNT, MSG_AMOUNT, MSG_DATE
from txn_importer.utilities.core_util import is_null_or_whitespace

from .row_assembler import AssembledBatch, assemble_rows

log = logging.getLogger(__name__)

IssueMap = Dict[ImportErrorType, ImportIssue]


def _add(issues: IssueMap, kind: ImportErrorType, message: str) -> None:
    issues.setdefault(kind, ImportIssue(kind, message))


def check_fields(batch: AssembledBatch, issues: IssueMap) -> None:
    """Report amount/date issues for fields that no row could convert."""
    if batch.amounts.none_parsed:
        _add(issues, ImportErrorType.AMOUNT, MSG_AMOUNT)
    if batch.dates.none_parsed:
        _add(issues, ImportErrorType.DATE, MSG_DATE)

    # Every row failed on some field, but neither field failed on all rows.
    if not batch.transactions and not issues:
        if batch.amounts.any_failed:
            _add(issues, ImportErrorType.AMOUNT, MSG_AMOUNT)
        if batch.dates.any_failed:
            _add(issues, ImportErrorType.DATE, MSG_DATE)


def check_account(account: Any, issues: IssueMap) -> None:
    if account is None or (isinstance(account, str) and is_null_or_whitespace(account)):
        _add(issues, ImportErrorType.ACCOUNT, MSG_ACCOUNT)


def validate_batch(grid: Sequence[Sequence[Any]], config: ImportConfig) -> ImportResult:
    """Assemble and validate `grid` under `config`.

    Returns
    -------
    ImportResult
        Transactions tagged with ``config.account`` when no issue was found;
        otherwise the issues and no transactions.
    """
    issues: IssueMap = {}

    spec_issue = config.column_spec.validate()
    if spec_issue is not None:
        log.info("Column spec rejected: %s", spec_issue.message)
        return ImportResult.failed([spec_issue])

    batch = assemble_rows(grid, config)
    check_fields(batch, issues)
    check_account(config.account, issues)

    if issues:
        log.info(
            "Import rejected (%d data rows): %s",
            batch.row_count,
            ", ".join(k.value for k in issues),
        )
        return ImportResult.failed(issues)

    if batch.failures:
        log.warning(
            "Dropped %d of %d rows that could not be converted (first: row %d)",
            len(batch.failures),
            batch.row_count,
            batch.failures[0].row_index + 1,
        )
    log.info("Validated %d transactions for account %s", len(batch.transactions), config.account)
    return ImportResult.succeeded(batch.transactions)
