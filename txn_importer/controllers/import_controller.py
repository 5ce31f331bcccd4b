# txn_importer/controllers/import_controller.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional, Sequence, Union

from txn_importer.data_model import (
    ImportConfig,
    ImportErrorType,
    ImportIssue,
    ImportResult,
    Transaction,
)
from txn_importer.errors import UploadError

from .tabular_parser import RawGrid, ensure_rectangular, load_grid
from .validator import validate_batch

log = logging.getLogger(__name__)

IMPORT_PARSE_TRANSACTIONS_START = "IMPORT_PARSE_TRANSACTIONS_START"
IMPORT_PARSE_TRANSACTIONS_END = "IMPORT_PARSE_TRANSACTIONS_END"
IMPORT_SAVE_TRANSACTIONS = "IMPORT_SAVE_TRANSACTIONS"


class ImportState(Enum):
    IDLE = "idle"
    PARSING = "parsing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class ImportEvent:
    """Lifecycle signal handed to the surrounding UI/state layer."""

    type: str
    transactions: tuple[Transaction, ...] = ()


Dispatch = Callable[[ImportEvent], Any]


@dataclass
class ImportController:
    """
    Orchestrates parser → assembler → validator for one UI session.

    Responsibilities:
    • File imports: Idle → Parsing → Succeeded | Failed → Idle, bracketed by
      START/END events.
    • Saving reviewed data: validation only, no parse events; a SAVE event
      carries the batch for the persistence collaborator.
    • Never raising for bad input: every data problem comes back as an ImportIssue.

    Separate controller instances share nothing.
    """

    dispatch: Optional[Dispatch] = None
    encoding: str = "utf-8"
    state: ImportState = field(default=ImportState.IDLE, init=False)

    def _emit(self, event_type: str, transactions: Sequence[Transaction] = ()) -> None:
        if self.dispatch is not None:
            self.dispatch(ImportEvent(event_type, tuple(transactions)))

    def read_grid(
        self, source: Union[str, bytes, Path], *, name: Optional[Union[str, Path]] = None
    ) -> RawGrid:
        """Parse `source` for review; raises UploadError when it is not a table."""
        return ensure_rectangular(load_grid(source, name=name, encoding=self.encoding))

    def import_file(
        self,
        source: Union[str, bytes, Path],
        config: ImportConfig,
        *,
        name: Optional[Union[str, Path]] = None,
    ) -> ImportResult:
        """Run a full file import.

        Parameters
        ----------
        source : str | bytes | Path
            File content, or a path to read. Workbooks are recognised by the
            suffix of the path or of `name`.
        config : ImportConfig
            Column spec, header rows to skip, date format and target account.
        name : str | Path, optional
            Original file name when `source` is in-memory content.

        Returns
        -------
        ImportResult
            An unreadable file yields exactly one ``upload`` issue.
        """
        self.state = ImportState.PARSING
        self._emit(IMPORT_PARSE_TRANSACTIONS_START)
        log.info("Importing %s", name or (source if isinstance(source, Path) else "<content>"))
        try:
            try:
                grid = self.read_grid(source, name=name)
            except UploadError as e:
                log.info("Upload rejected: %s", e)
                result = ImportResult.failed([ImportIssue(ImportErrorType.UPLOAD, str(e))])
            else:
                result = validate_batch(grid, config)

            self.state = ImportState.SUCCEEDED if result.ok else ImportState.FAILED
            self._emit(IMPORT_PARSE_TRANSACTIONS_END, result.transactions)
            log.info(
                "Import %s: %d transactions, %d issues",
                self.state.value,
                len(result.transactions),
                len(result.errors),
            )
            return result
        finally:
            self.state = ImportState.IDLE

    def save_reviewed(self, grid: RawGrid, config: ImportConfig) -> ImportResult:
        """Validate an already-parsed grid and hand the batch to persistence."""
        result = validate_batch(grid, config)
        if result.ok:
            self._emit(IMPORT_SAVE_TRANSACTIONS, result.transactions)
        return result
