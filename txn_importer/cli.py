# txn_importer/cli.py
"""
Command-line front end: import a bank export under a column profile.

    txn-import statement.csv --columns date,description,amount,total \
        --skip-rows 1 --date-format DD.MM.YYYY --account checking -o out.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from txn_importer.controllers import ImportController, write_transactions_csv
from txn_importer.controllers.transaction_export import format_amount
from txn_importer.data_model import ColumnSpec, ImportConfig, load_import_config
from txn_importer.errors import ImportConfigError
from txn_importer.utilities import configure_logging

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="txn-import",
        description="Import a CSV/workbook bank export into typed transactions.",
    )
    ap.add_argument("input", type=Path, help="Path to the .csv/.txt/.xlsx file")
    ap.add_argument("--profile", type=Path,
                    help="JSON column profile (columnSpec, skipRows, dateFormat, account)")
    ap.add_argument("--columns",
                    help="Comma-separated roles per column: date, description, amount, total, "
                         "unused (empty = unused)")
    ap.add_argument("--skip-rows", type=int, help="Leading header rows to skip")
    ap.add_argument("--date-format",
                    help="Date format, e.g. DD.MM.YYYY or %%d.%%m.%%Y (default: permissive)")
    ap.add_argument("--account", help="Account identifier attached to every transaction")
    ap.add_argument("-o", "--output", type=Path, help="Write the imported batch to this CSV")
    ap.add_argument("--encoding", default="utf-8",
                    help="Text encoding of the input (default: utf-8). Try cp1252 for old exports.")
    ap.add_argument("--round", action="store_true", help="Print amounts rounded to whole units")
    ap.add_argument("--log-level", default=None, help="Console log level (default: INFO)")
    return ap


def resolve_config(args: argparse.Namespace) -> ImportConfig:
    """Profile values first, then command-line overrides."""
    config = load_import_config(args.profile) if args.profile else ImportConfig()
    spec = None
    if args.columns is not None:
        spec = ColumnSpec.from_entries(args.columns.split(","))
    return config.with_overrides(
        column_spec=spec,
        skip_rows=args.skip_rows,
        date_format=args.date_format,
        account=args.account,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if not args.input.is_file():
        print(f"Input file not found: {args.input}", file=sys.stderr)
        return EXIT_USAGE
    try:
        config = resolve_config(args)
    except (ImportConfigError, ValueError, OSError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE

    controller = ImportController(encoding=args.encoding)
    result = controller.import_file(args.input, config)

    if not result.ok:
        for issue in result.errors:
            print(str(issue), file=sys.stderr)
        return EXIT_ISSUES

    for t in result.transactions:
        print(f"{t.date.isoformat()}  {format_amount(t.amount, args.round):>14}  {t.description}")
    if args.output:
        n = write_transactions_csv(result.transactions, args.output)
        log.info("Wrote %d transactions to %s", n, args.output)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
