# txn_importer/data_model/import_config.py
from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

from txn_importer.errors import ImportConfigError
from txn_importer.utilities.core_util import from_dict, open_for_read

from .column_spec import ColumnSpec

# Saved profiles use the camelCase keys of the browser app's state.
_KEY_ALIASES = {
    "columnSpec": "column_spec",
    "skipRows": "skip_rows",
    "dateFormat": "date_format",
}


@dataclass(frozen=True)
class ImportConfig:
    """
    Per-invocation import settings chosen by the user.

    An empty ``date_format`` means "parse dates permissively". An empty
    ``account`` is allowed here and reported by validation.
    """

    column_spec: ColumnSpec = field(default_factory=ColumnSpec)
    skip_rows: int = 0
    date_format: str = ""
    account: str = ""

    def __post_init__(self) -> None:
        if self.skip_rows < 0:
            raise ImportConfigError(f"skip_rows must be >= 0, got {self.skip_rows}")

    def with_overrides(self, **changes: Any) -> ImportConfig:
        """Copy with the given fields replaced; None values are ignored."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_dict(cls, src: Mapping[str, Any]) -> ImportConfig:
        """
        Build a config from a JSON-style mapping.

        Accepts camelCase or snake_case keys; ``columnSpec`` is a list of role
        tags or ``{"type": role}`` entries.
        """
        data = {_KEY_ALIASES.get(k, k): v for k, v in src.items()}
        for key in ("account", "column_spec"):
            if data.get(key) is None:
                data.pop(key, None)
        spec = data.get("column_spec")
        if spec is not None and not isinstance(spec, ColumnSpec):
            if not isinstance(spec, (list, tuple)):
                raise ImportConfigError(
                    f"Invalid import configuration: columnSpec must be a list, "
                    f"got {type(spec).__name__}"
                )
            # {"type": role} entries flatten to the tags ColumnSpec.roles converts
            data["column_spec"] = {
                "roles": [e.get("type") if isinstance(e, Mapping) else e for e in spec]
            }
        try:
            return from_dict(cls, data)
        except ImportConfigError:
            raise
        except (TypeError, ValueError) as e:
            raise ImportConfigError(f"Invalid import configuration: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        return {
            "columnSpec": self.column_spec.to_entries(),
            "skipRows": self.skip_rows,
            "dateFormat": self.date_format,
            "account": self.account,
        }


def load_import_config(path: Path, encoding: str = "utf-8") -> ImportConfig:
    """Read a saved JSON column profile."""
    with open_for_read(path=Path(path), binary=False, encoding=encoding) as f:
        try:
            src = json.load(f)
        except json.JSONDecodeError as e:
            raise ImportConfigError(f"{path}: not valid JSON ({e})") from e
    if not isinstance(src, dict):
        raise ImportConfigError(f"{path}: expected a JSON object")
    return ImportConfig.from_dict(src)
