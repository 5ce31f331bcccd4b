# txn_importer/errors.py
"""Exceptions raised inside the import pipeline.

All of them are ``ValueError`` subclasses so callers that already guard
conversions with ``except ValueError`` keep working. None of them escapes
``ImportController``; they are turned into ``ImportIssue`` records there.
"""

from __future__ import annotations


class CoercionError(ValueError):
    """A single cell could not be converted to its column's type."""


class UploadError(ValueError):
    """The source file could not be read or split into a table."""


class ImportConfigError(ValueError):
    """A column profile or import setting is malformed."""
