"""Domain exceptions for synthetic outreach analytics.

All domain-specific exceptions inherit from ``SyntheticOutreachError`` so
callers can catch the full family with a single ``except`` clause when needed.
Generation and derivation never raise; only importing external data can fail.
"""

from __future__ import annotations

from typing import Any


class SyntheticOutreachError(Exception):
    """Base exception for all synthetic outreach errors."""

    def __init__(self, message: str = "", details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details: dict[str, Any] = details or {}


class ParseError(SyntheticOutreachError):
    """Raised when a dashboard CSV cannot be imported.

    Covers empty files, missing header columns, out-of-domain enum values,
    rows with missing required values, unreadable timestamps, and malformed
    embedded summary metadata.  No partial result is ever returned alongside
    this error.
    """

    def __init__(
        self,
        message: str = "CSV could not be parsed",
        line_number: int | None = None,
        column: str = "",
        value: str | None = None,
        missing_columns: tuple[str, ...] = (),
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.line_number = line_number
        self.column = column
        self.value = value
        self.missing_columns = missing_columns
