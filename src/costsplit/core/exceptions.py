"""CostSplit exception hierarchy.

Every error carries the HTTP status the API layer answers with.
"""

from __future__ import annotations


class CostSplitError(Exception):
    """Base exception for all CostSplit errors."""

    status_code: int = 500


class ValidationError(CostSplitError):
    """Missing or invalid input (required field, upload type, distribution total)."""

    status_code = 400


class ParseError(CostSplitError):
    """Uploaded content cannot be tokenized or holds too few rows."""

    status_code = 400


class EmptyDatasetError(CostSplitError):
    """Every data row was filtered out as junk."""

    status_code = 400

    def __init__(self, message: str = "No valid rows found in the CSV") -> None:
        super().__init__(message)


class PersistenceError(CostSplitError):
    """Backing store read or write failed."""


class IngestionError(CostSplitError):
    """Unexpected failure while processing an uploaded file."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Error processing CSV file: {message}")
