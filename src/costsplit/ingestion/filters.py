"""Junk row elimination: empty rows and end-of-report sentinels."""

from __future__ import annotations

from collections.abc import Sequence

from costsplit.core.types import Record


def is_sentinel(value: str, markers: Sequence[str]) -> bool:
    return value.strip() == "" or any(marker in value for marker in markers)


def is_junk(record: Record, has_data: bool, key_column: str, markers: Sequence[str]) -> bool:
    """True when the row has no data or its key column is blank or a sentinel."""
    if not has_data:
        return True
    return is_sentinel(record.get(key_column, ""), markers)
