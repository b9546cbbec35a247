"""Per-row field extraction and monetary normalization."""

from __future__ import annotations

import re
from collections.abc import Collection, Sequence
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from costsplit.core.types import RawRow, Record
from costsplit.models.ingestion import SchemaColumn

_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_CENTS = Decimal("0.01")


def normalize_money(value: str) -> str:
    """Format a decimal literal to exactly two fractional digits.

    Values that are not a plain base-10 number come back unchanged.
    """
    if not _DECIMAL_RE.match(value):
        return value
    try:
        return str(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return value


def normalize_row(
    row: RawRow,
    columns: Sequence[SchemaColumn],
    monetary_columns: Collection[str],
) -> tuple[Record, bool]:
    """Build the field map for one data row.

    Returns:
        Tuple of (record, has_data) where has_data is True when any
        processed value is non-empty.
    """
    record: Record = {}
    has_data = False
    for column in columns:
        raw = row[column.position] if column.position < len(row) else ""
        value = (raw or "").strip()
        if value and column.name in monetary_columns:
            value = normalize_money(value)
        record[column.name] = value
        if value:
            has_data = True
    return record, has_data
