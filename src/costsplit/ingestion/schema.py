"""Column schema derivation from the detected header row."""

from __future__ import annotations

import logging
from collections import Counter

from costsplit.core.exceptions import ParseError
from costsplit.core.types import RawRow
from costsplit.models.ingestion import SchemaColumn

logger = logging.getLogger(__name__)


def build_schema(header: RawRow, reject_duplicates: bool = False) -> list[SchemaColumn]:
    """Keep trimmed, non-empty header names along with their source cell index.

    Data cells are later read by ``position``, so an empty header cell in the
    middle does not shift the columns after it.

    Duplicate names are kept as separate slots; the record built from them
    holds the value of the last occurrence.
    """
    columns = [
        SchemaColumn(name=name, position=position)
        for position, name in enumerate((cell or "").strip() for cell in header)
        if name
    ]

    duplicates = sorted(name for name, n in Counter(c.name for c in columns).items() if n > 1)
    if duplicates:
        if reject_duplicates:
            raise ParseError(f"Duplicate column names in header: {', '.join(duplicates)}")
        logger.warning("Header has duplicate column names %s; last occurrence wins", duplicates)

    return columns
