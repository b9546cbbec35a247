"""Heuristic header row detection.

Vendor exports often prepend title or banner rows with one or two populated
cells before the real header, so row 0 cannot be trusted.
"""

from __future__ import annotations

from collections.abc import Sequence

from costsplit.core.types import RawRow


def score(row: RawRow) -> int:
    """Count of cells that are non-empty after trimming."""
    return sum(1 for cell in row if cell and cell.strip())


def detect_header(rows: Sequence[RawRow], scan_rows: int = 5) -> tuple[int, RawRow]:
    """Return (index, cells) of the best-scoring row among the first ``scan_rows``.

    Ties go to the earliest row.
    """
    best_index = 0
    best_score = 0
    for index, row in enumerate(rows[:scan_rows]):
        row_score = score(row)
        if row_score > best_score:
            best_score = row_score
            best_index = index
    return best_index, rows[best_index]
