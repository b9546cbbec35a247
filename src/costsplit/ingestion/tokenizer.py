"""Delimited text tokenizer for vendor billing exports."""

from __future__ import annotations

import csv
import io

from costsplit.core.exceptions import ParseError
from costsplit.core.types import RawRow

MIN_ROWS = 2
FIELD_SIZE_LIMIT = 64 * 1024 * 1024

csv.field_size_limit(max(csv.field_size_limit(), FIELD_SIZE_LIMIT))


def decode(content: bytes) -> str:
    """Decode uploaded bytes as UTF-8, dropping a leading byte-order mark."""
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ParseError(f"CSV file is not valid UTF-8 text: {exc}") from exc


def _is_blank(row: RawRow) -> bool:
    return len(row) == 0 or (len(row) == 1 and row[0] == "")


def tokenize(text: str, delimiter: str = ",", quote_char: str = '"') -> list[RawRow]:
    """Split text into rows of raw cell strings, skipping empty rows.

    Quoted cells may embed the delimiter and line breaks; a doubled quote
    inside a quoted cell is a literal quote.

    Raises:
        ParseError: the text is malformed or yields fewer than two rows.
    """
    reader = csv.reader(
        io.StringIO(text, newline=""),
        delimiter=delimiter,
        quotechar=quote_char,
        doublequote=True,
        strict=False,
    )
    try:
        rows = [row for row in reader if not _is_blank(row)]
    except csv.Error as exc:
        raise ParseError(f"CSV file could not be parsed: {exc}") from exc

    if len(rows) < MIN_ROWS:
        raise ParseError("CSV file does not contain enough data")
    return rows
