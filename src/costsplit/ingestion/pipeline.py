"""Ingestion pipeline: tokenize, detect header, normalize, filter, assemble.

A single synchronous pass over the complete file content. Nothing here touches
persistence; the caller owns the uploaded file and its cleanup.
"""

from __future__ import annotations

import logging
from pathlib import Path

from costsplit.core.exceptions import EmptyDatasetError
from costsplit.ingestion.filters import is_junk
from costsplit.ingestion.header import detect_header
from costsplit.ingestion.normalizer import normalize_row
from costsplit.ingestion.schema import build_schema
from costsplit.ingestion.tokenizer import decode, tokenize
from costsplit.models.ingestion import Dataset, IngestionRules

logger = logging.getLogger(__name__)


class BillingCsvParser:
    """Turns a noisy vendor billing export into a clean Dataset."""

    def __init__(self, rules: IngestionRules | None = None) -> None:
        self._rules = rules or IngestionRules()

    @property
    def rules(self) -> IngestionRules:
        return self._rules

    def parse_text(self, text: str) -> Dataset:
        """Run the full pipeline over decoded file content.

        Raises:
            ParseError: fewer than two rows, malformed text, or a rejected header.
            EmptyDatasetError: no data row survived filtering.
        """
        rules = self._rules
        rows = tokenize(text, delimiter=rules.delimiter, quote_char=rules.quote_char)

        header_index, header = detect_header(rows, scan_rows=rules.header_scan_rows)
        columns = build_schema(header, reject_duplicates=rules.reject_duplicate_headers)

        records = []
        for row in rows[header_index + 1:]:
            record, has_data = normalize_row(row, columns, rules.monetary_columns)
            if is_junk(record, has_data, rules.key_column, rules.sentinel_markers):
                continue
            records.append(record)

        if not records:
            raise EmptyDatasetError()

        dataset = Dataset(
            records=records,
            columns=[column.name for column in columns],
            header_index=header_index,
        )
        logger.info("CSV processed: %d rows, %d columns", dataset.row_count, len(dataset.columns))
        return dataset

    def parse_bytes(self, content: bytes) -> Dataset:
        return self.parse_text(decode(content))

    def parse_file(self, path: str | Path) -> Dataset:
        return self.parse_bytes(Path(path).read_bytes())
