"""Ingestion rules and result models for vendor billing CSV files."""

from __future__ import annotations

from pydantic import BaseModel, Field

from costsplit.core.types import Record


class IngestionRules(BaseModel):
    """Tunable constants of the ingestion pipeline."""

    delimiter: str = ","
    quote_char: str = '"'
    header_scan_rows: int = 5
    monetary_columns: frozenset[str] = Field(
        default_factory=lambda: frozenset({"Original Cost", "Cost", "Volume Cost", "Volume Discount"})
    )
    key_column: str = "Service Name"
    sentinel_markers: tuple[str, ...] = ("--this is the end", "end of report")
    reject_duplicate_headers: bool = False


class SchemaColumn(BaseModel):
    """A retained header name and the source cell index it was read from."""

    name: str
    position: int


class Dataset(BaseModel):
    """Clean result of one ingestion call."""

    records: list[Record] = Field(default_factory=list)
    columns: list[str] = Field(default_factory=list)
    header_index: int = 0

    @property
    def row_count(self) -> int:
        return len(self.records)

    def to_response(self) -> dict:
        return {
            "success": True,
            "data": self.records,
            "columns": self.columns,
            "rowCount": self.row_count,
        }
