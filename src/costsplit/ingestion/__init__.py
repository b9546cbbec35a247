"""Tabular ingestion core for vendor billing CSV exports."""

from __future__ import annotations

from costsplit.ingestion.pipeline import BillingCsvParser

__all__ = ["BillingCsvParser"]
