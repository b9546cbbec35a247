"""Shared test doubles: re-exported memory backends."""

from __future__ import annotations

from costsplit.persistence.memory_backend import MemoryCollectionStore, MemoryFileStore

__all__ = ["MemoryCollectionStore", "MemoryFileStore"]
