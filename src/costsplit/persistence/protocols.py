"""Re-export persistence protocols from core for convenience."""

from __future__ import annotations

from costsplit.core.protocols import ICollectionStore, IFileStore

__all__ = ["ICollectionStore", "IFileStore"]
