"""Protocol interfaces for CostSplit storage abstractions.

Structural typing, no inheritance required, easy to test with isinstance().
The ingestion core never touches these; only the list and template services do.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Persistence: File Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IFileStore(Protocol):
    """Blob storage holding the backing files (local directory, S3, memory)."""

    def read(self, path: str) -> bytes: ...

    def write(self, path: str, data: bytes, content_type: str = "application/octet-stream") -> str: ...

    def exists(self, path: str) -> bool: ...


# ---------------------------------------------------------------------------
# Persistence: Collection Store
# ---------------------------------------------------------------------------

@runtime_checkable
class ICollectionStore(Protocol):
    """Whole-collection load/save over one backing file."""

    def load(self) -> list[Any]: ...

    def save(self, items: list[Any]) -> None: ...
