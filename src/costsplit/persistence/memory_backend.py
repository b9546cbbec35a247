"""Dict-backed in-memory backends for tests and the ``memory`` storage backend."""

from __future__ import annotations

from typing import Any


class MemoryFileStore:
    """Dict-backed IFileStore for unit tests."""

    def __init__(self) -> None:
        self._files: dict[str, bytes] = {}

    def read(self, path: str) -> bytes:
        return self._files[path]

    def write(self, path: str, data: bytes, content_type: str = "application/octet-stream") -> str:
        self._files[path] = data
        return path

    def exists(self, path: str) -> bool:
        return path in self._files


class MemoryCollectionStore:
    """List-backed ICollectionStore for unit tests."""

    def __init__(self, items: list[Any] | None = None) -> None:
        self._items: list[Any] = list(items or [])
        self.save_count = 0

    def load(self) -> list[Any]:
        return list(self._items)

    def save(self, items: list[Any]) -> None:
        self._items = list(items)
        self.save_count += 1
