"""Collection stores over an IFileStore: newline text lists and JSON arrays.

Both seed their default content the first time the backing file is missing.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from costsplit.core.exceptions import PersistenceError
from costsplit.persistence.protocols import IFileStore

logger = logging.getLogger(__name__)

DEFAULT_CLIENTS = ["Cliente 1", "Cliente 2", "Cliente 3"]
DEFAULT_APPLICATIONS = ["SAP", "Salesforce", "Portal Web", "CRM", "ERP"]


class TextListStore:
    """One entry per line; blank lines are dropped on load."""

    def __init__(self, files: IFileStore, path: str, defaults: list[str] | None = None) -> None:
        self._files = files
        self._path = path
        self._defaults = list(defaults or [])

    def load(self) -> list[str]:
        if not self._files.exists(self._path):
            logger.info("Seeding %s with %d default entries", self._path, len(self._defaults))
            self.save(self._defaults)
        try:
            content = self._files.read(self._path).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise PersistenceError(f"{self._path!r} is not valid UTF-8: {exc}") from exc
        return [line for line in content.splitlines() if line.strip()]

    def save(self, items: list[str]) -> None:
        self._files.write(self._path, "\n".join(items).encode("utf-8"), content_type="text/plain")


class JsonListStore:
    """A single JSON array, written with two-space indentation."""

    def __init__(self, files: IFileStore, path: str, defaults: list[Any] | None = None) -> None:
        self._files = files
        self._path = path
        self._defaults = list(defaults or [])

    def load(self) -> list[Any]:
        if not self._files.exists(self._path):
            logger.info("Seeding %s with %d default entries", self._path, len(self._defaults))
            self.save(self._defaults)
        try:
            data = json.loads(self._files.read(self._path))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"{self._path!r} does not hold valid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise PersistenceError(f"{self._path!r} does not hold a JSON array")
        return data

    def save(self, items: list[Any]) -> None:
        payload = json.dumps(items, indent=2, ensure_ascii=False).encode("utf-8")
        self._files.write(self._path, payload, content_type="application/json")
