"""Client and application name lists."""

from __future__ import annotations

import threading
from typing import Any

from costsplit.core.exceptions import ValidationError
from costsplit.core.protocols import ICollectionStore


class NameListService:
    """Ordered list of names with add and remove-by-exact-match."""

    label = "name"
    allow_duplicates = True

    def __init__(self, store: ICollectionStore) -> None:
        self._store = store
        self._lock = threading.Lock()

    def list_names(self) -> list[str]:
        return self._store.load()

    def add(self, name: Any) -> list[str]:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError(f"The {self.label} name is required")
        name = name.strip()
        with self._lock:
            names = self._store.load()
            if not self.allow_duplicates and name in names:
                raise ValidationError(f"The {self.label} {name!r} already exists")
            names.append(name)
            self._store.save(names)
        return names

    def delete(self, name: str) -> list[str]:
        with self._lock:
            names = [n for n in self._store.load() if n != name]
            self._store.save(names)
        return names


class ClientService(NameListService):
    label = "client"


class ApplicationService(NameListService):
    label = "application"
    allow_duplicates = False
