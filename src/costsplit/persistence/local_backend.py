"""Local directory backend implementing IFileStore."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from costsplit.core.exceptions import PersistenceError


class LocalFileStore:
    """IFileStore rooted at a directory on disk.

    Writes go to a sibling temp file first and are swapped in with
    ``os.replace``, so readers never see a half-written file.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    def _path(self, path: str) -> Path:
        return self._root / path

    def read(self, path: str) -> bytes:
        try:
            return self._path(path).read_bytes()
        except OSError as exc:
            raise PersistenceError(f"Read failed for {path!r}: {exc}") from exc

    def write(self, path: str, data: bytes, content_type: str = "application/octet-stream") -> str:
        target = self._path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.")
            try:
                with os.fdopen(fd, "wb") as fh:
                    fh.write(data)
                os.replace(tmp_name, target)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise PersistenceError(f"Write failed for {path!r}: {exc}") from exc
        return path

    def exists(self, path: str) -> bool:
        return self._path(path).is_file()
