"""Scoped staging of uploaded files: write, hand over, always delete."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from costsplit.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

CSV_CONTENT_TYPE = "text/csv"


def check_csv_upload(filename: str | None, content_type: str | None) -> None:
    """Reject uploads that are neither declared as CSV nor named ``*.csv``."""
    if (content_type or "").strip().lower() == CSV_CONTENT_TYPE:
        return
    if (filename or "").endswith(".csv"):
        return
    raise ValidationError("Only CSV files are allowed")


@contextmanager
def staged_upload(source: BinaryIO, filename: str, upload_dir: str | Path) -> Iterator[Path]:
    """Copy an upload stream to a fresh file in ``upload_dir`` and remove it on exit.

    Every call gets its own path, even for identical names in the same
    millisecond. The file is deleted exactly once whether the body succeeds
    or raises.
    """
    directory = Path(upload_dir)
    directory.mkdir(parents=True, exist_ok=True)
    fd, name = tempfile.mkstemp(
        dir=directory,
        prefix=f"{int(time.time() * 1000)}-",
        suffix=f"-{Path(filename).name}",
    )
    path = Path(name)
    try:
        with os.fdopen(fd, "wb") as fh:
            shutil.copyfileobj(source, fh)
        yield path
    finally:
        path.unlink(missing_ok=True)
        logger.debug("Removed staged upload %s", path)
