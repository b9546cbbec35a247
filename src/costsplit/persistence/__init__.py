"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from costsplit.core.config import AppSettings
from costsplit.persistence.protocols import IFileStore
from costsplit.persistence.list_stores import (
    DEFAULT_APPLICATIONS,
    DEFAULT_CLIENTS,
    JsonListStore,
    TextListStore,
)
from costsplit.persistence.local_backend import LocalFileStore
from costsplit.persistence.memory_backend import MemoryFileStore
from costsplit.persistence.s3_backend import S3FileStore


def create_file_store(settings: AppSettings) -> IFileStore:
    """Build the blob store selected by ``settings.storage.backend``."""
    backend = settings.storage.backend
    if backend == "s3":
        return S3FileStore(
            bucket=settings.s3.bucket,
            region=settings.s3.region,
            endpoint_url=settings.s3.endpoint_url,
            prefix=settings.s3.prefix,
        )
    if backend == "memory":
        return MemoryFileStore()
    return LocalFileStore(settings.storage.data_dir)


def create_persistence(settings: AppSettings | None = None):
    """Create wired-up collection stores from application settings.

    Returns:
        Tuple of (clients, applications, templates).
    """
    if settings is None:
        settings = AppSettings()

    files = create_file_store(settings)
    clients = TextListStore(files, settings.storage.clients_key, DEFAULT_CLIENTS)
    applications = TextListStore(files, settings.storage.applications_key, DEFAULT_APPLICATIONS)
    templates = JsonListStore(files, settings.storage.templates_key, [])
    return clients, applications, templates
