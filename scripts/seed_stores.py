"""Seed the client, application and template stores with default content.

Usage:
    python scripts/seed_stores.py --data-dir ./data
    python scripts/seed_stores.py --backend s3 --bucket costsplit-data \
        --endpoint-url http://localhost:4566 --templates templates.json
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from costsplit.core.config import AppSettings, S3Config, StorageConfig
from costsplit.core.protocols import IFileStore
from costsplit.persistence import create_file_store
from costsplit.persistence.list_stores import (
    DEFAULT_APPLICATIONS,
    DEFAULT_CLIENTS,
    JsonListStore,
    TextListStore,
)
from costsplit.services.templates import validate_distribution


def seed_stores(
    files: IFileStore,
    storage: StorageConfig,
    templates: list[dict[str, Any]] | None = None,
    force: bool = False,
) -> dict[str, int]:
    """Write defaults to each backing file. Existing files are kept unless ``force``.

    Templates are validated the same way the API validates them.
    """
    counts: dict[str, int] = {}
    targets: list[tuple[str, Any, list[Any]]] = [
        ("clients", TextListStore(files, storage.clients_key), DEFAULT_CLIENTS),
        ("applications", TextListStore(files, storage.applications_key), DEFAULT_APPLICATIONS),
    ]
    validated = [
        validate_distribution(t.get("serviceName"), t.get("distribution")).to_json()
        for t in templates or []
    ]
    targets.append(("templates", JsonListStore(files, storage.templates_key), validated))

    for label, store, items in targets:
        key = getattr(storage, f"{label}_key")
        if files.exists(key) and not force:
            print(f"  {key} already exists, skipping")
            counts[label] = len(store.load())
            continue
        store.save(items)
        print(f"  Seeded {key} with {len(items)} entries")
        counts[label] = len(items)
    return counts


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed CostSplit backing stores")
    parser.add_argument("--backend", choices=["local", "s3"], default="local", help="Storage backend")
    parser.add_argument("--data-dir", default="./data", help="Directory for the local backend")
    parser.add_argument("--bucket", default="costsplit-data", help="S3 bucket")
    parser.add_argument("--endpoint-url", default=None, help="S3 endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    parser.add_argument("--templates", default=None, help="JSON file with an array of templates")
    parser.add_argument("--force", action="store_true", help="Overwrite existing files")
    args = parser.parse_args()

    settings = AppSettings(
        storage=StorageConfig(backend=args.backend, data_dir=args.data_dir),
        s3=S3Config(bucket=args.bucket, region=args.region, endpoint_url=args.endpoint_url),
    )
    templates = json.loads(Path(args.templates).read_text("utf-8")) if args.templates else None

    print("Seeding stores...")
    seed_stores(create_file_store(settings), settings.storage, templates, force=args.force)
    print("Done!")


if __name__ == "__main__":
    main()
