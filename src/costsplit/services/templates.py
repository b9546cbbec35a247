"""Service distribution templates: validation and upsert by service name."""

from __future__ import annotations

import math
import threading
from typing import Any

from costsplit.core.exceptions import ValidationError
from costsplit.core.protocols import ICollectionStore
from costsplit.core.types import JsonDict
from costsplit.models.distribution import DistributionEntry, ServiceTemplate

TOTAL_PERCENT = 100.0
TOLERANCE = 0.01


def _percentage(entry: JsonDict, position: int) -> float:
    value = entry.get("percentage")
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"Distribution entry {position} has a non-numeric percentage: {value!r}")
    if not math.isfinite(value):
        raise ValidationError(f"Distribution entry {position} has a non-finite percentage: {value!r}")
    return float(value)


def validate_distribution(service_name: Any, distribution: Any) -> ServiceTemplate:
    """Check a submitted template and return it with only usable entries kept.

    The 100% total is checked over every submitted entry; the returned
    template keeps entries with a client and a positive percentage, so its
    stored total may fall short of 100.

    Raises:
        ValidationError: blank service name, non-list distribution, malformed
            entry, or a total that is not 100 within 0.01.
    """
    if not isinstance(service_name, str) or not service_name.strip():
        raise ValidationError("Service name is required")
    if not isinstance(distribution, list):
        raise ValidationError("Distribution must be a list")

    entries: list[tuple[Any, float]] = []
    for position, entry in enumerate(distribution):
        if not isinstance(entry, dict):
            raise ValidationError(f"Distribution entry {position} must be an object")
        client = entry.get("client")
        if client and not isinstance(client, str):
            raise ValidationError(f"Distribution entry {position} has a non-text client: {client!r}")
        entries.append((client, _percentage(entry, position)))

    total = sum(percentage for _, percentage in entries)
    if abs(total - TOTAL_PERCENT) > TOLERANCE:
        raise ValidationError(f"Distribution must total 100% (actual: {total:g}%)")

    return ServiceTemplate(
        service_name=service_name.strip(),
        distribution=[
            DistributionEntry(client=client, percentage=percentage)
            for client, percentage in entries
            if client and percentage > 0
        ],
    )


class TemplateService:
    """Reads, upserts and deletes service templates in a collection store."""

    def __init__(self, store: ICollectionStore) -> None:
        self._store = store
        self._lock = threading.Lock()

    def list_templates(self) -> list[JsonDict]:
        return self._store.load()

    def upsert(self, service_name: Any, distribution: Any) -> list[JsonDict]:
        """Validate and store a template, replacing any with the same name."""
        template = validate_distribution(service_name, distribution).to_json()
        with self._lock:
            templates = self._store.load()
            for index, existing in enumerate(templates):
                if existing.get("serviceName") == template["serviceName"]:
                    templates[index] = template
                    break
            else:
                templates.append(template)
            self._store.save(templates)
        return templates

    def delete(self, service_name: str) -> list[JsonDict]:
        with self._lock:
            templates = [t for t in self._store.load() if t.get("serviceName") != service_name]
            self._store.save(templates)
        return templates
