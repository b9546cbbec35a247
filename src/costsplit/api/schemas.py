"""Request bodies. Fields are loosely typed; services do the strict checks."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class NameRequest(BaseModel):
    name: Any = None


class TemplateRequest(BaseModel):
    serviceName: Any = None
    distribution: Any = None
