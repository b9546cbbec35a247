"""Service distribution templates: how a billed service splits across clients."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DistributionEntry(BaseModel):
    """One client's share of a service, in percent."""

    client: str
    percentage: float


class ServiceTemplate(BaseModel):
    """Named distribution, keyed by exact service name."""

    model_config = {"populate_by_name": True}

    service_name: str = Field(alias="serviceName")
    distribution: list[DistributionEntry] = Field(default_factory=list)

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
