"""Service distribution template endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from costsplit.api.dependencies import get_template_service
from costsplit.api.schemas import TemplateRequest
from costsplit.services.templates import TemplateService

router = APIRouter(prefix="/service-templates", tags=["templates"])


@router.get("")
def list_templates(service: TemplateService = Depends(get_template_service)) -> dict:
    return {"success": True, "templates": service.list_templates()}


@router.post("")
def upsert_template(
    body: TemplateRequest, service: TemplateService = Depends(get_template_service)
) -> dict:
    """Create or replace the template for ``serviceName``."""
    return {"success": True, "templates": service.upsert(body.serviceName, body.distribution)}


@router.delete("/{service_name}")
def delete_template(
    service_name: str, service: TemplateService = Depends(get_template_service)
) -> dict:
    return {"success": True, "templates": service.delete(service_name)}
