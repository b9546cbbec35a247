"""Application list endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from costsplit.api.dependencies import get_application_service
from costsplit.api.schemas import NameRequest
from costsplit.services.directory import ApplicationService

router = APIRouter(prefix="/applications", tags=["applications"])


@router.get("")
def list_applications(service: ApplicationService = Depends(get_application_service)) -> dict:
    return {"success": True, "applications": service.list_names()}


@router.post("")
def add_application(
    body: NameRequest, service: ApplicationService = Depends(get_application_service)
) -> dict:
    return {"success": True, "applications": service.add(body.name)}


@router.delete("/{name}")
def delete_application(
    name: str, service: ApplicationService = Depends(get_application_service)
) -> dict:
    return {"success": True, "applications": service.delete(name)}
