"""Client list endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from costsplit.api.dependencies import get_client_service
from costsplit.api.schemas import NameRequest
from costsplit.services.directory import ClientService

router = APIRouter(prefix="/clients", tags=["clients"])


@router.get("")
def list_clients(service: ClientService = Depends(get_client_service)) -> dict:
    return {"success": True, "clients": service.list_names()}


@router.post("")
def add_client(body: NameRequest, service: ClientService = Depends(get_client_service)) -> dict:
    return {"success": True, "clients": service.add(body.name)}


@router.delete("/{name}")
def delete_client(name: str, service: ClientService = Depends(get_client_service)) -> dict:
    return {"success": True, "clients": service.delete(name)}
