"""Shared FastAPI dependencies resolving services from application state."""

from __future__ import annotations

from fastapi import Request

from costsplit.core.config import AppSettings
from costsplit.ingestion import BillingCsvParser
from costsplit.services.directory import ApplicationService, ClientService
from costsplit.services.templates import TemplateService


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_parser(request: Request) -> BillingCsvParser:
    return request.app.state.parser


def get_client_service(request: Request) -> ClientService:
    return request.app.state.clients


def get_application_service(request: Request) -> ApplicationService:
    return request.app.state.applications


def get_template_service(request: Request) -> TemplateService:
    return request.app.state.templates
