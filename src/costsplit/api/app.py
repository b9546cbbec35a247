"""FastAPI application with lifespan, CORS and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from costsplit.api.routes import applications, clients, health, templates, upload
from costsplit.core.config import AppSettings
from costsplit.core.exceptions import CostSplitError
from costsplit.ingestion import BillingCsvParser
from costsplit.persistence import create_persistence
from costsplit.services.directory import ApplicationService, ClientService
from costsplit.services.templates import TemplateService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Wire stores and services for the configured backend."""
    settings: AppSettings = app.state.settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    client_store, application_store, template_store = create_persistence(settings)
    app.state.parser = BillingCsvParser()
    app.state.clients = ClientService(client_store)
    app.state.applications = ApplicationService(application_store)
    app.state.templates = TemplateService(template_store)
    logger.info(
        "CostSplit started environment=%s storage=%s",
        settings.environment, settings.storage.backend,
    )
    yield


async def handle_costsplit_error(request: Request, exc: CostSplitError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed or missing request bodies like any other validation failure."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', 'invalid')}"
        for error in exc.errors()
    )
    return JSONResponse(status_code=400, content={"error": f"Invalid request: {details}"})


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or AppSettings()
    app = FastAPI(
        title="CostSplit Billing Ingestion Service",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(CostSplitError, handle_costsplit_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.include_router(health.router)
    app.include_router(upload.router)
    app.include_router(clients.router)
    app.include_router(applications.router)
    app.include_router(templates.router)
    return app
