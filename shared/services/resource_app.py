"""
Application factory for a resource service

Wires settings, the Supabase table adapter and a ResourceService into a
FastAPI app. Each backend service supplies its own router and entity names.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, Optional

import structlog
from fastapi import APIRouter, FastAPI, Request

from shared.routes.health import create_health_router
from shared.services.resource_service import ResourceService, TableStore
from shared.utils.app import create_service_app, strip_trailing_slash
from shared.utils.config import ServiceSettings
from shared.utils.supabase_client import create_table_store

logger = structlog.get_logger(__name__)


def get_resource_service(request: Request) -> ResourceService:
    """Dependency to get the resource service instance"""
    return request.app.state.resource_service


def create_resource_app(
    settings: ServiceSettings,
    *,
    title: str,
    description: str,
    table: str,
    entity: str,
    router: APIRouter,
    store: Optional[TableStore] = None,
    conflict_messages: Optional[Dict[str, str]] = None,
) -> FastAPI:
    """
    Build the FastAPI app for one collection.

    Without an injected ``store`` the lifespan connects to Supabase using
    the settings' URL and key.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info(f"Starting {title}", port=settings.port, table=table)
        settings.log_config_summary()
        if not hasattr(app.state, "resource_service"):
            try:
                table_store = await create_table_store(
                    settings.supabase_url, settings.supabase_anon_key, table
                )
            except Exception as e:
                logger.error("Failed to initialize Supabase client", error=str(e))
                raise
            app.state.resource_service = ResourceService(table_store, entity, conflict_messages)

        yield

        logger.info(f"{title} shutdown complete")

    app = create_service_app(
        title=title,
        description=description,
        version=settings.service_version,
        lifespan=lifespan,
        cors_origins=settings.cors_origins,
    )
    # Trailing slashes are stripped before routing, so no slash redirect is issued
    app.middleware("http")(strip_trailing_slash)
    if store is not None:
        app.state.resource_service = ResourceService(store, entity, conflict_messages)

    app.include_router(create_health_router(settings.service_name, settings.service_version), tags=["Health"])
    app.include_router(router, prefix=f"/{table}", tags=[table.capitalize()])
    return app
