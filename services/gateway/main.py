"""
API Gateway - FastAPI Application
Routes /api/{customers,products,orders} to the matching backend service
"""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncGenerator, Optional

import httpx
import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shared.utils.app import create_service_app
from shared.utils.server import serve
from services.gateway.config import GatewaySettings
from services.gateway.proxy import ProxyClient
from services.gateway.routing import RouteTable, build_route_table

logger = structlog.get_logger(__name__)

NOT_FOUND_BODY = {"message": "Endpoint not found on API gateway"}

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def create_app(
    settings: Optional[GatewaySettings] = None,
    routes: Optional[RouteTable] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Create the gateway application around an explicit route table"""
    settings = settings or GatewaySettings()
    route_table = routes or build_route_table(settings)
    proxy = ProxyClient(
        timeout=settings.proxy_timeout,
        max_connections=settings.proxy_max_connections,
        max_keepalive=settings.proxy_max_keepalive,
        transport=transport,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Starting API Gateway", port=settings.port)
        for route in route_table.routes:
            logger.info("Gateway route", prefix=route.prefix, service=route.name, target=route.target)
        await proxy.start()

        yield

        await proxy.stop()
        logger.info("API Gateway shutdown complete")

    app = create_service_app(
        title="API Gateway",
        description="Single entry point for the shop backend",
        version=settings.service_version,
        lifespan=lifespan,
        docs=False,
    )
    app.state.routes = route_table
    app.state.proxy = proxy

    @app.get("/health", include_in_schema=False)
    async def health_check():
        """Gateway liveness; never forwarded"""
        return {
            "service": settings.service_name,
            "status": "healthy",
            "timestamp": datetime.utcnow().isoformat(),
            "version": settings.service_version,
        }

    @app.api_route("/{path:path}", methods=PROXY_METHODS, include_in_schema=False)
    async def gateway(request: Request):
        """Forward matched paths, 404 everything else"""
        raw_path = request.scope.get("raw_path")
        path = raw_path.decode("latin-1") if raw_path else request.url.path

        match = route_table.resolve(path)
        if match is None:
            return JSONResponse(status_code=404, content=NOT_FOUND_BODY)
        return await proxy.forward(request, match)

    return app


def run():
    serve(GatewaySettings, create_app)


if __name__ == "__main__":
    run()
