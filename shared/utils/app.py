"""
FastAPI application scaffolding shared by the gateway and the resource services
"""

from typing import Callable, List, Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_BODY = {"error": "Internal server error"}


async def http_exception_handler(request: Request, exc: HTTPException):
    """Render dict details as the response body, wrap plain strings in ``error``"""
    content = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Request body or parameter validation failures are client errors (400)"""
    details = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        details.append({
            "field": ".".join(location) or "body",
            "message": error.get("msg", "Invalid value"),
        })

    logger.info("Request validation failed", method=request.method, path=request.url.path)
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": details},
    )


async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        method=request.method,
        url=str(request.url),
        exc_info=True,
    )
    return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)


async def log_requests(request: Request, call_next):
    """Log all incoming requests"""
    logger.info(
        "Request received",
        method=request.method,
        path=request.url.path,
        client_ip=request.client.host if request.client else "unknown",
    )

    response = await call_next(request)

    logger.info(
        "Request completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
    )
    return response


async def strip_trailing_slash(request: Request, call_next):
    """Serve `/customers/` and `/customers/7/` exactly like their slash-less paths"""
    path = request.scope["path"]
    if path != "/" and path.endswith("/"):
        request.scope["path"] = path.rstrip("/") or "/"
        raw_path = request.scope.get("raw_path")
        if raw_path:
            request.scope["raw_path"] = raw_path.rstrip(b"/") or b"/"
    return await call_next(request)


def create_service_app(
    title: str,
    description: str,
    version: str,
    lifespan: Optional[Callable] = None,
    cors_origins: Optional[List[str]] = None,
    docs: bool = True,
) -> FastAPI:
    """Create a FastAPI app with request logging and uniform error bodies"""
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
        lifespan=lifespan,
    )

    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.middleware("http")(log_requests)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    return app
