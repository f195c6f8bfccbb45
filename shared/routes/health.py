"""
Health check routes
"""

from datetime import datetime

from fastapi import APIRouter


def create_health_router(service_name: str, version: str) -> APIRouter:
    """Build the ``/`` and ``/health`` routes for a service"""
    router = APIRouter()

    @router.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "service": service_name,
            "status": "healthy",
            "timestamp": datetime.utcnow().isoformat(),
            "version": version,
        }

    @router.get("/")
    async def root():
        """Root endpoint"""
        return {
            "service": service_name,
            "version": version,
            "status": "running",
            "docs": "/docs",
        }

    return router
