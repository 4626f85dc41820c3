"""
Health Check Handler

Provides health check endpoints for monitoring and load balancers.
"""

from fastapi import APIRouter
from sqlalchemy import text

from taproom.api.dependencies.database import DbSession
from taproom.config.settings import settings
from taproom.shared.db.errors import storage_errors
from taproom.shared.schemas.common import HealthResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        HealthResponse with service status
    """
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
    )


@router.get("/ready", response_model=HealthResponse)
async def readiness_check(db: DbSession):
    """
    Readiness check for Kubernetes/load balancers.

    Answers 503 (StorageUnavailableError) when the database cannot be reached.
    """
    with storage_errors("health.ready"):
        await db.execute(text("SELECT 1"))
    return HealthResponse(
        status="ready",
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
        database="ok",
    )


@router.get("/live")
async def liveness_check():
    """
    Liveness check for Kubernetes.

    Returns:
        Simple alive status
    """
    return {"status": "alive"}
