"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Health check endpoints
    /auth                   → Authentication (login, me)
    /api/manufacturer       → Manufacturers (CRUD + list)
    /api/beer               → Beers (CRUD + list)

Usage:
======
    from taproom.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from taproom.api.handlers import (
    auth_handler,
    beer_handler,
    health_handler,
    manufacturer_handler,
)
from taproom.shared.schemas.common import ErrorResponse


# Error bodies shared by every catalog endpoint, for the OpenAPI document.
ERROR_RESPONSES = {
    status: {"model": ErrorResponse}
    for status in (400, 401, 403, 404, 409, 503)
}


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    # Authentication endpoints
    app.include_router(
        auth_handler.router,
        prefix="/auth",
        tags=["Authentication"],
        responses={401: {"model": ErrorResponse}},
    )

    # Manufacturer endpoints
    app.include_router(
        manufacturer_handler.router,
        prefix="/api/manufacturer",
        tags=["Manufacturers"],
        responses=ERROR_RESPONSES,
    )

    # Beer endpoints
    app.include_router(
        beer_handler.router,
        prefix="/api/beer",
        tags=["Beers"],
        responses=ERROR_RESPONSES,
    )
