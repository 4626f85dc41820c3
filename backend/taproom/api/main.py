"""
Taproom API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           TAPROOM API                                       │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                    Middleware Stack                          │          │
│   │  ┌─────────────────────────────────────────────────────┐    │          │
│   │  │ CORS Middleware                                      │    │          │
│   │  │ Error Handler                                        │    │          │
│   │  └─────────────────────────────────────────────────────┘    │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                       Routers                                │          │
│   │  ┌──────────┐ ┌──────────┐ ┌──────────────┐ ┌──────────┐   │          │
│   │  │  Health  │ │   Auth   │ │ Manufacturer │ │   Beer   │   │          │
│   │  └──────────┘ └──────────┘ └──────────────┘ └──────────┘   │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                Dependencies (Injected)                       │          │
│   │  ┌──────────┐ ┌───────────┐ ┌──────────┐                   │          │
│   │  │ Database │ │ Principal │ │ Services │                   │          │
│   │  └──────────┘ └───────────┘ └──────────┘                   │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connection initialized
3. Administrator account created if ADMIN_PASSWORD is set and it is missing
4. Application serves requests
5. Application stops → lifespan shutdown
6. Database connection closed

Usage:
======
    # Run with uvicorn
    uvicorn taproom.api.main:app --host 0.0.0.0 --port 8000 --reload

    # Or programmatically
    from taproom.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taproom.config.settings import settings
from taproom.shared.db import close_db, get_session_factory, init_db
from taproom.shared.core.logging import logger
from taproom.shared.services.auth_service import AuthService
from taproom.api.middleware import setup_exception_handlers
from taproom.api.routes import register_routes


async def bootstrap_admin() -> None:
    """Create the administrator account from settings, once."""
    if not settings.ADMIN_PASSWORD:
        logger.info("ADMIN_PASSWORD not set, skipping administrator bootstrap")
        return

    async with get_session_factory()() as session:
        async with session.begin():
            await AuthService(session).ensure_admin(
                settings.ADMIN_USERNAME,
                settings.ADMIN_PASSWORD,
            )


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Initialize database connection pool
    - Create the administrator account

    Shutdown:
    - Close database connections
    """
    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting Taproom API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    await init_db()
    await bootstrap_admin()

    logger.info("Taproom API started successfully")

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down Taproom API")

    await close_db()

    logger.info("Taproom API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings
    2. Adds middleware (CORS, etc.)
    3. Sets up exception handlers
    4. Registers all routes
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Beer and manufacturer catalog",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        # Use lifespan for startup/shutdown
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    # CORS Middleware - Must be added first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Create the application instance
app = create_application()
