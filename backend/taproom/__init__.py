"""
Taproom Backend

Beer and manufacturer catalog API.

Package Structure:
==================
    taproom/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn taproom.api.main:app --reload

    # Migrations
    alembic upgrade head
"""
