"""
Shared Module

Domain code used by the API:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Query: Listing query composer and page assembler
- Security: Principal resolution and ownership guard
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions, pipeline

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions, pipeline
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── query/          ← Query composer, page assembler
    ├── repositories/   ← Data access layer
    ├── security/       ← Principal, ownership guard
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── migrations/     ← Alembic environment and versions
    └── utils/          ← Password hashing, tokens

Usage:
======
    from taproom.shared.models import Beer, Manufacturer
    from taproom.shared.repositories import BeerRepository
    from taproom.shared.services import BeerService
    from taproom.shared.core import logger, CatalogException
"""
