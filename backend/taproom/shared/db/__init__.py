"""
Database Module

Database connectivity and session management for Taproom.

Architecture Overview:
======================
┌─────────────────────────────────────────────────────────────────────────────┐
│                        DATABASE LAYER                                       │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   FastAPI Route                                                             │
│       │                                                                     │
│       │  Dependency Injection: get_db(), get_session_factory()              │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │  Writes: one AsyncSession per request (commit / rollback)   │          │
│   │  Lists:  PageAssembler opens one session per concurrent     │          │
│   │          query (rows + count)                               │          │
│   └─────────────────────────────────────────────────────────────┘          │
│       │                                                                     │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │  Repositories: UserRepository, ManufacturerRepository,      │          │
│   │                BeerRepository                               │          │
│   └─────────────────────────────────────────────────────────────┘          │
│       │                                                                     │
│       ▼                                                                     │
│   PostgreSQL Database                                                       │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘
"""

from taproom.shared.db.session import (
    build_engine,
    build_session_factory,
    get_db,
    get_engine,
    get_session_factory,
    init_db,
    close_db,
)

__all__ = [
    "build_engine",
    "build_session_factory",
    "get_db",
    "get_engine",
    "get_session_factory",
    "init_db",
    "close_db",
]
