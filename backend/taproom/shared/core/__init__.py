"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions
- Stage pipeline for multi-step operations

Usage:
======
    from taproom.shared.core.logging import logger, get_logger
    from taproom.shared.core.exceptions import CatalogException, NotFoundError

    logger.info("Starting operation", manufacturer_id=manufacturer_id)
"""

from taproom.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from taproom.shared.core.exceptions import (
    CatalogException,
    ValidationError,
    DuplicateResourceError,
    DependencyError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ManufacturerNotFoundError,
    BeerNotFoundError,
    ConflictError,
    StorageUnavailableError,
)
from taproom.shared.core.pipeline import Pipeline, PipelineContext

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "CatalogException",
    "ValidationError",
    "DuplicateResourceError",
    "DependencyError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ManufacturerNotFoundError",
    "BeerNotFoundError",
    "ConflictError",
    "StorageUnavailableError",
    # Pipeline
    "Pipeline",
    "PipelineContext",
]
