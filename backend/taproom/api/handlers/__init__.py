"""
API Handlers

Route handlers for the Taproom API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from taproom.api.handlers import (
    auth_handler,
    beer_handler,
    health_handler,
    manufacturer_handler,
)

__all__ = [
    "auth_handler",
    "beer_handler",
    "health_handler",
    "manufacturer_handler",
]
