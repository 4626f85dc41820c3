"""
Business Services

Services coordinate repositories, the ownership guard and the page
assembler. Write operations run as Pipelines (taproom.shared.core.pipeline).

- AuthService:         login, administrator bootstrap
- ManufacturerService: manufacturer CRUD + listing
- BeerService:         beer CRUD + listing
"""

from taproom.shared.services.auth_service import AuthService
from taproom.shared.services.manufacturer_service import ManufacturerService
from taproom.shared.services.beer_service import BeerService

__all__ = [
    "AuthService",
    "ManufacturerService",
    "BeerService",
]
