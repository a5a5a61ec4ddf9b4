"""Services package - Business logic layer"""

from services.northwind_service import NorthwindService, HANDLERS
from services.catalog_service import CatalogService

__all__ = [
    "NorthwindService",
    "HANDLERS",
    "CatalogService",
]
