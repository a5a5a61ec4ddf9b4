"""API routes package"""

from . import northwind, catalog, health

__all__ = ["northwind", "catalog", "health"]
