"""
Domain layer - Remote records, local book models, projections, and enums.
"""

from domain import enums, models, schemas

__all__ = ["enums", "models", "schemas"]
