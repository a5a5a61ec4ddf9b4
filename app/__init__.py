"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    AppError,
    ServiceValidationError,
    NotFoundError,
    ConflictError,
    NonUniqueResultError,
    ConcurrentModificationError,
    UnauthorizedError,
    ForbiddenError,
)

__all__ = [
    "settings",
    "AppError",
    "ServiceValidationError",
    "NotFoundError",
    "ConflictError",
    "NonUniqueResultError",
    "ConcurrentModificationError",
    "UnauthorizedError",
    "ForbiddenError",
]
