"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    SAMPLE_BOOKS,
    build_engine,
    build_session_factory,
    init_database,
    seed_sample_books,
)
from domain.models.book import Book

__all__ = [
    # Database
    "Base",
    "SAMPLE_BOOKS",
    "build_engine",
    "build_session_factory",
    "init_database",
    "seed_sample_books",
    # Local record store
    "Book",
]
