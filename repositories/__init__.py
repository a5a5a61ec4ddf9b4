"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.book_repository import BookRepository

__all__ = [
    "BaseRepository",
    "BookRepository",
]
