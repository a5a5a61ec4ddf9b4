"""
Book Repository - Data access layer for the local record store
"""

from typing import Iterable, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import Row, bindparam, select

from repositories.base import BaseRepository
from domain.models import Book


class BookRepository(BaseRepository[Book]):
    """Repository for book data access"""

    def __init__(self, db: Session):
        super().__init__(db, Book)

    def get_single_by_id(self, book_id: int) -> Book:
        """Get the one book with this ID.

        Raises sqlalchemy.exc.NoResultFound when nothing matches and
        sqlalchemy.exc.MultipleResultsFound when more than one row does.
        """
        stmt = (
            select(Book)
            .where(Book.ID == bindparam("book_id"))
            .order_by(Book.ID)
        )
        return self.db.execute(stmt, {"book_id": book_id}).scalars().one()

    def get_titles_by_ids(self, book_ids: Iterable[int]) -> List[Row]:
        """Get ID and title of every book whose ID is in ``book_ids``, ordered by ID"""
        ids = list(book_ids)
        if not ids:
            return []
        stmt = (
            select(Book.ID, Book.title)
            .where(Book.ID.in_(bindparam("book_ids", expanding=True)))
            .order_by(Book.ID)
        )
        return list(self.db.execute(stmt, {"book_ids": ids}).all())

    def search(
        self, title_contains: Optional[str] = None, skip: int = 0, limit: int = 100
    ) -> List[Book]:
        """Get books ordered by ID, optionally filtered by a case-insensitive title match"""
        query = self.db.query(Book)
        if title_contains:
            query = query.filter(Book.title.ilike(f"%{title_contains}%"))
        return query.order_by(Book.ID).offset(skip).limit(limit).all()
