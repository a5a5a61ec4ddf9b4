from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError
import logging

from domain.models import Book
from domain.schemas import BookUpdate
from repositories import BookRepository
from app.exceptions import (
    ConcurrentModificationError,
    NotFoundError,
    ServiceValidationError,
)

logger = logging.getLogger("northwind.catalog")


def _opaque_tag(tag: str) -> str:
    tag = tag.strip()
    if tag[:2].upper() == "W/":
        tag = tag[2:]
    return tag


def etag_matches(if_match: str, current: str) -> bool:
    """Weak comparison of an If-Match header (possibly a list, or *) with ``current``"""
    candidates = [t.strip() for t in if_match.split(",") if t.strip()]
    if "*" in candidates:
        return True
    return any(_opaque_tag(t) == _opaque_tag(current) for t in candidates)


class CatalogService:
    @staticmethod
    def list_books(
        db: Session, search: Optional[str] = None, skip: int = 0, top: int = 100
    ) -> List[Book]:
        if skip < 0 or top < 0:
            raise ServiceValidationError(
                "$skip and $top must not be negative",
                details={"skip": skip, "top": top},
            )
        return BookRepository(db).search(search, skip=skip, limit=top)

    @staticmethod
    def get_book(db: Session, book_id: int) -> Book:
        book = BookRepository(db).get_by_id(book_id)
        if book is None:
            raise NotFoundError(f"Book not found: {book_id}")
        return book

    @staticmethod
    def update_book(
        db: Session, book_id: int, changes: BookUpdate, if_match: Optional[str] = None
    ) -> Book:
        """
        Apply a partial update to a book.

        Args:
            db: Database session
            book_id: Book ID
            changes: Fields to change; unset fields are left as they are
            if_match: If-Match value the client sent; when given one of its
                ETags must match the stored one, weak or strong form alike

        Returns:
            Book: The updated book with its new version

        Raises:
            NotFoundError: If the book does not exist
            ServiceValidationError: If stock is negative or title blank
            ConcurrentModificationError: If the ETag is stale
        """
        data = changes.model_dump(exclude_unset=True)
        errors = {}
        if "title" in data and (data["title"] is None or not data["title"].strip()):
            errors["title"] = "must not be blank"
        if "stock" in data and (data["stock"] is None or data["stock"] < 0):
            errors["stock"] = "must be a non-negative integer"
        if errors:
            raise ServiceValidationError("Invalid book data", details=errors)

        book_repo = BookRepository(db)
        book = book_repo.get_by_id(book_id)
        if book is None:
            raise NotFoundError(f"Book not found: {book_id}")

        if if_match is not None and not etag_matches(if_match, book.etag):
            logger.warning(
                "Stale ETag for book %s: got %s, current %s", book_id, if_match, book.etag
            )
            raise ConcurrentModificationError(
                f"Book {book_id} was modified by another request",
                details={"expected": if_match, "current": book.etag},
            )

        if not data:
            return book

        for field, value in data.items():
            setattr(book, field, value)
        try:
            book = book_repo.update(book)
        except StaleDataError:
            db.rollback()
            raise ConcurrentModificationError(
                f"Book {book_id} was modified by another request"
            )
        logger.info("Updated book %s to version %s", book_id, book.version)
        return book
