"""CatalogService routes: books in the local store"""

from fastapi import APIRouter, Depends, Header, Query, Response
from sqlalchemy.orm import Session
import logging
from typing import Optional

from api.dependencies import get_db
from api.responses import error_responses, odata_collection, odata_entity
from domain.schemas import BookResponse, BookUpdate
from services.catalog_service import CatalogService

router = APIRouter(
    prefix="/CatalogService",
    tags=["CatalogService"],
    responses=error_responses(400, 401, 403, 404, 412, 422, 500),
)
logger = logging.getLogger("northwind.api.catalog")


@router.get("/Books")
def list_books(
    search: Optional[str] = Query(None, alias="$search", description="Title contains"),
    skip: int = Query(0, alias="$skip", ge=0),
    top: int = Query(100, alias="$top", ge=0, le=1000),
    db: Session = Depends(get_db),
):
    """List books ordered by ID, optionally filtered by title"""
    books = CatalogService.list_books(db, search=search, skip=skip, top=top)
    return odata_collection("Books", [BookResponse.model_validate(b) for b in books])


@router.get("/Books({book_id})")
def get_book(book_id: int, response: Response, db: Session = Depends(get_db)):
    """Get one book; the ETag header carries its version"""
    book = CatalogService.get_book(db, book_id)
    response.headers["ETag"] = book.etag
    return odata_entity("Books", BookResponse.model_validate(book))


@router.patch("/Books({book_id})")
def update_book(
    book_id: int,
    changes: BookUpdate,
    response: Response,
    if_match: Optional[str] = Header(None, alias="If-Match"),
    db: Session = Depends(get_db),
):
    """
    Update title and/or stock of a book.

    Send the ETag from the last read in If-Match; a stale ETag yields 412.
    """
    book = CatalogService.update_book(db, book_id, changes, if_match=if_match)
    response.headers["ETag"] = book.etag
    return odata_entity("Books", BookResponse.model_validate(book))
