"""
Tests for CatalogService: listing, lookup and optimistic-concurrency updates.
"""

import pytest
from sqlalchemy.orm import Session

from test_fixtures import engine, session_factory, db_session, add_books
from app.exceptions import (
    ConcurrentModificationError,
    NotFoundError,
    ServiceValidationError,
)
from domain.schemas import BookUpdate
from services.catalog_service import CatalogService


@pytest.fixture
def books(db_session: Session):
    return add_books(
        db_session,
        [
            {"ID": 1, "title": "Wuthering Heights", "stock": 100},
            {"ID": 2, "title": "Jane Eyre", "stock": 500},
        ],
    )


def test_list_books_with_search(db_session: Session, books):
    assert [b.ID for b in CatalogService.list_books(db_session)] == [1, 2]
    assert [b.ID for b in CatalogService.list_books(db_session, search="eyre")] == [2]


def test_list_books_rejects_negative_paging(db_session: Session):
    with pytest.raises(ServiceValidationError):
        CatalogService.list_books(db_session, skip=-1)


def test_get_book_not_found(db_session: Session):
    with pytest.raises(NotFoundError):
        CatalogService.get_book(db_session, 404)


def test_update_book_changes_only_given_fields(db_session: Session, books):
    """
    Verifies:
    - stock updated, title untouched
    - version bumped
    """
    book = CatalogService.update_book(db_session, 1, BookUpdate(stock=42))

    assert book.stock == 42
    assert book.title == "Wuthering Heights"
    assert book.version == 2


def test_update_book_with_current_etag(db_session: Session, books):
    book = CatalogService.update_book(
        db_session, 2, BookUpdate(title="Jane Eyre (2nd ed.)"), if_match='W/"1"'
    )
    assert book.title == "Jane Eyre (2nd ed.)"
    assert book.etag == 'W/"2"'


def test_update_book_with_stale_etag(db_session: Session, books):
    CatalogService.update_book(db_session, 1, BookUpdate(stock=1))

    with pytest.raises(ConcurrentModificationError) as exc_info:
        CatalogService.update_book(db_session, 1, BookUpdate(stock=2), if_match='W/"1"')

    assert exc_info.value.http_status == 412
    assert CatalogService.get_book(db_session, 1).stock == 1


def test_update_book_wildcard_etag(db_session: Session, books):
    book = CatalogService.update_book(db_session, 1, BookUpdate(stock=3), if_match="*")
    assert book.stock == 3


@pytest.mark.parametrize("if_match", ['"1"', 'W/"7", W/"1"', ' W/"1" '])
def test_update_book_accepts_strong_and_listed_etags(db_session: Session, books, if_match):
    book = CatalogService.update_book(db_session, 1, BookUpdate(stock=4), if_match=if_match)
    assert book.stock == 4
    assert book.etag == 'W/"2"'


def test_update_book_strong_stale_etag(db_session: Session, books):
    with pytest.raises(ConcurrentModificationError):
        CatalogService.update_book(db_session, 1, BookUpdate(stock=4), if_match='"2"')


@pytest.mark.parametrize(
    "changes, field",
    [
        ({"stock": -1}, "stock"),
        ({"stock": None}, "stock"),
        ({"title": "   "}, "title"),
    ],
)
def test_update_book_validation(db_session: Session, books, changes, field):
    with pytest.raises(ServiceValidationError) as exc_info:
        CatalogService.update_book(db_session, 1, BookUpdate(**changes))

    assert field in exc_info.value.details


def test_update_missing_book(db_session: Session):
    with pytest.raises(NotFoundError):
        CatalogService.update_book(db_session, 9, BookUpdate(stock=1))


def test_update_book_without_changes_keeps_version(db_session: Session, books):
    book = CatalogService.update_book(db_session, 1, BookUpdate())
    assert book.version == 1
