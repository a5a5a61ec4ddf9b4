"""
Tests for the book repository against an in-memory database.
"""

import pytest
from sqlalchemy.exc import NoResultFound
from sqlalchemy.orm import Session

from test_fixtures import engine, session_factory, db_session, add_books
from domain.models import Book, SAMPLE_BOOKS, build_engine, init_database, seed_sample_books
from repositories import BookRepository


def test_get_single_by_id(db_session: Session):
    add_books(db_session, [{"ID": 1, "title": "T1"}, {"ID": 2, "title": "T2"}])

    book = BookRepository(db_session).get_single_by_id(2)

    assert book.title == "T2"


def test_get_single_by_id_no_row(db_session: Session):
    with pytest.raises(NoResultFound):
        BookRepository(db_session).get_single_by_id(42)


def test_get_titles_by_ids_only_requested_rows_ordered(db_session: Session):
    add_books(
        db_session,
        [{"ID": 3, "title": "C"}, {"ID": 1, "title": "A"}, {"ID": 2, "title": "B"}],
    )

    rows = BookRepository(db_session).get_titles_by_ids([3, 1, 99])

    assert [(r.ID, r.title) for r in rows] == [(1, "A"), (3, "C")]


def test_get_titles_by_ids_empty_input(db_session: Session):
    add_books(db_session, [{"ID": 1, "title": "A"}])

    assert BookRepository(db_session).get_titles_by_ids([]) == []


def test_search_is_case_insensitive_and_paged(db_session: Session):
    add_books(
        db_session,
        [
            {"ID": 1, "title": "Wuthering Heights"},
            {"ID": 2, "title": "Jane Eyre"},
            {"ID": 3, "title": "Heights of Madness"},
        ],
    )
    repo = BookRepository(db_session)

    assert [b.ID for b in repo.search("heights")] == [1, 3]
    assert [b.ID for b in repo.search(None, skip=1, limit=1)] == [2]
    assert repo.search("nothing like this") == []


def test_version_starts_at_one_and_increments(db_session: Session):
    (book,) = add_books(db_session, [{"ID": 1, "title": "A", "stock": 5}])
    assert book.version == 1
    assert book.etag == 'W/"1"'

    book.stock = 6
    BookRepository(db_session).update(book)

    assert book.version == 2


def test_get_by_id_returns_none_when_absent(db_session: Session):
    add_books(db_session, [{"ID": 1, "title": "A"}])
    repo = BookRepository(db_session)

    assert repo.get_by_id(1).title == "A"
    assert repo.get_by_id(2) is None


def test_init_database_creates_schema_and_seeds_given_engine(tmp_path):
    db_engine = build_engine(f"sqlite:///{tmp_path / 'init.db'}")

    init_database(db_engine, seed=True)
    init_database(db_engine, seed=True)

    with Session(bind=db_engine) as session:
        assert session.query(Book).count() == len(SAMPLE_BOOKS)
    db_engine.dispose()


def test_seed_sample_books_only_fills_empty_table(db_session: Session):
    assert seed_sample_books(db_session) == len(SAMPLE_BOOKS)
    assert seed_sample_books(db_session) == 0
    assert db_session.query(Book).count() == len(SAMPLE_BOOKS)
