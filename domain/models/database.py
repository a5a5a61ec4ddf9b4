"""
Database configuration and session management.

Engines and session factories are built per application from its Settings;
there is no process-wide engine.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger("northwind.database")

# Create SQLAlchemy Base
Base = declarative_base()


def build_engine(database_url: str, echo: bool = False):
    """Create an engine; SQLite connections are shared with FastAPI's thread pool"""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=echo, future=True, connect_args=connect_args)


def build_session_factory(db_engine) -> sessionmaker:
    """Create the session factory bound to ``db_engine``"""
    return sessionmaker(bind=db_engine, future=True)


SAMPLE_BOOKS = [
    {"ID": 1, "title": "Wuthering Heights", "stock": 100},
    {"ID": 2, "title": "Jane Eyre", "stock": 500},
    {"ID": 3, "title": "The Raven", "stock": 333},
    {"ID": 4, "title": "Eleonora", "stock": 555},
]


def seed_sample_books(session: Session) -> int:
    """Insert the sample books into an empty table. Returns the number inserted."""
    from domain.models.book import Book

    if session.query(Book).first() is not None:
        logger.info("Books table already populated; skipping sample data")
        return 0
    session.add_all(Book(**row) for row in SAMPLE_BOOKS)
    session.commit()
    logger.info("Inserted %d sample books", len(SAMPLE_BOOKS))
    return len(SAMPLE_BOOKS)


def init_database(db_engine, seed: bool = False):
    """Initialize database schema on ``db_engine`` and optionally the sample data"""
    Base.metadata.create_all(bind=db_engine)
    logger.info("Database tables created successfully")

    if seed:
        with Session(bind=db_engine, future=True) as session:
            seed_sample_books(session)
