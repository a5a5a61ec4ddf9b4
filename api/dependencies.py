"""
API dependencies for dependency injection
"""

from typing import Generator
from fastapi import Request
from sqlalchemy.orm import Session
from domain.schemas import ReadContext


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Sessions come from the factory create_app stored on ``app.state``, so the
    database follows the Settings the application was built with.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_read_context(entity_set: str, request: Request) -> ReadContext:
    """Build the ReadContext handed to a NorthWindService handler"""
    return ReadContext(
        entity_set=entity_set,
        request_id=getattr(request.state, "request_id", None),
        query=dict(request.query_params),
    )
