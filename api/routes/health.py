"""Health check routes"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy import text
from sqlalchemy.orm import Session
import logging

from adapters import northwind_adapter
from api.dependencies import get_db
from api.responses import HealthResponse

router = APIRouter(tags=["Health"])
logger = logging.getLogger("northwind.api.health")


@router.get("/health-check", response_model=HealthResponse)
def health_check(request: Request):
    """Basic health check endpoint"""
    app_settings = request.app.state.settings
    return HealthResponse(
        status="ok", service=app_settings.app_name, version=app_settings.app_version
    )


@router.get("/health-check/dependencies")
def dependencies_status(db: Session = Depends(get_db)):
    """Report whether the local store answers and which remote destination is bound."""
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except Exception as e:
        logger.exception("Database health check failed")
        database = f"error: {e}"
    return {
        "database": database,
        "remote_destination": northwind_adapter.destination(),
        "remote_stubbed": True,
    }
