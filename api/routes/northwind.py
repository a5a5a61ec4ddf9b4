"""NorthWindService routes: on-premise products blended with local books"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_read_context
from api.responses import error_responses, odata_collection
from domain.schemas import ReadContext
from services.northwind_service import NorthwindService, HANDLERS

router = APIRouter(
    prefix="/NorthWindService",
    tags=["NorthWindService"],
    responses=error_responses(401, 404, 409, 500),
)
logger = logging.getLogger("northwind.api.northwind")


@router.get("/")
def service_document():
    """List the entity sets this service can read"""
    return {
        "@odata.context": "$metadata",
        "value": [
            {"name": name, "kind": "EntitySet", "url": name} for name in HANDLERS
        ],
    }


@router.get("/{entity_set}")
def read_entity_set(
    context: ReadContext = Depends(get_read_context),
    db: Session = Depends(get_db),
):
    """
    Read an entity set through its registered handler.

    - Products: the on-premise product as-is
    - MixinProducts: the product plus the title of the book with the same ID (404 if none)
    - CustomProducts: every product, with the book title where a book matches
    """
    records = NorthwindService.dispatch(db, context)
    return odata_collection(context.entity_set, records)
