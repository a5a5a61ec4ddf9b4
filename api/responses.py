"""
Standardized API response models and utilities.
Provides consistent response formatting across all endpoints.
"""

from typing import Any, Iterable, Optional
from pydantic import BaseModel, Field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")


def odata_collection(entity_set: str, records: Iterable[BaseModel]) -> dict:
    """Wrap records in an OData collection payload; unset fields are omitted"""
    return {
        "@odata.context": f"$metadata#{entity_set}",
        "value": [r.model_dump(exclude_unset=True) for r in records],
    }


def odata_entity(entity_set: str, record: BaseModel) -> dict:
    """Single-entity OData payload"""
    payload = {"@odata.context": f"$metadata#{entity_set}/$entity"}
    payload.update(record.model_dump(exclude_unset=True))
    return payload


def error_responses(*status_codes: int) -> dict:
    """OpenAPI ``responses`` entries documenting the error envelope"""
    return {code: {"model": ErrorResponse} for code in status_codes}
