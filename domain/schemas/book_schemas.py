from pydantic import BaseModel, Field
from typing import Optional


class BookResponse(BaseModel):
    """Schema for a book as served by CatalogService"""

    ID: int
    title: str
    stock: int

    model_config = {"from_attributes": True}


class BookUpdate(BaseModel):
    """Partial update of a book; omitted fields are left untouched"""

    title: Optional[str] = Field(None, description="New title, must not be blank")
    stock: Optional[int] = Field(None, description="Units in stock, must be >= 0")

    model_config = {"extra": "forbid"}
