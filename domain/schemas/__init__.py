"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.product_schemas import (
    RemoteProduct,
    ReadContext,
    Product,
    MixinProduct,
    CustomProduct,
)
from domain.schemas.book_schemas import BookResponse, BookUpdate

__all__ = [
    # Product schemas
    "RemoteProduct",
    "ReadContext",
    "Product",
    "MixinProduct",
    "CustomProduct",
    # Book schemas
    "BookResponse",
    "BookUpdate",
]
