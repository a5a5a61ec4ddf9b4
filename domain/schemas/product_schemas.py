"""
Product records: what the on-premise system returns and the three projections
NorthWindService serves from it.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class RemoteProduct(BaseModel):
    """Product as delivered by the on-premise NorthWind service"""

    id: int
    name: str
    description: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class ReadContext(BaseModel):
    """Per-request input handed to a NorthWindService read handler.

    ``query`` carries the raw OData query options; the handlers accept it but
    do not filter on it.
    """

    entity_set: str
    request_id: Optional[str] = None
    query: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class Product(BaseModel):
    """NorthWindService.Products"""

    id: int
    name: str
    description: Optional[str] = None

    @classmethod
    def from_remote(cls, remote: RemoteProduct) -> "Product":
        return cls(id=remote.id, name=remote.name, description=remote.description)


class MixinProduct(BaseModel):
    """NorthWindService.MixinProducts: remote product plus the matching book title"""

    id: int
    name: str
    description: Optional[str] = None
    title: str

    @classmethod
    def from_remote(cls, remote: RemoteProduct, title: str) -> "MixinProduct":
        return cls(
            id=remote.id,
            name=remote.name,
            description=remote.description,
            title=title,
        )


class CustomProduct(BaseModel):
    """NorthWindService.CustomProducts; ``title`` stays unset without a matching book"""

    id: int
    name: str
    title: Optional[str] = None

    @classmethod
    def from_remote(cls, remote: RemoteProduct, book=None) -> "CustomProduct":
        if book is None:
            return cls(id=remote.id, name=remote.name)
        return cls(id=remote.id, name=remote.name, title=book.title)
