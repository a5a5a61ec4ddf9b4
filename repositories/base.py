"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Generic, TypeVar, Optional, Type
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """Repository bound to one session and one mapped class"""

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """Primary-key lookup through the session identity map; None if absent"""
        return self.db.get(self.model, entity_id)

    def update(self, entity: ModelType) -> ModelType:
        """Flush pending attribute changes and reload server-side values such as the version"""
        self.db.commit()
        self.db.refresh(entity)
        return entity
