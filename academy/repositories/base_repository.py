"""
Base repository with standardized CRUD operations and error handling.

Repositories flush but never commit: the service layer owns transaction
boundaries.
"""

from typing import Any, Dict, Generic, Optional, Type, TypeVar

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from academy.config.logging import get_logger
from academy.core.exceptions import (
    EntityAlreadyExistsError,
    EntityNotFoundError,
    RepositoryError,
)
from academy.models.base import BaseModel

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository over one model class.

    Provides CRUD operations and translates SQLAlchemy failures into
    repository exceptions.
    """

    not_found_error: Type[EntityNotFoundError] = EntityNotFoundError

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    # ==================== Create Operations ====================

    def create(self, data: Dict[str, Any]) -> ModelType:
        """
        Create new entity from a field mapping.

        Raises:
            EntityAlreadyExistsError: If a unique constraint is violated
        """
        entity = self.model(**data)
        return self.add(entity)

    def add(self, entity: ModelType) -> ModelType:
        """Add an already-built entity and flush it."""
        try:
            self.db.add(entity)
            self.db.flush()
            logger.info(f"Created {self.model.__name__} with id: {entity.id}")
            return entity
        except IntegrityError as e:
            raise EntityAlreadyExistsError(self.model.__name__) from e
        except SQLAlchemyError as e:
            raise RepositoryError(f"Create failed: {str(e)}") from e

    # ==================== Read Operations ====================

    def find_by_id(self, id: str) -> Optional[ModelType]:
        """Find entity by ID, or None."""
        try:
            return self.db.query(self.model).filter(self.model.id == str(id)).first()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Find by ID failed: {str(e)}") from e

    def get_by_id(self, id: str) -> ModelType:
        """
        Get entity by ID or raise exception.

        Raises:
            EntityNotFoundError: If entity not found
        """
        entity = self.find_by_id(id)
        if entity is None:
            if self.not_found_error is EntityNotFoundError:
                raise EntityNotFoundError(self.model.__name__, id)
            raise self.not_found_error(id)
        return entity

    def exists(self, id: str) -> bool:
        """Check whether an entity with this ID exists."""
        try:
            return self.db.query(self.model.id).filter(self.model.id == str(id)).first() is not None
        except SQLAlchemyError as e:
            raise RepositoryError(f"Exists check failed: {str(e)}") from e

    # ==================== Update Operations ====================

    def update(self, id: str, data: Dict[str, Any]) -> ModelType:
        """
        Apply ``data`` to the entity and flush.

        Raises:
            EntityNotFoundError: If entity not found
        """
        entity = self.get_by_id(id)
        try:
            for key, value in data.items():
                if not hasattr(entity, key):
                    raise RepositoryError(f"{self.model.__name__} has no field '{key}'")
                setattr(entity, key, value)
            self.db.flush()
            logger.info(f"Updated {self.model.__name__} {entity.id}: {sorted(data)}")
            return entity
        except IntegrityError as e:
            raise EntityAlreadyExistsError(self.model.__name__) from e
        except SQLAlchemyError as e:
            raise RepositoryError(f"Update failed: {str(e)}") from e

    # ==================== Delete Operations ====================

    def delete(self, id: str) -> None:
        """
        Hard delete an entity.

        Raises:
            EntityNotFoundError: If entity not found
        """
        entity = self.get_by_id(id)
        try:
            self.db.delete(entity)
            self.db.flush()
            logger.info(f"Deleted {self.model.__name__} {id}")
        except SQLAlchemyError as e:
            raise RepositoryError(f"Delete failed: {str(e)}") from e
