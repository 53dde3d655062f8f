"""Base repository with common CRUD operations."""
from typing import TypeVar, Generic, Type, Optional, List, Dict, Any
from sqlalchemy.orm import Session, Query
from sqlalchemy import func
from uuid import UUID
from datetime import datetime

from src.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common database operations.

    Soft-deleted rows (``deleted_at`` set) are excluded from every read
    unless ``include_deleted=True`` is passed explicitly.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    @property
    def soft_deletes(self) -> bool:
        return hasattr(self.model, 'deleted_at')

    def query(self, include_deleted: bool = False) -> Query:
        """
        Base query for the model with the tombstone filter applied.

        Args:
            include_deleted: Whether to include soft-deleted records

        Returns:
            SQLAlchemy query
        """
        query = self.db.query(self.model)
        if self.soft_deletes and not include_deleted:
            query = query.filter(self.model.deleted_at.is_(None))
        return query

    def create(self, obj_in: Dict[str, Any], commit: bool = True) -> ModelType:
        """
        Create new record.

        Args:
            obj_in: Dictionary with object data
            commit: Commit immediately (otherwise only flush)

        Returns:
            Created model instance
        """
        db_obj = self.model(**obj_in)
        self.db.add(db_obj)
        if commit:
            self.db.commit()
            self.db.refresh(db_obj)
        else:
            self.db.flush()
        return db_obj

    def bulk_create(self, objects: List[Dict[str, Any]]) -> List[ModelType]:
        """
        Create several records in a single commit.

        Args:
            objects: List of dictionaries with object data

        Returns:
            List of created model instances
        """
        db_objs = [self.model(**obj_data) for obj_data in objects]
        self.db.add_all(db_objs)
        self.db.commit()
        return db_objs

    def get(self, id: UUID, include_deleted: bool = False) -> Optional[ModelType]:
        """
        Get record by ID.

        Args:
            id: Record UUID
            include_deleted: Whether to include soft-deleted records

        Returns:
            Model instance or None if not found
        """
        return self.query(include_deleted).filter(self.model.id == id).first()

    def update(self, db_obj: ModelType, obj_in: Dict[str, Any]) -> ModelType:
        """
        Apply field updates to a loaded record.

        Args:
            db_obj: Model instance
            obj_in: Dictionary with fields to update

        Returns:
            Updated model instance
        """
        for field, value in obj_in.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def delete(self, id: UUID, soft: bool = True) -> bool:
        """
        Delete record (soft or hard).

        Args:
            id: Record UUID
            soft: Whether to soft delete (if model supports it)

        Returns:
            True if successful, False if record not found
        """
        db_obj = self.get(id)
        if not db_obj:
            return False

        if soft and self.soft_deletes:
            db_obj.deleted_at = datetime.utcnow()
        else:
            self.db.delete(db_obj)
        self.db.commit()

        return True

    def count(
        self,
        include_deleted: bool = False,
        filters: Optional[Dict[str, Any]] = None
    ) -> int:
        """
        Count records.

        Args:
            include_deleted: Whether to include soft-deleted records
            filters: Dictionary of column:value filters

        Returns:
            Count of records
        """
        query = self.db.query(func.count(self.model.id))

        if self.soft_deletes and not include_deleted:
            query = query.filter(self.model.deleted_at.is_(None))

        if filters:
            for column, value in filters.items():
                if hasattr(self.model, column):
                    query = query.filter(getattr(self.model, column) == value)

        return query.scalar() or 0

    def commit(self) -> None:
        """Commit current transaction."""
        self.db.commit()

    def rollback(self) -> None:
        """Rollback current transaction."""
        self.db.rollback()
