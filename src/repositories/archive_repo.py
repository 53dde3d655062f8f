"""Archive repository."""
from sqlalchemy.orm import Session

from src.repositories.base import BaseRepository
from src.models.archive import Archive


class ArchiveRepository(BaseRepository[Archive]):
    """Repository for bulk download archives."""
    
    def __init__(self, db: Session):
        super().__init__(Archive, db)
