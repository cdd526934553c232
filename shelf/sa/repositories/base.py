# shelf/sa/repositories/base.py
from typing import Any, Generic, List, Optional, Type, TypeVar
from sqlalchemy import select, exists
from sqlalchemy.orm import Session
from ..models import Base

ModelT = TypeVar('ModelT', bound=Base)

class BaseRepository(Generic[ModelT]):
    """Generic CRUD and field lookups over one mapped table.

    Writes are flushed, never committed. The caller owns the transaction.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, record_id: int) -> Optional[ModelT]:
        return self.session.get(self.model, record_id)

    def reload_by_id(self, record_id: int) -> Optional[ModelT]:
        """Like get_by_id, but always reads the row from the database.

        A record another session deleted comes back as None even when this
        session still holds it in its identity map.
        """
        return self.session.scalars(
            select(self.model)
            .where(self.model.id == record_id)
            .execution_options(populate_existing=True)
        ).first()

    def get_by_field(self, field: str, value: Any) -> Optional[ModelT]:
        """Get the first record whose column `field` equals `value`"""
        column = getattr(self.model, field)
        return self.session.scalars(
            select(self.model).where(column == value).limit(1)
        ).first()

    def exists_by_field(self, field: str, value: Any) -> bool:
        column = getattr(self.model, field)
        return bool(self.session.scalar(select(exists().where(column == value))))

    def get_all(self) -> List[ModelT]:
        return list(self.session.scalars(select(self.model).order_by(self.model.id)))

    def save(self, record: ModelT) -> ModelT:
        """Add or update a record and flush so its id is populated"""
        self.session.add(record)
        self.session.flush()
        return record

    def delete(self, record: ModelT) -> None:
        self.session.delete(record)
        self.session.flush()
