from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from app.core.errors import NotFoundError
from app.core.utils import generate_custom_id

ModelT = TypeVar("ModelT")


class BaseRepository(Generic[ModelT]):
    """Typed access to one table.

    Repositories never commit; the calling service owns the transaction.
    """

    model: Type[ModelT]
    id_field: str
    id_prefix: str
    label: str = "Record"

    def __init__(self, db: Session):
        self.db = db

    def get(self, record_id: str) -> Optional[ModelT]:
        return self.db.query(self.model).filter(getattr(self.model, self.id_field) == record_id).first()

    def get_or_404(self, record_id: str) -> ModelT:
        record = self.get(record_id)
        if record is None:
            raise NotFoundError(f"{self.label} not found")
        return record

    def list(self, *order_by) -> List[ModelT]:
        query = self.db.query(self.model)
        if order_by:
            query = query.order_by(*order_by)
        return query.all()

    def add(self, record: ModelT) -> ModelT:
        if not getattr(record, self.id_field, None):
            setattr(record, self.id_field, generate_custom_id(self.db, self.model, self.id_prefix, self.id_field))
        self.db.add(record)
        self.db.flush()
        return record

    def delete(self, record: ModelT) -> None:
        self.db.delete(record)
        self.db.flush()
