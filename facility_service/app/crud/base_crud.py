# crud/base_crud.py
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.orm import Query, Session

from shared.core.database import Base
from shared.helpers.date_helper import utc_now

ModelType = TypeVar("ModelType", bound=Base)


def to_columns(data: Dict[str, Any]) -> Dict[str, Any]:
    """Map payload keys onto model attributes (``metadata`` lives on ``meta``)."""
    values = dict(data)
    if "metadata" in values:
        values["meta"] = values.pop("metadata")
    return values


class CRUDBase(Generic[ModelType]):
    """Soft-delete aware repository.

    Never commits: services own the transaction, so several writes can be
    grouped and rolled back together.
    """

    search_fields: Tuple[str, ...] = ()

    def __init__(self, model: Type[ModelType]):
        self.model = model

    # ---------------- query helpers ----------------
    def query(self, db: Session) -> Query:
        return db.query(self.model).filter(self.model.is_deleted == False)

    def search_filter(self, search: Optional[str]):
        if not search or not self.search_fields:
            return None
        term = f"%{search}%"
        return or_(*[getattr(self.model, field).ilike(term) for field in self.search_fields])

    def default_order(self):
        return self.model.created_at.desc()

    # ---------------- reads ----------------
    def all(self, db: Session) -> List[ModelType]:
        return self.query(db).order_by(self.default_order(), self.model.id).all()

    def get(self, db: Session, id: UUID) -> Optional[ModelType]:
        return self.query(db).filter(self.model.id == id).first()

    def find_by(self, db: Session, field: str, value: Any) -> List[ModelType]:
        return self.find_where(db, getattr(self.model, field) == value)

    def first_by(self, db: Session, field: str, value: Any) -> Optional[ModelType]:
        return self.query(db).filter(getattr(self.model, field) == value).first()

    def find_where(self, db: Session, *criteria) -> List[ModelType]:
        return self.query(db).filter(*criteria).order_by(self.default_order(), self.model.id).all()

    def count(self, db: Session, *criteria) -> int:
        return (
            db.query(func.count(self.model.id))
            .filter(self.model.is_deleted == False, *criteria)
            .scalar()
        ) or 0

    def exists_with(self, db: Session, field: str, value: Any, exclude_id: Optional[UUID] = None) -> bool:
        # soft-deleted rows still hold their unique values
        query = db.query(self.model.id).filter(getattr(self.model, field) == value)
        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)
        return query.first() is not None

    def paginate(self, db: Session, page: int, per_page: int, filters: Optional[list] = None,
                 search: Optional[str] = None) -> Tuple[List[ModelType], int]:
        criteria = list(filters or [])
        search_clause = self.search_filter(search)
        if search_clause is not None:
            criteria.append(search_clause)

        base_query = self.query(db).filter(*criteria)
        total = base_query.with_entities(func.count(self.model.id)).scalar() or 0
        items = (
            base_query.order_by(self.default_order(), self.model.id)
            .offset((page - 1) * per_page)
            .limit(per_page)
            .all()
        )
        return items, total

    # ---------------- writes ----------------
    def create(self, db: Session, data: Dict[str, Any]) -> ModelType:
        db_obj = self.model(**to_columns(data))
        db.add(db_obj)
        # flush to populate defaults and surface constraint errors early
        db.flush()
        return db_obj

    def update(self, db: Session, id: UUID, data: Dict[str, Any]) -> Optional[ModelType]:
        db_obj = self.get(db, id)
        if not db_obj:
            return None
        for key, value in to_columns(data).items():
            setattr(db_obj, key, value)
        db.flush()
        return db_obj

    def delete(self, db: Session, id: UUID) -> bool:
        db_obj = self.get(db, id)
        if not db_obj:
            return False
        db_obj.is_deleted = True
        db_obj.deleted_at = utc_now()
        db.flush()
        return True
