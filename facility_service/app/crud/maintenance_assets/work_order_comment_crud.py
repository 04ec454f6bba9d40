from uuid import UUID

from sqlalchemy.orm import Query, Session

from ...models.maintenance_assets.work_order_comments import WorkOrderComment
from ..base_crud import CRUDBase


class CRUDWorkOrderComment(CRUDBase[WorkOrderComment]):
    """Comments are hard deleted and carry no soft-delete columns."""

    def query(self, db: Session) -> Query:
        return db.query(WorkOrderComment)

    def default_order(self):
        return WorkOrderComment.created_at.asc()

    def count(self, db: Session, *criteria) -> int:
        return self.query(db).filter(*criteria).count()

    def get_for_work_order(self, db: Session, work_order_id: UUID):
        return self.find_by(db, "work_order_id", work_order_id)

    def get_in_work_order(self, db: Session, work_order_id: UUID, comment_id: UUID):
        return self.query(db).filter(
            WorkOrderComment.id == comment_id,
            WorkOrderComment.work_order_id == work_order_id
        ).first()

    def delete(self, db: Session, id: UUID) -> bool:
        db_obj = self.get(db, id)
        if not db_obj:
            return False
        db.delete(db_obj)
        db.flush()
        return True


work_order_comment_crud = CRUDWorkOrderComment(WorkOrderComment)
