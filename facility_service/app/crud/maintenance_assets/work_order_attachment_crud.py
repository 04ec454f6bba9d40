from uuid import UUID

from sqlalchemy.orm import Query, Session

from ...models.maintenance_assets.work_order_attachments import WorkOrderAttachment
from ..base_crud import CRUDBase


class CRUDWorkOrderAttachment(CRUDBase[WorkOrderAttachment]):

    def query(self, db: Session) -> Query:
        return db.query(WorkOrderAttachment)

    def default_order(self):
        return WorkOrderAttachment.created_at.asc()

    def count(self, db: Session, *criteria) -> int:
        return self.query(db).filter(*criteria).count()

    def get_for_work_order(self, db: Session, work_order_id: UUID):
        return self.find_by(db, "work_order_id", work_order_id)

    def get_in_work_order(self, db: Session, work_order_id: UUID, attachment_id: UUID):
        return self.query(db).filter(
            WorkOrderAttachment.id == attachment_id,
            WorkOrderAttachment.work_order_id == work_order_id
        ).first()

    def delete(self, db: Session, id: UUID) -> bool:
        db_obj = self.get(db, id)
        if not db_obj:
            return False
        db.delete(db_obj)
        db.flush()
        return True


work_order_attachment_crud = CRUDWorkOrderAttachment(WorkOrderAttachment)
