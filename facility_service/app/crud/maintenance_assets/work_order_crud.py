from datetime import datetime, timedelta
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from shared.helpers.date_helper import utc_now
from ...enum.maintenance_assets_enum import WorkOrderStatus
from ...models.maintenance_assets.work_order import WorkOrder
from ...schemas.maintenance_assets.work_order_schemas import WorkOrderRequest
from ..base_crud import CRUDBase

CLOSED_STATUSES = (WorkOrderStatus.completed.value, WorkOrderStatus.cancelled.value)


def open_work_order_filter():
    return WorkOrder.status.notin_(CLOSED_STATUSES)


def overdue_filters(now: datetime = None):
    return [
        WorkOrder.due_date.isnot(None),
        WorkOrder.due_date < (now or utc_now()),
        open_work_order_filter(),
    ]


class CRUDWorkOrder(CRUDBase[WorkOrder]):
    search_fields = ("number", "title", "description")

    def get_by_asset(self, db: Session, asset_id: UUID):
        return self.find_by(db, "asset_id", asset_id)

    def get_by_space(self, db: Session, space_id: UUID):
        return self.find_by(db, "space_id", space_id)

    def get_by_assignee(self, db: Session, user_id: UUID):
        return self.find_by(db, "assigned_to", user_id)

    def get_by_requester(self, db: Session, user_id: UUID):
        return self.find_by(db, "requested_by", user_id)

    def get_by_date_range(self, db: Session, start: datetime, end: datetime):
        return self.find_where(db, WorkOrder.created_at >= start, WorkOrder.created_at <= end)

    def get_overdue(self, db: Session):
        return self.find_where(db, *overdue_filters())

    def get_due_within(self, db: Session, days: int):
        now = utc_now()
        return self.find_where(
            db,
            WorkOrder.due_date >= now,
            WorkOrder.due_date <= now + timedelta(days=days),
            open_work_order_filter()
        )

    def count_numbers_with_prefix(self, db: Session, prefix: str) -> int:
        # soft-deleted rows keep their numbers
        return db.query(func.count(WorkOrder.id)).filter(WorkOrder.number.like(f"{prefix}%")).scalar() or 0

    def count_grouped(self, db: Session, column):
        rows = (
            db.query(column, func.count(WorkOrder.id))
            .filter(WorkOrder.is_deleted == False)
            .group_by(column)
            .all()
        )
        return {key: count for key, count in rows}

    def build_filters(self, params: WorkOrderRequest):
        filters = []
        if params.status:
            filters.append(WorkOrder.status == params.status)
        if params.priority:
            filters.append(WorkOrder.priority == params.priority)
        if params.type:
            filters.append(WorkOrder.type == params.type)
        return filters


work_order_crud = CRUDWorkOrder(WorkOrder)
