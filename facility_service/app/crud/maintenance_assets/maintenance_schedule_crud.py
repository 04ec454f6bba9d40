from datetime import datetime, timedelta
from uuid import UUID

from sqlalchemy.orm import Session

from shared.helpers.date_helper import utc_now
from ...enum.maintenance_assets_enum import MaintenanceScheduleStatus
from ...models.maintenance_assets.maintenance_schedules import MaintenanceSchedule
from ...schemas.maintenance_assets.maintenance_schedule_schemas import MaintenanceScheduleRequest
from ..base_crud import CRUDBase


class CRUDMaintenanceSchedule(CRUDBase[MaintenanceSchedule]):
    search_fields = ("title", "description", "notes")

    def default_order(self):
        return MaintenanceSchedule.scheduled_date.asc()

    def get_by_asset(self, db: Session, asset_id: UUID):
        return self.find_by(db, "asset_id", asset_id)

    def get_by_status(self, db: Session, status: str):
        return self.find_by(db, "status", status)

    def get_upcoming(self, db: Session, days: int = 7):
        now = utc_now()
        return self.find_where(
            db,
            MaintenanceSchedule.status == MaintenanceScheduleStatus.scheduled.value,
            MaintenanceSchedule.scheduled_date >= now,
            MaintenanceSchedule.scheduled_date <= now + timedelta(days=days)
        )

    def get_overdue(self, db: Session, now: datetime = None):
        return self.find_where(
            db,
            # rows already flagged by the overdue sweep stay listed
            MaintenanceSchedule.status.in_(
                (MaintenanceScheduleStatus.scheduled.value, MaintenanceScheduleStatus.overdue.value)),
            MaintenanceSchedule.scheduled_date < (now or utc_now())
        )

    def get_by_date_range(self, db: Session, start: datetime, end: datetime):
        return self.find_where(
            db,
            MaintenanceSchedule.scheduled_date >= start,
            MaintenanceSchedule.scheduled_date <= end
        )

    def build_filters(self, params: MaintenanceScheduleRequest):
        filters = []
        if params.status:
            filters.append(MaintenanceSchedule.status == params.status)
        if params.priority:
            filters.append(MaintenanceSchedule.priority == params.priority)
        if params.asset_id:
            filters.append(MaintenanceSchedule.asset_id == params.asset_id)
        return filters


maintenance_schedule_crud = CRUDMaintenanceSchedule(MaintenanceSchedule)
