from datetime import datetime
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models.maintenance_assets.maintenance_logs import MaintenanceLog
from ...schemas.maintenance_assets.maintenance_log_schemas import MaintenanceLogRequest
from ..base_crud import CRUDBase


class CRUDMaintenanceLog(CRUDBase[MaintenanceLog]):
    search_fields = ("title", "description", "notes")

    def default_order(self):
        return MaintenanceLog.performed_at.desc()

    def get_by_asset(self, db: Session, asset_id: UUID):
        return self.find_by(db, "asset_id", asset_id)

    def get_by_schedule(self, db: Session, schedule_id: UUID):
        return self.find_by(db, "schedule_id", schedule_id)

    def get_by_performer(self, db: Session, user_id: UUID):
        return self.find_by(db, "performed_by", user_id)

    def get_by_date_range(self, db: Session, start: datetime, end: datetime):
        return self.find_where(
            db,
            MaintenanceLog.performed_at >= start,
            MaintenanceLog.performed_at <= end
        )

    def latest_for_asset(self, db: Session, asset_id: UUID):
        return (
            self.query(db)
            .filter(MaintenanceLog.asset_id == asset_id)
            .order_by(MaintenanceLog.performed_at.desc())
            .first()
        )

    def totals(self, db: Session, *criteria):
        """count / total cost / average cost / average duration over matching logs."""
        count, total_cost, average_cost, average_duration = (
            db.query(
                func.count(MaintenanceLog.id),
                func.coalesce(func.sum(MaintenanceLog.cost), 0),
                func.avg(MaintenanceLog.cost),
                func.avg(MaintenanceLog.duration),
            )
            .filter(MaintenanceLog.is_deleted == False, *criteria)
            .one()
        )
        return {
            "total_maintenance": count or 0,
            "total_cost": float(total_cost or 0),
            "average_cost": round(float(average_cost or 0), 2),
            "average_duration": round(float(average_duration or 0), 2),
        }

    def duration_hours_between(self, db: Session, asset_id: UUID, start: datetime, end: datetime) -> float:
        rows = (
            db.query(MaintenanceLog.duration, MaintenanceLog.duration_unit)
            .filter(
                MaintenanceLog.is_deleted == False,
                MaintenanceLog.asset_id == asset_id,
                MaintenanceLog.performed_at >= start,
                MaintenanceLog.performed_at <= end,
            )
            .all()
        )
        hours = 0.0
        for duration, unit in rows:
            if not duration:
                continue
            hours += duration / 60 if unit == "minutes" else duration
        return hours

    def count_grouped(self, db: Session, column):
        rows = (
            db.query(column, func.count(MaintenanceLog.id))
            .filter(MaintenanceLog.is_deleted == False)
            .group_by(column)
            .all()
        )
        return {key: count for key, count in rows}

    def build_filters(self, params: MaintenanceLogRequest):
        filters = []
        if params.type:
            filters.append(MaintenanceLog.type == params.type)
        if params.status:
            filters.append(MaintenanceLog.status == params.status)
        if params.asset_id:
            filters.append(MaintenanceLog.asset_id == params.asset_id)
        return filters


maintenance_log_crud = CRUDMaintenanceLog(MaintenanceLog)
