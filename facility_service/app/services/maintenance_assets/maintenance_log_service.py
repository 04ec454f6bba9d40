from datetime import date
from uuid import UUID

from sqlalchemy.orm import Session

from shared.core.exceptions import ValidationError
from shared.core.schemas import PaginatedResult
from shared.helpers.date_helper import day_range, utc_now
from ...crud.maintenance_assets.assets_crud import asset_crud
from ...crud.maintenance_assets.maintenance_log_crud import maintenance_log_crud
from ...crud.maintenance_assets.maintenance_schedule_crud import maintenance_schedule_crud
from ...enum.maintenance_assets_enum import MaintenanceLogStatus, MaintenanceLogType
from ...models.maintenance_assets.maintenance_logs import MaintenanceLog
from ...schemas.maintenance_assets.maintenance_log_schemas import (
    MaintenanceLogCreate, MaintenanceLogOut, MaintenanceLogRequest, MaintenanceLogStatistics, MaintenanceLogUpdate)
from ..base_service import (
    drop_nulls, ensure_reference, ensure_user, get_or_404, get_user_or_404, handle_errors, logger,
    validate_choice)


def _check_schedule_matches_asset(db: Session, schedule_id, asset_id):
    schedule = ensure_reference(db, maintenance_schedule_crud, "schedule_id", schedule_id)
    if schedule is not None and schedule.asset_id != asset_id:
        raise ValidationError.for_field("schedule_id", "The schedule does not belong to the selected asset.")


def get_logs(db: Session, params: MaintenanceLogRequest):
    with handle_errors(db, "retrieving maintenance logs"):
        items, total = maintenance_log_crud.paginate(
            db, params.page, params.per_page, maintenance_log_crud.build_filters(params), params.search)
        return PaginatedResult.build(
            [MaintenanceLogOut.model_validate(item) for item in items], total, params.page, params.per_page)


def get_log(db: Session, log_id: UUID):
    with handle_errors(db, "retrieving maintenance log"):
        return get_or_404(db, maintenance_log_crud, log_id, "Maintenance log")


def get_asset_logs(db: Session, asset_id: UUID):
    with handle_errors(db, "retrieving asset maintenance logs"):
        get_or_404(db, asset_crud, asset_id, "Asset")
        return maintenance_log_crud.get_by_asset(db, asset_id)


def get_schedule_logs(db: Session, schedule_id: UUID):
    with handle_errors(db, "retrieving schedule maintenance logs"):
        get_or_404(db, maintenance_schedule_crud, schedule_id, "Maintenance schedule")
        return maintenance_log_crud.get_by_schedule(db, schedule_id)


def get_technician_logs(db: Session, user_id: UUID):
    with handle_errors(db, "retrieving technician maintenance logs"):
        get_user_or_404(db, user_id)
        return maintenance_log_crud.get_by_performer(db, user_id)


def get_logs_by_date_range(db: Session, start_date: date, end_date: date):
    with handle_errors(db, "retrieving maintenance logs by date range"):
        if end_date < start_date:
            raise ValidationError.for_field(
                "end_date", "The end date must be a date after or equal to start date.")
        return maintenance_log_crud.get_by_date_range(db, *day_range(start_date, end_date))


def get_logs_by_type(db: Session, log_type: str):
    with handle_errors(db, "retrieving maintenance logs by type"):
        validate_choice(log_type, MaintenanceLogType, field="type")
        return maintenance_log_crud.find_by(db, "type", log_type)


def get_logs_by_status(db: Session, status: str):
    with handle_errors(db, "retrieving maintenance logs by status"):
        validate_choice(status, MaintenanceLogStatus)
        return maintenance_log_crud.find_by(db, "status", status)


def create_log(db: Session, log: MaintenanceLogCreate, performed_by: UUID = None):
    with handle_errors(db, "creating maintenance log", commit=True):
        data = log.model_dump(exclude_unset=True)
        ensure_reference(db, asset_crud, "asset_id", data["asset_id"])
        _check_schedule_matches_asset(db, data.get("schedule_id"), data["asset_id"])
        data["performed_by"] = data.get("performed_by") or performed_by
        ensure_user(db, "performed_by", data["performed_by"])
        data["performed_at"] = data.get("performed_at") or utc_now()
        data["status"] = data.get("status") or MaintenanceLogStatus.completed.value

        db_log = maintenance_log_crud.create(db, data)
    logger.info("Maintenance log %s recorded for asset %s", db_log.id, db_log.asset_id)
    return db_log


def update_log(db: Session, log_id: UUID, log: MaintenanceLogUpdate):
    with handle_errors(db, "updating maintenance log", commit=True):
        db_log = get_or_404(db, maintenance_log_crud, log_id, "Maintenance log")
        data = drop_nulls(log.model_dump(exclude_unset=True),
                          "asset_id", "type", "title", "performed_at", "status")
        if "asset_id" in data:
            ensure_reference(db, asset_crud, "asset_id", data["asset_id"])
        if "performed_by" in data:
            ensure_user(db, "performed_by", data["performed_by"])
        if "schedule_id" in data or "asset_id" in data:
            _check_schedule_matches_asset(
                db, data.get("schedule_id", db_log.schedule_id), data.get("asset_id", db_log.asset_id))
        return maintenance_log_crud.update(db, log_id, data)


def delete_log(db: Session, log_id: UUID):
    with handle_errors(db, "deleting maintenance log", commit=True):
        get_or_404(db, maintenance_log_crud, log_id, "Maintenance log")
        return maintenance_log_crud.delete(db, log_id)


def update_log_status(db: Session, log_id: UUID, status: str):
    with handle_errors(db, "updating maintenance log status", commit=True):
        validate_choice(status, MaintenanceLogStatus)
        get_or_404(db, maintenance_log_crud, log_id, "Maintenance log")
        return maintenance_log_crud.update(db, log_id, {"status": status})


def get_log_statistics(db: Session) -> MaintenanceLogStatistics:
    with handle_errors(db, "retrieving maintenance log statistics"):
        totals = maintenance_log_crud.totals(db)
        by_type = maintenance_log_crud.count_grouped(db, MaintenanceLog.type)
        by_status = maintenance_log_crud.count_grouped(db, MaintenanceLog.status)
        return MaintenanceLogStatistics(
            total=totals["total_maintenance"],
            total_cost=totals["total_cost"],
            average_cost=totals["average_cost"],
            by_type={item.value: by_type.get(item.value, 0) for item in MaintenanceLogType},
            by_status={item.value: by_status.get(item.value, 0) for item in MaintenanceLogStatus},
        )
