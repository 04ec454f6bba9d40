from datetime import date, datetime
from uuid import UUID

from sqlalchemy.orm import Session

from shared.core.exceptions import ConflictError, ValidationError
from shared.core.schemas import PaginatedResult
from shared.helpers.date_helper import add_interval, day_range, utc_now
from ...crud.maintenance_assets.assets_crud import asset_crud
from ...crud.maintenance_assets.maintenance_schedule_crud import maintenance_schedule_crud
from ...enum.maintenance_assets_enum import MaintenancePriority, MaintenanceScheduleStatus
from ...schemas.maintenance_assets.maintenance_schedule_schemas import (
    MaintenanceScheduleComplete, MaintenanceScheduleCreate, MaintenanceScheduleOut, MaintenanceScheduleRequest,
    MaintenanceScheduleUpdate)
from ..base_service import (
    drop_nulls, ensure_reference, ensure_user, get_or_404, handle_errors, logger, validate_choice)

FINISHED_STATUSES = (MaintenanceScheduleStatus.completed.value, MaintenanceScheduleStatus.cancelled.value)

# columns carried over when a completed schedule spawns its next occurrence
RECURRING_FIELDS = (
    "asset_id", "title", "description", "frequency", "frequency_unit", "priority", "assigned_to", "notes", "meta",
)


def _check_recurrence(frequency, frequency_unit):
    if (frequency is None) != (frequency_unit is None):
        field = "frequency_unit" if frequency is not None else "frequency"
        raise ValidationError.for_field(field, "Frequency and frequency unit must be given together.")


def get_schedules(db: Session, params: MaintenanceScheduleRequest):
    with handle_errors(db, "retrieving maintenance schedules"):
        items, total = maintenance_schedule_crud.paginate(
            db, params.page, params.per_page, maintenance_schedule_crud.build_filters(params), params.search)
        return PaginatedResult.build(
            [MaintenanceScheduleOut.model_validate(item) for item in items], total, params.page, params.per_page)


def get_schedule(db: Session, schedule_id: UUID):
    with handle_errors(db, "retrieving maintenance schedule"):
        return get_or_404(db, maintenance_schedule_crud, schedule_id, "Maintenance schedule")


def get_asset_schedules(db: Session, asset_id: UUID):
    with handle_errors(db, "retrieving asset schedules"):
        get_or_404(db, asset_crud, asset_id, "Asset")
        return maintenance_schedule_crud.get_by_asset(db, asset_id)


def get_upcoming_schedules(db: Session, days: int = 7):
    with handle_errors(db, "retrieving upcoming schedules"):
        return maintenance_schedule_crud.get_upcoming(db, days)


def get_overdue_schedules(db: Session):
    with handle_errors(db, "retrieving overdue schedules"):
        return maintenance_schedule_crud.get_overdue(db)


def get_schedules_by_date_range(db: Session, start_date: date, end_date: date):
    with handle_errors(db, "retrieving schedules by date range"):
        if end_date < start_date:
            raise ValidationError.for_field(
                "end_date", "The end date must be a date after or equal to start date.")
        return maintenance_schedule_crud.get_by_date_range(db, *day_range(start_date, end_date))


def get_schedules_by_status(db: Session, status: str):
    with handle_errors(db, "retrieving schedules by status"):
        validate_choice(status, MaintenanceScheduleStatus)
        return maintenance_schedule_crud.get_by_status(db, status)


def create_schedule(db: Session, schedule: MaintenanceScheduleCreate):
    with handle_errors(db, "creating maintenance schedule", commit=True):
        data = schedule.model_dump(exclude_unset=True)
        ensure_reference(db, asset_crud, "asset_id", data["asset_id"])
        ensure_user(db, "assigned_to", data.get("assigned_to"))
        _check_recurrence(data.get("frequency"), data.get("frequency_unit"))
        data["status"] = data.get("status") or MaintenanceScheduleStatus.scheduled.value
        data["priority"] = data.get("priority") or MaintenancePriority.medium.value

        db_schedule = maintenance_schedule_crud.create(db, data)
    logger.info("Maintenance schedule %s created for asset %s", db_schedule.id, db_schedule.asset_id)
    return db_schedule


def update_schedule(db: Session, schedule_id: UUID, schedule: MaintenanceScheduleUpdate):
    with handle_errors(db, "updating maintenance schedule", commit=True):
        db_schedule = get_or_404(db, maintenance_schedule_crud, schedule_id, "Maintenance schedule")
        data = drop_nulls(schedule.model_dump(exclude_unset=True),
                          "asset_id", "title", "scheduled_date", "priority", "status")
        if "asset_id" in data:
            ensure_reference(db, asset_crud, "asset_id", data["asset_id"])
        if "assigned_to" in data:
            ensure_user(db, "assigned_to", data["assigned_to"])
        _check_recurrence(data.get("frequency", db_schedule.frequency),
                          data.get("frequency_unit", db_schedule.frequency_unit))
        return maintenance_schedule_crud.update(db, schedule_id, data)


def delete_schedule(db: Session, schedule_id: UUID):
    with handle_errors(db, "deleting maintenance schedule", commit=True):
        get_or_404(db, maintenance_schedule_crud, schedule_id, "Maintenance schedule")
        return maintenance_schedule_crud.delete(db, schedule_id)


def complete_schedule(db: Session, schedule_id: UUID, completion: MaintenanceScheduleComplete):
    """Mark a schedule completed and book its next occurrence.

    Both writes share one transaction. A schedule that is already completed
    or cancelled is refused with a ConflictError so that re-submitting a
    completion cannot spawn duplicate future schedules. Schedules without a
    frequency are completed without a successor.
    """
    with handle_errors(db, "completing maintenance schedule", commit=True):
        schedule = get_or_404(db, maintenance_schedule_crud, schedule_id, "Maintenance schedule")
        ensure_user(db, "completed_by", completion.completed_by)
        if schedule.status in FINISHED_STATUSES:
            raise ConflictError(f"Maintenance schedule is already {schedule.status}")

        schedule.status = MaintenanceScheduleStatus.completed.value
        schedule.completion_date = completion.completion_date
        schedule.completion_notes = completion.completion_notes
        schedule.completed_by = completion.completed_by

        next_schedule = None
        if schedule.frequency and schedule.frequency_unit:
            next_data = {field: getattr(schedule, field) for field in RECURRING_FIELDS}
            next_data.update({
                "scheduled_date": add_interval(schedule.scheduled_date, schedule.frequency, schedule.frequency_unit),
                "status": MaintenanceScheduleStatus.scheduled.value,
                "completion_date": None,
                "completion_notes": None,
                "completed_by": None,
            })
            next_schedule = maintenance_schedule_crud.create(db, next_data)
        db.flush()

    logger.info("Maintenance schedule %s completed, next occurrence %s",
                schedule.id, next_schedule.scheduled_date if next_schedule else "none")
    return {"completed": schedule, "next_schedule": next_schedule}


def reschedule(db: Session, schedule_id: UUID, scheduled_date: datetime):
    with handle_errors(db, "rescheduling maintenance", commit=True):
        get_or_404(db, maintenance_schedule_crud, schedule_id, "Maintenance schedule")
        if scheduled_date <= utc_now():
            raise ValidationError.for_field(
                "scheduled_date", "The scheduled date must be a date in the future.")
        return maintenance_schedule_crud.update(db, schedule_id, {
            "scheduled_date": scheduled_date,
            "status": MaintenanceScheduleStatus.scheduled.value,
        })


def update_schedule_status(db: Session, schedule_id: UUID, status: str):
    with handle_errors(db, "updating maintenance schedule status", commit=True):
        validate_choice(status, MaintenanceScheduleStatus)
        get_or_404(db, maintenance_schedule_crud, schedule_id, "Maintenance schedule")
        return maintenance_schedule_crud.update(db, schedule_id, {"status": status})
