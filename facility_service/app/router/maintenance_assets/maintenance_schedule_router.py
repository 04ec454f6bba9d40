# app/routers/maintenance_assets/maintenance_schedule_router.py
from datetime import date
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.auth import require_permission
from shared.core.database import get_facility_db as get_db
from shared.core.schemas import JsonOutResult, PaginatedResult, StatusUpdate
from shared.helpers.json_response_helper import created_response, deleted_response, success_response
from ...schemas.maintenance_assets.maintenance_schedule_schemas import (
    MaintenanceScheduleComplete, MaintenanceScheduleCreate, MaintenanceScheduleOut, MaintenanceScheduleRequest,
    MaintenanceScheduleReschedule, MaintenanceScheduleUpdate, ScheduleCompletionOut)
from ...services.maintenance_assets import maintenance_schedule_service as service

router = APIRouter(
    prefix="/api/maintenance-schedules",
    tags=["maintenance-schedules"],
    dependencies=[Depends(require_permission("view maintenance schedules"))]
)


def _schedule_list(schedules, message: str):
    return success_response(data=[MaintenanceScheduleOut.model_validate(s) for s in schedules], message=message)


@router.get("/", response_model=JsonOutResult[PaginatedResult[MaintenanceScheduleOut]])
def get_schedules(params: MaintenanceScheduleRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(
        data=service.get_schedules(db, params), message="Maintenance schedules retrieved successfully")


@router.post("/", status_code=201, response_model=JsonOutResult[MaintenanceScheduleOut])
def create_schedule(
        schedule: MaintenanceScheduleCreate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("create maintenance schedules"))):
    result = service.create_schedule(db, schedule)
    return created_response(
        data=MaintenanceScheduleOut.model_validate(result), message="Maintenance schedule created successfully")


@router.get("/upcoming", response_model=JsonOutResult[List[MaintenanceScheduleOut]])
def get_upcoming_schedules(days: int = Query(7, ge=1), db: Session = Depends(get_db)):
    return _schedule_list(service.get_upcoming_schedules(db, days), "Upcoming schedules retrieved successfully")


@router.get("/overdue", response_model=JsonOutResult[List[MaintenanceScheduleOut]])
def get_overdue_schedules(db: Session = Depends(get_db)):
    return _schedule_list(service.get_overdue_schedules(db), "Overdue schedules retrieved successfully")


@router.get("/date-range", response_model=JsonOutResult[List[MaintenanceScheduleOut]])
def get_schedules_by_date_range(
        start_date: date = Query(...),
        end_date: date = Query(...),
        db: Session = Depends(get_db)):
    return _schedule_list(service.get_schedules_by_date_range(db, start_date, end_date),
                          "Schedules retrieved successfully")


@router.get("/status/{status}", response_model=JsonOutResult[List[MaintenanceScheduleOut]])
def get_schedules_by_status(status: str, db: Session = Depends(get_db)):
    return _schedule_list(service.get_schedules_by_status(db, status), "Schedules retrieved successfully")


@router.get("/asset/{asset_id}", response_model=JsonOutResult[List[MaintenanceScheduleOut]])
def get_asset_schedules(asset_id: UUID, db: Session = Depends(get_db)):
    return _schedule_list(service.get_asset_schedules(db, asset_id), "Asset schedules retrieved successfully")


@router.get("/{schedule_id}", response_model=JsonOutResult[MaintenanceScheduleOut])
def get_schedule(schedule_id: UUID, db: Session = Depends(get_db)):
    schedule = service.get_schedule(db, schedule_id)
    return success_response(
        data=MaintenanceScheduleOut.model_validate(schedule), message="Maintenance schedule retrieved successfully")


@router.put("/{schedule_id}", response_model=JsonOutResult[MaintenanceScheduleOut])
def update_schedule(
        schedule_id: UUID,
        schedule: MaintenanceScheduleUpdate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("edit maintenance schedules"))):
    result = service.update_schedule(db, schedule_id, schedule)
    return success_response(
        data=MaintenanceScheduleOut.model_validate(result), message="Maintenance schedule updated successfully")


@router.delete("/{schedule_id}", response_model=JsonOutResult[None])
def delete_schedule(
        schedule_id: UUID,
        db: Session = Depends(get_db),
        _=Depends(require_permission("delete maintenance schedules"))):
    service.delete_schedule(db, schedule_id)
    return deleted_response(message="Maintenance schedule deleted successfully")


@router.post("/{schedule_id}/complete", response_model=JsonOutResult[ScheduleCompletionOut])
def complete_schedule(
        schedule_id: UUID,
        completion: MaintenanceScheduleComplete,
        db: Session = Depends(get_db),
        _=Depends(require_permission("edit maintenance schedules"))):
    result = service.complete_schedule(db, schedule_id, completion)
    next_schedule = result["next_schedule"]
    data = ScheduleCompletionOut(
        completed=MaintenanceScheduleOut.model_validate(result["completed"]),
        next_schedule=MaintenanceScheduleOut.model_validate(next_schedule) if next_schedule else None,
    )
    return success_response(
        data=data, message="Maintenance schedule completed successfully")


@router.patch("/{schedule_id}/reschedule", response_model=JsonOutResult[MaintenanceScheduleOut])
def reschedule(
        schedule_id: UUID,
        payload: MaintenanceScheduleReschedule,
        db: Session = Depends(get_db),
        _=Depends(require_permission("edit maintenance schedules"))):
    result = service.reschedule(db, schedule_id, payload.scheduled_date)
    return success_response(
        data=MaintenanceScheduleOut.model_validate(result), message="Maintenance rescheduled successfully")


@router.patch("/{schedule_id}/status", response_model=JsonOutResult[MaintenanceScheduleOut])
def update_schedule_status(
        schedule_id: UUID,
        payload: StatusUpdate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("edit maintenance schedules"))):
    result = service.update_schedule_status(db, schedule_id, payload.status)
    return success_response(
        data=MaintenanceScheduleOut.model_validate(result), message="Maintenance schedule status updated successfully")
