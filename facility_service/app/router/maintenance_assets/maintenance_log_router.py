# app/routers/maintenance_assets/maintenance_log_router.py
from datetime import date
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.auth import require_permission
from shared.core.database import get_facility_db as get_db
from shared.core.schemas import JsonOutResult, PaginatedResult, StatusUpdate, UserToken
from shared.helpers.json_response_helper import created_response, deleted_response, success_response
from ...schemas.maintenance_assets.maintenance_log_schemas import (
    MaintenanceLogCreate, MaintenanceLogOut, MaintenanceLogRequest, MaintenanceLogStatistics, MaintenanceLogUpdate)
from ...services.maintenance_assets import maintenance_log_service as service

router = APIRouter(
    prefix="/api/maintenance-logs",
    tags=["maintenance-logs"],
    dependencies=[Depends(require_permission("view maintenance logs"))]
)


def _log_list(logs, message: str):
    return success_response(data=[MaintenanceLogOut.model_validate(log) for log in logs], message=message)


@router.get("/", response_model=JsonOutResult[PaginatedResult[MaintenanceLogOut]])
def get_logs(params: MaintenanceLogRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=service.get_logs(db, params), message="Maintenance logs retrieved successfully")


@router.post("/", status_code=201, response_model=JsonOutResult[MaintenanceLogOut])
def create_log(
        log: MaintenanceLogCreate,
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(require_permission("create maintenance logs"))):
    result = service.create_log(db, log, performed_by=UUID(current_user.user_id))
    return created_response(data=MaintenanceLogOut.model_validate(result), message="Maintenance log created successfully")


@router.get("/statistics", response_model=JsonOutResult[MaintenanceLogStatistics])
def get_log_statistics(db: Session = Depends(get_db)):
    return success_response(data=service.get_log_statistics(db), message="Maintenance statistics retrieved successfully")


@router.get("/date-range", response_model=JsonOutResult[List[MaintenanceLogOut]])
def get_logs_by_date_range(
        start_date: date = Query(...),
        end_date: date = Query(...),
        db: Session = Depends(get_db)):
    return _log_list(service.get_logs_by_date_range(db, start_date, end_date),
                     "Maintenance logs retrieved successfully")


@router.get("/type/{log_type}", response_model=JsonOutResult[List[MaintenanceLogOut]])
def get_logs_by_type(log_type: str, db: Session = Depends(get_db)):
    return _log_list(service.get_logs_by_type(db, log_type), "Maintenance logs retrieved successfully")


@router.get("/status/{status}", response_model=JsonOutResult[List[MaintenanceLogOut]])
def get_logs_by_status(status: str, db: Session = Depends(get_db)):
    return _log_list(service.get_logs_by_status(db, status), "Maintenance logs retrieved successfully")


@router.get("/asset/{asset_id}", response_model=JsonOutResult[List[MaintenanceLogOut]])
def get_asset_logs(asset_id: UUID, db: Session = Depends(get_db)):
    return _log_list(service.get_asset_logs(db, asset_id), "Asset maintenance logs retrieved successfully")


@router.get("/schedule/{schedule_id}", response_model=JsonOutResult[List[MaintenanceLogOut]])
def get_schedule_logs(schedule_id: UUID, db: Session = Depends(get_db)):
    return _log_list(service.get_schedule_logs(db, schedule_id), "Schedule maintenance logs retrieved successfully")


@router.get("/technician/{user_id}", response_model=JsonOutResult[List[MaintenanceLogOut]])
def get_technician_logs(user_id: UUID, db: Session = Depends(get_db)):
    return _log_list(service.get_technician_logs(db, user_id), "Technician maintenance logs retrieved successfully")


@router.get("/{log_id}", response_model=JsonOutResult[MaintenanceLogOut])
def get_log(log_id: UUID, db: Session = Depends(get_db)):
    log = service.get_log(db, log_id)
    return success_response(data=MaintenanceLogOut.model_validate(log), message="Maintenance log retrieved successfully")


@router.put("/{log_id}", response_model=JsonOutResult[MaintenanceLogOut])
def update_log(
        log_id: UUID,
        log: MaintenanceLogUpdate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("edit maintenance logs"))):
    result = service.update_log(db, log_id, log)
    return success_response(data=MaintenanceLogOut.model_validate(result), message="Maintenance log updated successfully")


@router.delete("/{log_id}", response_model=JsonOutResult[None])
def delete_log(
        log_id: UUID,
        db: Session = Depends(get_db),
        _=Depends(require_permission("delete maintenance logs"))):
    service.delete_log(db, log_id)
    return deleted_response(message="Maintenance log deleted successfully")


@router.patch("/{log_id}/status", response_model=JsonOutResult[MaintenanceLogOut])
def update_log_status(
        log_id: UUID,
        payload: StatusUpdate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("edit maintenance logs"))):
    result = service.update_log_status(db, log_id, payload.status)
    return success_response(
        data=MaintenanceLogOut.model_validate(result), message="Maintenance log status updated successfully")
