# app/routers/maintenance_assets/assets_router.py
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.auth import require_permission
from shared.core.database import get_facility_db as get_db
from shared.core.schemas import JsonOutResult, PaginatedResult, StatusUpdate
from shared.helpers.json_response_helper import created_response, deleted_response, success_response
from ...schemas.maintenance_assets.assets_schemas import (
    AssetAssign, AssetCreate, AssetOut, AssetStatistics, AssetUpdate, AssetsRequest)
from ...schemas.maintenance_assets.maintenance_log_schemas import MaintenanceLogOut
from ...schemas.maintenance_assets.maintenance_schedule_schemas import MaintenanceScheduleOut
from ...schemas.maintenance_assets.work_order_schemas import WorkOrderOut
from ...services.maintenance_assets import asset_service as service

router = APIRouter(
    prefix="/api/assets",
    tags=["assets"],
    dependencies=[Depends(require_permission("view assets"))]
)


def _asset_list(assets, message: str):
    return success_response(data=[AssetOut.model_validate(a) for a in assets], message=message)


@router.get("/", response_model=JsonOutResult[PaginatedResult[AssetOut]])
def get_assets(params: AssetsRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=service.get_assets(db, params), message="Assets retrieved successfully")


@router.post("/", status_code=201, response_model=JsonOutResult[AssetOut])
def create_asset(
        asset: AssetCreate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("create assets"))):
    result = service.create_asset(db, asset)
    return created_response(data=AssetOut.model_validate(result), message="Asset created successfully")


@router.get("/active", response_model=JsonOutResult[List[AssetOut]])
def get_active_assets(db: Session = Depends(get_db)):
    return _asset_list(service.get_active_assets(db), "Active assets retrieved successfully")


@router.get("/warranty-expiring", response_model=JsonOutResult[List[AssetOut]])
def get_warranty_expiring_assets(days: int = Query(30, ge=1), db: Session = Depends(get_db)):
    return _asset_list(service.get_warranty_expiring_assets(db, days),
                       "Assets with expiring warranty retrieved successfully")


@router.get("/code/{code}", response_model=JsonOutResult[AssetOut])
def get_asset_by_code(code: str, db: Session = Depends(get_db)):
    asset = service.get_asset_by_code(db, code)
    return success_response(data=AssetOut.model_validate(asset), message="Asset retrieved successfully")


@router.get("/space/{space_id}", response_model=JsonOutResult[List[AssetOut]])
def get_assets_by_space(space_id: UUID, db: Session = Depends(get_db)):
    return _asset_list(service.get_assets_by_space(db, space_id), "Space assets retrieved successfully")


@router.get("/floor/{floor_id}", response_model=JsonOutResult[List[AssetOut]])
def get_assets_by_floor(floor_id: UUID, db: Session = Depends(get_db)):
    return _asset_list(service.get_assets_by_floor(db, floor_id), "Floor assets retrieved successfully")


@router.get("/building/{building_id}", response_model=JsonOutResult[List[AssetOut]])
def get_assets_by_building(building_id: UUID, db: Session = Depends(get_db)):
    return _asset_list(service.get_assets_by_building(db, building_id), "Building assets retrieved successfully")


@router.get("/category/{category_id}", response_model=JsonOutResult[List[AssetOut]])
def get_assets_by_category(category_id: UUID, db: Session = Depends(get_db)):
    return _asset_list(service.get_assets_by_category(db, category_id), "Category assets retrieved successfully")


@router.get("/{asset_id}", response_model=JsonOutResult[AssetOut])
def get_asset(asset_id: UUID, db: Session = Depends(get_db)):
    asset = service.get_asset(db, asset_id)
    return success_response(data=AssetOut.model_validate(asset), message="Asset retrieved successfully")


@router.put("/{asset_id}", response_model=JsonOutResult[AssetOut])
def update_asset(
        asset_id: UUID,
        asset: AssetUpdate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("edit assets"))):
    result = service.update_asset(db, asset_id, asset)
    return success_response(data=AssetOut.model_validate(result), message="Asset updated successfully")


# ---------------- Delete Asset (Soft Delete) ----------------
@router.delete("/{asset_id}", response_model=JsonOutResult[None])
def delete_asset(
        asset_id: UUID,
        db: Session = Depends(get_db),
        _=Depends(require_permission("delete assets"))):
    service.delete_asset(db, asset_id)
    return deleted_response(message="Asset deleted successfully")


@router.patch("/{asset_id}/status", response_model=JsonOutResult[AssetOut])
def update_asset_status(
        asset_id: UUID,
        payload: StatusUpdate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("edit assets"))):
    result = service.update_asset_status(db, asset_id, payload.status)
    return success_response(data=AssetOut.model_validate(result), message="Asset status updated successfully")


@router.patch("/{asset_id}/assign", response_model=JsonOutResult[AssetOut])
def assign_asset_to_space(
        asset_id: UUID,
        payload: AssetAssign,
        db: Session = Depends(get_db),
        _=Depends(require_permission("edit assets"))):
    result = service.assign_asset_to_space(db, asset_id, payload.space_id)
    return success_response(data=AssetOut.model_validate(result), message="Asset assigned to space successfully")


@router.get("/{asset_id}/maintenance-history", response_model=JsonOutResult[List[MaintenanceLogOut]])
def get_maintenance_history(asset_id: UUID, db: Session = Depends(get_db)):
    logs = service.get_maintenance_history(db, asset_id)
    return success_response(
        data=[MaintenanceLogOut.model_validate(log) for log in logs],
        message="Maintenance history retrieved successfully")


@router.get("/{asset_id}/work-orders", response_model=JsonOutResult[List[WorkOrderOut]])
def get_asset_work_orders(asset_id: UUID, db: Session = Depends(get_db)):
    work_orders = service.get_asset_work_orders(db, asset_id)
    return success_response(
        data=[WorkOrderOut.model_validate(w) for w in work_orders], message="Asset work orders retrieved successfully")


@router.get("/{asset_id}/maintenance-schedule", response_model=JsonOutResult[List[MaintenanceScheduleOut]])
def get_asset_maintenance_schedule(asset_id: UUID, db: Session = Depends(get_db)):
    schedules = service.get_asset_maintenance_schedule(db, asset_id)
    return success_response(
        data=[MaintenanceScheduleOut.model_validate(s) for s in schedules],
        message="Maintenance schedule retrieved successfully")


@router.get("/{asset_id}/statistics", response_model=JsonOutResult[AssetStatistics])
def get_asset_statistics(asset_id: UUID, db: Session = Depends(get_db)):
    return success_response(
        data=service.get_asset_statistics(db, asset_id), message="Asset statistics retrieved successfully")


@router.post("/{asset_id}/schedule-maintenance", response_model=JsonOutResult[Optional[AssetOut]])
def schedule_next_maintenance(
        asset_id: UUID,
        db: Session = Depends(get_db),
        _=Depends(require_permission("create maintenance schedules"))):
    result = service.schedule_next_maintenance(db, asset_id)
    if result is None:
        return success_response(data=None, message="Asset has no maintenance frequency configured")
    return success_response(data=AssetOut.model_validate(result), message="Next maintenance scheduled successfully")
