# app/routers/space_sites/spaces_router.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import require_permission
from shared.core.database import get_facility_db as get_db
from shared.core.schemas import JsonOutResult, PaginatedResult, StatusUpdate
from shared.helpers.json_response_helper import created_response, deleted_response, success_response
from ...schemas.maintenance_assets.assets_schemas import AssetOut
from ...schemas.maintenance_assets.work_order_schemas import WorkOrderOut
from ...schemas.space_sites.spaces_schemas import SpaceCreate, SpaceOut, SpaceRequest, SpaceStatistics, SpaceUpdate
from ...services.space_sites import space_service as service

router = APIRouter(
    prefix="/api/spaces",
    tags=["spaces"],
    dependencies=[Depends(require_permission("view spaces"))]
)


@router.get("/", response_model=JsonOutResult[PaginatedResult[SpaceOut]])
def get_spaces(params: SpaceRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=service.get_spaces(db, params), message="Spaces retrieved successfully")


@router.post("/", status_code=201, response_model=JsonOutResult[SpaceOut])
def create_space(
        space: SpaceCreate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("create spaces"))):
    result = service.create_space(db, space)
    return created_response(data=SpaceOut.model_validate(result), message="Space created successfully")


@router.get("/active", response_model=JsonOutResult[List[SpaceOut]])
def get_active_spaces(db: Session = Depends(get_db)):
    spaces = service.get_active_spaces(db)
    return success_response(
        data=[SpaceOut.model_validate(s) for s in spaces], message="Active spaces retrieved successfully")


@router.get("/code/{code}", response_model=JsonOutResult[SpaceOut])
def get_space_by_code(code: str, db: Session = Depends(get_db)):
    space = service.get_space_by_code(db, code)
    return success_response(data=SpaceOut.model_validate(space), message="Space retrieved successfully")


@router.get("/floor/{floor_id}", response_model=JsonOutResult[List[SpaceOut]])
def get_spaces_by_floor(floor_id: UUID, db: Session = Depends(get_db)):
    spaces = service.get_spaces_by_floor(db, floor_id)
    return success_response(
        data=[SpaceOut.model_validate(s) for s in spaces], message="Floor spaces retrieved successfully")


@router.get("/building/{building_id}", response_model=JsonOutResult[List[SpaceOut]])
def get_spaces_by_building(building_id: UUID, db: Session = Depends(get_db)):
    spaces = service.get_spaces_by_building(db, building_id)
    return success_response(
        data=[SpaceOut.model_validate(s) for s in spaces], message="Building spaces retrieved successfully")


@router.get("/{space_id}", response_model=JsonOutResult[SpaceOut])
def get_space(space_id: UUID, db: Session = Depends(get_db)):
    space = service.get_space(db, space_id)
    return success_response(data=SpaceOut.model_validate(space), message="Space retrieved successfully")


@router.put("/{space_id}", response_model=JsonOutResult[SpaceOut])
def update_space(
        space_id: UUID,
        space: SpaceUpdate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("edit spaces"))):
    result = service.update_space(db, space_id, space)
    return success_response(data=SpaceOut.model_validate(result), message="Space updated successfully")


@router.delete("/{space_id}", response_model=JsonOutResult[None])
def delete_space(
        space_id: UUID,
        db: Session = Depends(get_db),
        _=Depends(require_permission("delete spaces"))):
    service.delete_space(db, space_id)
    return deleted_response(message="Space deleted successfully")


@router.get("/{space_id}/assets", response_model=JsonOutResult[List[AssetOut]])
def get_space_assets(space_id: UUID, db: Session = Depends(get_db)):
    assets = service.get_space_assets(db, space_id)
    return success_response(
        data=[AssetOut.model_validate(a) for a in assets], message="Space assets retrieved successfully")


@router.get("/{space_id}/work-orders", response_model=JsonOutResult[List[WorkOrderOut]])
def get_space_work_orders(space_id: UUID, db: Session = Depends(get_db)):
    work_orders = service.get_space_work_orders(db, space_id)
    return success_response(
        data=[WorkOrderOut.model_validate(w) for w in work_orders], message="Space work orders retrieved successfully")


@router.patch("/{space_id}/status", response_model=JsonOutResult[SpaceOut])
def update_space_status(
        space_id: UUID,
        payload: StatusUpdate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("edit spaces"))):
    result = service.update_space_status(db, space_id, payload.status)
    return success_response(data=SpaceOut.model_validate(result), message="Space status updated successfully")


@router.get("/{space_id}/statistics", response_model=JsonOutResult[SpaceStatistics])
def get_space_statistics(space_id: UUID, db: Session = Depends(get_db)):
    return success_response(
        data=service.get_space_statistics(db, space_id), message="Space statistics retrieved successfully")
