# app/routers/space_sites/floor_router.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import require_permission
from shared.core.database import get_facility_db as get_db
from shared.core.schemas import JsonOutResult, PaginatedResult, StatusUpdate
from shared.helpers.json_response_helper import created_response, deleted_response, success_response
from ...schemas.space_sites.floor_schemas import FloorCreate, FloorOut, FloorRequest, FloorStatistics, FloorUpdate
from ...schemas.space_sites.spaces_schemas import SpaceOut
from ...services.space_sites import floor_service as service

router = APIRouter(
    prefix="/api/floors",
    tags=["floors"],
    dependencies=[Depends(require_permission("view floors"))]
)


@router.get("/", response_model=JsonOutResult[PaginatedResult[FloorOut]])
def get_floors(params: FloorRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=service.get_floors(db, params), message="Floors retrieved successfully")


@router.post("/", status_code=201, response_model=JsonOutResult[FloorOut])
def create_floor(
        floor: FloorCreate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("create floors"))):
    result = service.create_floor(db, floor)
    return created_response(data=FloorOut.model_validate(result), message="Floor created successfully")


@router.get("/active", response_model=JsonOutResult[List[FloorOut]])
def get_active_floors(db: Session = Depends(get_db)):
    floors = service.get_active_floors(db)
    return success_response(
        data=[FloorOut.model_validate(f) for f in floors], message="Active floors retrieved successfully")


@router.get("/code/{code}", response_model=JsonOutResult[FloorOut])
def get_floor_by_code(code: str, db: Session = Depends(get_db)):
    floor = service.get_floor_by_code(db, code)
    return success_response(data=FloorOut.model_validate(floor), message="Floor retrieved successfully")


@router.get("/building/{building_id}", response_model=JsonOutResult[List[FloorOut]])
def get_floors_by_building(building_id: UUID, db: Session = Depends(get_db)):
    floors = service.get_floors_by_building(db, building_id)
    return success_response(
        data=[FloorOut.model_validate(f) for f in floors], message="Building floors retrieved successfully")


@router.get("/{floor_id}", response_model=JsonOutResult[FloorOut])
def get_floor(floor_id: UUID, db: Session = Depends(get_db)):
    floor = service.get_floor(db, floor_id)
    return success_response(data=FloorOut.model_validate(floor), message="Floor retrieved successfully")


@router.put("/{floor_id}", response_model=JsonOutResult[FloorOut])
def update_floor(
        floor_id: UUID,
        floor: FloorUpdate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("edit floors"))):
    result = service.update_floor(db, floor_id, floor)
    return success_response(data=FloorOut.model_validate(result), message="Floor updated successfully")


@router.delete("/{floor_id}", response_model=JsonOutResult[None])
def delete_floor(
        floor_id: UUID,
        db: Session = Depends(get_db),
        _=Depends(require_permission("delete floors"))):
    service.delete_floor(db, floor_id)
    return deleted_response(message="Floor deleted successfully")


@router.get("/{floor_id}/spaces", response_model=JsonOutResult[List[SpaceOut]])
def get_floor_spaces(floor_id: UUID, db: Session = Depends(get_db)):
    spaces = service.get_floor_spaces(db, floor_id)
    return success_response(
        data=[SpaceOut.model_validate(s) for s in spaces], message="Floor spaces retrieved successfully")


@router.patch("/{floor_id}/status", response_model=JsonOutResult[FloorOut])
def update_floor_status(
        floor_id: UUID,
        payload: StatusUpdate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("edit floors"))):
    result = service.update_floor_status(db, floor_id, payload.status)
    return success_response(data=FloorOut.model_validate(result), message="Floor status updated successfully")


@router.get("/{floor_id}/statistics", response_model=JsonOutResult[FloorStatistics])
def get_floor_statistics(floor_id: UUID, db: Session = Depends(get_db)):
    return success_response(
        data=service.get_floor_statistics(db, floor_id), message="Floor statistics retrieved successfully")
