# app/routers/space_sites/building_router.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import require_permission
from shared.core.database import get_facility_db as get_db
from shared.core.schemas import JsonOutResult, PaginatedResult, StatusUpdate
from shared.helpers.json_response_helper import created_response, deleted_response, success_response
from ...schemas.space_sites.building_schemas import (
    BuildingCreate, BuildingOut, BuildingRequest, BuildingStatistics, BuildingUpdate)
from ...schemas.space_sites.floor_schemas import FloorOut
from ...schemas.space_sites.spaces_schemas import SpaceOut
from ...services.space_sites import building_service as service

router = APIRouter(
    prefix="/api/buildings",
    tags=["buildings"],
    dependencies=[Depends(require_permission("view buildings"))]
)


@router.get("/", response_model=JsonOutResult[PaginatedResult[BuildingOut]])
def get_buildings(params: BuildingRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=service.get_buildings(db, params), message="Buildings retrieved successfully")


@router.post("/", status_code=201, response_model=JsonOutResult[BuildingOut])
def create_building(
        building: BuildingCreate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("create buildings"))):
    result = service.create_building(db, building)
    return created_response(data=BuildingOut.model_validate(result), message="Building created successfully")


@router.get("/active", response_model=JsonOutResult[List[BuildingOut]])
def get_active_buildings(db: Session = Depends(get_db)):
    buildings = service.get_active_buildings(db)
    return success_response(
        data=[BuildingOut.model_validate(b) for b in buildings], message="Active buildings retrieved successfully")


@router.get("/code/{code}", response_model=JsonOutResult[BuildingOut])
def get_building_by_code(code: str, db: Session = Depends(get_db)):
    building = service.get_building_by_code(db, code)
    return success_response(data=BuildingOut.model_validate(building), message="Building retrieved successfully")


@router.get("/{building_id}", response_model=JsonOutResult[BuildingOut])
def get_building(building_id: UUID, db: Session = Depends(get_db)):
    building = service.get_building(db, building_id)
    return success_response(data=BuildingOut.model_validate(building), message="Building retrieved successfully")


@router.put("/{building_id}", response_model=JsonOutResult[BuildingOut])
def update_building(
        building_id: UUID,
        building: BuildingUpdate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("edit buildings"))):
    result = service.update_building(db, building_id, building)
    return success_response(data=BuildingOut.model_validate(result), message="Building updated successfully")


@router.delete("/{building_id}", response_model=JsonOutResult[None])
def delete_building(
        building_id: UUID,
        db: Session = Depends(get_db),
        _=Depends(require_permission("delete buildings"))):
    service.delete_building(db, building_id)
    return deleted_response(message="Building deleted successfully")


@router.get("/{building_id}/floors", response_model=JsonOutResult[List[FloorOut]])
def get_building_floors(building_id: UUID, db: Session = Depends(get_db)):
    floors = service.get_building_floors(db, building_id)
    return success_response(
        data=[FloorOut.model_validate(f) for f in floors], message="Building floors retrieved successfully")


@router.get("/{building_id}/spaces", response_model=JsonOutResult[List[SpaceOut]])
def get_building_spaces(building_id: UUID, db: Session = Depends(get_db)):
    spaces = service.get_building_spaces(db, building_id)
    return success_response(
        data=[SpaceOut.model_validate(s) for s in spaces], message="Building spaces retrieved successfully")


@router.patch("/{building_id}/status", response_model=JsonOutResult[BuildingOut])
def update_building_status(
        building_id: UUID,
        payload: StatusUpdate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("edit buildings"))):
    result = service.update_building_status(db, building_id, payload.status)
    return success_response(data=BuildingOut.model_validate(result), message="Building status updated successfully")


@router.get("/{building_id}/statistics", response_model=JsonOutResult[BuildingStatistics])
def get_building_statistics(building_id: UUID, db: Session = Depends(get_db)):
    return success_response(
        data=service.get_building_statistics(db, building_id), message="Building statistics retrieved successfully")
