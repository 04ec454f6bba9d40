from uuid import UUID

from sqlalchemy.orm import Session

from shared.core.exceptions import NotFoundError
from shared.core.schemas import MaintenanceStatistics, PaginatedResult
from ...crud.maintenance_assets.assets_crud import asset_crud, floor_asset_ids
from ...crud.maintenance_assets.maintenance_log_crud import maintenance_log_crud
from ...crud.space_sites.building_crud import building_crud
from ...crud.space_sites.floor_crud import floor_crud
from ...crud.space_sites.spaces_crud import floor_space_ids, space_crud
from ...enum.space_sites_enum import FloorStatus
from ...models.maintenance_assets.assets import Asset
from ...models.maintenance_assets.maintenance_logs import MaintenanceLog
from ...models.space_sites.spaces import Space
from ...schemas.space_sites.floor_schemas import FloorCreate, FloorOut, FloorRequest, FloorStatistics, FloorUpdate
from ..base_service import (
    drop_nulls, ensure_reference, ensure_unique, generate_unique_code, get_or_404, handle_errors,
    logger, percentage, validate_choice)


def get_floors(db: Session, params: FloorRequest):
    with handle_errors(db, "retrieving floors"):
        items, total = floor_crud.paginate(
            db, params.page, params.per_page, floor_crud.build_filters(params), params.search)
        return PaginatedResult.build(
            [FloorOut.model_validate(item) for item in items], total, params.page, params.per_page)


def get_active_floors(db: Session):
    with handle_errors(db, "retrieving active floors"):
        return floor_crud.get_active(db)


def get_floor(db: Session, floor_id: UUID):
    with handle_errors(db, "retrieving floor"):
        return get_or_404(db, floor_crud, floor_id, "Floor")


def get_floor_by_code(db: Session, code: str):
    with handle_errors(db, "retrieving floor"):
        floor = floor_crud.get_by_code(db, code)
        if not floor:
            raise NotFoundError(f"Floor not found with code: {code}")
        return floor


def get_floors_by_building(db: Session, building_id: UUID):
    with handle_errors(db, "retrieving building floors"):
        get_or_404(db, building_crud, building_id, "Building")
        return floor_crud.get_by_building(db, building_id)


def generate_floor_code(db: Session, building, level: int) -> str:
    base_code = f"{(building.code or '')[:3]}F{level}"
    return generate_unique_code(db, floor_crud, base_code, width=2)


def create_floor(db: Session, floor: FloorCreate):
    with handle_errors(db, "creating floor", commit=True):
        data = floor.model_dump(exclude_unset=True)
        building = ensure_reference(db, building_crud, "building_id", data["building_id"])
        if data.get("code"):
            ensure_unique(db, floor_crud, "code", data["code"])
        else:
            data["code"] = generate_floor_code(db, building, data["level"])
        data["status"] = data.get("status") or FloorStatus.active.value

        db_floor = floor_crud.create(db, data)
    logger.info("Floor %s created", db_floor.code)
    return db_floor


def update_floor(db: Session, floor_id: UUID, floor: FloorUpdate):
    with handle_errors(db, "updating floor", commit=True):
        get_or_404(db, floor_crud, floor_id, "Floor")
        data = drop_nulls(floor.model_dump(exclude_unset=True),
                          "building_id", "name", "level", "code", "status")
        if "building_id" in data:
            ensure_reference(db, building_crud, "building_id", data["building_id"])
        if "code" in data:
            ensure_unique(db, floor_crud, "code", data["code"], exclude_id=floor_id)
        return floor_crud.update(db, floor_id, data)


def delete_floor(db: Session, floor_id: UUID):
    with handle_errors(db, "deleting floor", commit=True):
        get_or_404(db, floor_crud, floor_id, "Floor")
        return floor_crud.delete(db, floor_id)


def update_floor_status(db: Session, floor_id: UUID, status: str):
    with handle_errors(db, "updating floor status", commit=True):
        validate_choice(status, FloorStatus)
        get_or_404(db, floor_crud, floor_id, "Floor")
        return floor_crud.update(db, floor_id, {"status": status})


def get_floor_spaces(db: Session, floor_id: UUID):
    with handle_errors(db, "retrieving floor spaces"):
        get_or_404(db, floor_crud, floor_id, "Floor")
        return space_crud.get_by_floor(db, floor_id)


def get_floor_statistics(db: Session, floor_id: UUID) -> FloorStatistics:
    with handle_errors(db, "retrieving floor statistics"):
        get_or_404(db, floor_crud, floor_id, "Floor")

        total_spaces, occupied = space_crud.occupancy_counts(db, Space.floor_id == floor_id)
        maintenance = maintenance_log_crud.totals(
            db, MaintenanceLog.asset_id.in_(floor_asset_ids(floor_id)))

        return FloorStatistics(
            spaces_count=total_spaces,
            assets_count=asset_crud.count(db, Asset.space_id.in_(floor_space_ids(floor_id))),
            occupancy_rate=percentage(occupied, total_spaces),
            maintenance_statistics=MaintenanceStatistics(**maintenance),
        )
