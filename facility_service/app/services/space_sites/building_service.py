from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.orm import Session

from shared.core.exceptions import NotFoundError
from shared.core.schemas import MaintenanceStatistics, PaginatedResult
from ...crud.maintenance_assets.assets_crud import asset_crud, building_asset_ids
from ...crud.maintenance_assets.maintenance_log_crud import maintenance_log_crud
from ...crud.maintenance_assets.work_order_crud import open_work_order_filter, work_order_crud
from ...crud.space_sites.building_crud import building_crud
from ...crud.space_sites.floor_crud import floor_crud
from ...crud.space_sites.spaces_crud import building_space_ids, space_crud
from ...enum.space_sites_enum import BuildingStatus
from ...models.maintenance_assets.assets import Asset
from ...models.maintenance_assets.maintenance_logs import MaintenanceLog
from ...models.maintenance_assets.work_order import WorkOrder
from ...models.space_sites.spaces import Space
from ...schemas.space_sites.building_schemas import (
    BuildingCreate, BuildingOut, BuildingRequest, BuildingStatistics, BuildingUpdate)
from ..base_service import (
    alnum, drop_nulls, ensure_unique, generate_unique_code, get_or_404, handle_errors,
    logger, percentage, validate_choice)


def get_buildings(db: Session, params: BuildingRequest):
    with handle_errors(db, "retrieving buildings"):
        items, total = building_crud.paginate(
            db, params.page, params.per_page, building_crud.build_filters(params), params.search)
        return PaginatedResult.build(
            [BuildingOut.model_validate(item) for item in items], total, params.page, params.per_page)


def get_active_buildings(db: Session):
    with handle_errors(db, "retrieving active buildings"):
        return building_crud.get_active(db)


def get_building(db: Session, building_id: UUID):
    with handle_errors(db, "retrieving building"):
        return get_or_404(db, building_crud, building_id, "Building")


def get_building_by_code(db: Session, code: str):
    with handle_errors(db, "retrieving building"):
        building = building_crud.get_by_code(db, code)
        if not building:
            raise NotFoundError(f"Building not found with code: {code}")
        return building


def generate_building_code(db: Session, name: str) -> str:
    base_code = alnum(name)[:3] or "BLD"
    return generate_unique_code(db, building_crud, base_code, width=3)


def create_building(db: Session, building: BuildingCreate):
    with handle_errors(db, "creating building", commit=True):
        data = building.model_dump(exclude_unset=True)
        if data.get("code"):
            ensure_unique(db, building_crud, "code", data["code"])
        else:
            data["code"] = generate_building_code(db, data["name"])
        data["status"] = data.get("status") or BuildingStatus.active.value

        db_building = building_crud.create(db, data)
    logger.info("Building %s created", db_building.code)
    return db_building


def update_building(db: Session, building_id: UUID, building: BuildingUpdate):
    with handle_errors(db, "updating building", commit=True):
        get_or_404(db, building_crud, building_id, "Building")
        data = drop_nulls(building.model_dump(exclude_unset=True), "name", "code", "status")
        if "code" in data:
            ensure_unique(db, building_crud, "code", data["code"], exclude_id=building_id)
        return building_crud.update(db, building_id, data)


def delete_building(db: Session, building_id: UUID):
    with handle_errors(db, "deleting building", commit=True):
        get_or_404(db, building_crud, building_id, "Building")
        return building_crud.delete(db, building_id)


def update_building_status(db: Session, building_id: UUID, status: str):
    with handle_errors(db, "updating building status", commit=True):
        validate_choice(status, BuildingStatus)
        get_or_404(db, building_crud, building_id, "Building")
        return building_crud.update(db, building_id, {"status": status})


def get_building_floors(db: Session, building_id: UUID):
    with handle_errors(db, "retrieving building floors"):
        get_or_404(db, building_crud, building_id, "Building")
        return floor_crud.get_by_building(db, building_id)


def get_building_spaces(db: Session, building_id: UUID):
    with handle_errors(db, "retrieving building spaces"):
        get_or_404(db, building_crud, building_id, "Building")
        return space_crud.get_by_building(db, building_id)


def get_building_statistics(db: Session, building_id: UUID) -> BuildingStatistics:
    with handle_errors(db, "retrieving building statistics"):
        get_or_404(db, building_crud, building_id, "Building")

        in_building = Space.id.in_(building_space_ids(building_id))
        total_spaces, occupied = space_crud.occupancy_counts(db, in_building)
        maintenance = maintenance_log_crud.totals(
            db, MaintenanceLog.asset_id.in_(building_asset_ids(building_id)))
        active_work_orders = work_order_crud.count(
            db,
            open_work_order_filter(),
            or_(
                WorkOrder.space_id.in_(building_space_ids(building_id)),
                WorkOrder.asset_id.in_(building_asset_ids(building_id)),
            )
        )

        return BuildingStatistics(
            spaces_count=total_spaces,
            assets_count=asset_crud.count(db, Asset.space_id.in_(building_space_ids(building_id))),
            occupancy_rate=percentage(occupied, total_spaces),
            maintenance_statistics=MaintenanceStatistics(**maintenance),
            active_work_orders=active_work_orders,
        )
