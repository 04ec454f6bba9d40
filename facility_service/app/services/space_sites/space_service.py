from uuid import UUID

from sqlalchemy.orm import Session

from shared.core.exceptions import NotFoundError
from shared.core.schemas import MaintenanceStatistics, PaginatedResult
from ...crud.maintenance_assets.assets_crud import asset_crud, space_asset_ids
from ...crud.maintenance_assets.maintenance_log_crud import maintenance_log_crud
from ...crud.maintenance_assets.work_order_crud import open_work_order_filter, work_order_crud
from ...crud.space_sites.building_crud import building_crud
from ...crud.space_sites.floor_crud import floor_crud
from ...crud.space_sites.spaces_crud import space_crud
from ...enum.space_sites_enum import SpaceStatus
from ...models.maintenance_assets.assets import Asset
from ...models.maintenance_assets.maintenance_logs import MaintenanceLog
from ...models.maintenance_assets.work_order import WorkOrder
from ...schemas.space_sites.spaces_schemas import SpaceCreate, SpaceOut, SpaceRequest, SpaceStatistics, SpaceUpdate
from ..base_service import (
    alnum, drop_nulls, ensure_reference, ensure_unique, generate_unique_code, get_or_404, handle_errors,
    logger, percentage, validate_choice)


def get_spaces(db: Session, params: SpaceRequest):
    with handle_errors(db, "retrieving spaces"):
        items, total = space_crud.paginate(
            db, params.page, params.per_page, space_crud.build_filters(params), params.search)
        return PaginatedResult.build(
            [SpaceOut.model_validate(item) for item in items], total, params.page, params.per_page)


def get_active_spaces(db: Session):
    with handle_errors(db, "retrieving active spaces"):
        return space_crud.get_active(db)


def get_space(db: Session, space_id: UUID):
    with handle_errors(db, "retrieving space"):
        return get_or_404(db, space_crud, space_id, "Space")


def get_space_by_code(db: Session, code: str):
    with handle_errors(db, "retrieving space"):
        space = space_crud.get_by_code(db, code)
        if not space:
            raise NotFoundError(f"Space not found with code: {code}")
        return space


def get_spaces_by_floor(db: Session, floor_id: UUID):
    with handle_errors(db, "retrieving floor spaces"):
        get_or_404(db, floor_crud, floor_id, "Floor")
        return space_crud.get_by_floor(db, floor_id)


def get_spaces_by_building(db: Session, building_id: UUID):
    with handle_errors(db, "retrieving building spaces"):
        get_or_404(db, building_crud, building_id, "Building")
        return space_crud.get_by_building(db, building_id)


def generate_space_code(db: Session, floor, name: str) -> str:
    base_code = f"{(floor.code or '')[:5]}-{alnum(name)[:3]}"
    return generate_unique_code(db, space_crud, base_code, width=2)


def create_space(db: Session, space: SpaceCreate):
    with handle_errors(db, "creating space", commit=True):
        data = space.model_dump(exclude_unset=True)
        floor = ensure_reference(db, floor_crud, "floor_id", data["floor_id"])
        if data.get("code"):
            ensure_unique(db, space_crud, "code", data["code"])
        else:
            data["code"] = generate_space_code(db, floor, data["name"])
        data["status"] = data.get("status") or SpaceStatus.vacant.value

        db_space = space_crud.create(db, data)
    logger.info("Space %s created", db_space.code)
    return db_space


def update_space(db: Session, space_id: UUID, space: SpaceUpdate):
    with handle_errors(db, "updating space", commit=True):
        get_or_404(db, space_crud, space_id, "Space")
        data = drop_nulls(space.model_dump(exclude_unset=True),
                          "floor_id", "name", "type", "code", "status")
        if "floor_id" in data:
            ensure_reference(db, floor_crud, "floor_id", data["floor_id"])
        if "code" in data:
            ensure_unique(db, space_crud, "code", data["code"], exclude_id=space_id)
        return space_crud.update(db, space_id, data)


def delete_space(db: Session, space_id: UUID):
    with handle_errors(db, "deleting space", commit=True):
        get_or_404(db, space_crud, space_id, "Space")
        return space_crud.delete(db, space_id)


def update_space_status(db: Session, space_id: UUID, status: str):
    with handle_errors(db, "updating space status", commit=True):
        validate_choice(status, SpaceStatus)
        get_or_404(db, space_crud, space_id, "Space")
        return space_crud.update(db, space_id, {"status": status})


def get_space_assets(db: Session, space_id: UUID):
    with handle_errors(db, "retrieving space assets"):
        get_or_404(db, space_crud, space_id, "Space")
        return asset_crud.get_by_space(db, space_id)


def get_space_work_orders(db: Session, space_id: UUID):
    with handle_errors(db, "retrieving space work orders"):
        get_or_404(db, space_crud, space_id, "Space")
        return work_order_crud.get_by_space(db, space_id)


def get_space_statistics(db: Session, space_id: UUID) -> SpaceStatistics:
    with handle_errors(db, "retrieving space statistics"):
        space = get_or_404(db, space_crud, space_id, "Space")

        assets_count = asset_crud.count(db, Asset.space_id == space_id)
        maintenance = maintenance_log_crud.totals(
            db, MaintenanceLog.asset_id.in_(space_asset_ids(space_id)))

        return SpaceStatistics(
            assets_count=assets_count,
            work_orders_count=work_order_crud.count(db, WorkOrder.space_id == space_id),
            open_work_orders=work_order_crud.count(
                db, WorkOrder.space_id == space_id, open_work_order_filter()),
            maintenance_statistics=MaintenanceStatistics(**maintenance),
            # no capacity means utilization cannot be measured
            utilization_rate=percentage(assets_count, space.capacity or 0),
        )
