from datetime import datetime
from uuid import UUID

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from shared.core.exceptions import NotFoundError, ValidationError
from shared.core.schemas import PaginatedResult
from shared.helpers.date_helper import add_interval, utc_now
from ...crud.maintenance_assets.asset_category_crud import asset_category_crud
from ...crud.maintenance_assets.assets_crud import asset_crud
from ...crud.maintenance_assets.maintenance_log_crud import maintenance_log_crud
from ...crud.maintenance_assets.maintenance_schedule_crud import maintenance_schedule_crud
from ...crud.maintenance_assets.work_order_crud import work_order_crud
from ...crud.space_sites.building_crud import building_crud
from ...crud.space_sites.floor_crud import floor_crud
from ...crud.space_sites.spaces_crud import space_crud
from ...enum.maintenance_assets_enum import (
    AssetStatus, MaintenancePriority, MaintenanceScheduleStatus, WorkOrderPriority, WorkOrderStatus)
from ...models.maintenance_assets.assets import Asset
from ...models.maintenance_assets.maintenance_logs import MaintenanceLog
from ...models.maintenance_assets.work_order import WorkOrder
from ...schemas.maintenance_assets.assets_schemas import (
    AssetCreate, AssetMaintenanceStats, AssetOut, AssetStatistics, AssetUpdate, AssetWorkOrderStats,
    AssetsRequest)
from ..base_service import (
    alnum, drop_nulls, ensure_reference, ensure_unique, generate_unique_code, get_or_404, handle_errors,
    logger, validate_choice)


def get_assets(db: Session, params: AssetsRequest):
    with handle_errors(db, "retrieving assets"):
        items, total = asset_crud.paginate(
            db, params.page, params.per_page, asset_crud.build_filters(params), params.search)
        return PaginatedResult.build(
            [AssetOut.model_validate(item) for item in items], total, params.page, params.per_page)


def get_active_assets(db: Session):
    with handle_errors(db, "retrieving active assets"):
        return asset_crud.get_active(db)


def get_asset(db: Session, asset_id: UUID):
    with handle_errors(db, "retrieving asset"):
        return get_or_404(db, asset_crud, asset_id, "Asset")


def get_asset_by_code(db: Session, code: str):
    with handle_errors(db, "retrieving asset"):
        asset = asset_crud.get_by_code(db, code)
        if not asset:
            raise NotFoundError(f"Asset not found with code: {code}")
        return asset


def get_assets_by_space(db: Session, space_id: UUID):
    with handle_errors(db, "retrieving space assets"):
        get_or_404(db, space_crud, space_id, "Space")
        return asset_crud.get_by_space(db, space_id)


def get_assets_by_floor(db: Session, floor_id: UUID):
    with handle_errors(db, "retrieving floor assets"):
        get_or_404(db, floor_crud, floor_id, "Floor")
        return asset_crud.get_by_floor(db, floor_id)


def get_assets_by_building(db: Session, building_id: UUID):
    with handle_errors(db, "retrieving building assets"):
        get_or_404(db, building_crud, building_id, "Building")
        return asset_crud.get_by_building(db, building_id)


def get_assets_by_category(db: Session, category_id: UUID):
    with handle_errors(db, "retrieving category assets"):
        get_or_404(db, asset_category_crud, category_id, "Asset category")
        return asset_crud.get_by_category(db, category_id)


def get_warranty_expiring_assets(db: Session, days: int = 30):
    with handle_errors(db, "retrieving assets with expiring warranty"):
        return asset_crud.get_warranty_expiring(db, days)


def generate_asset_code(db: Session, category, space, name: str) -> str:
    category_part = ((category.code if category else None) or "AST")[:3]
    space_part = ((space.code if space else None) or "SP")[:3]
    base_code = f"{category_part}-{space_part}-{alnum(name)[:3]}"
    return generate_unique_code(db, asset_crud, base_code, width=3)


def _schedule_next_maintenance(db: Session, asset: Asset):
    """Push ``next_maintenance_date`` forward and book the matching schedule.

    Flushes only; the caller owns the transaction.
    """
    if not asset.maintenance_frequency or not asset.maintenance_unit:
        return None

    last_log = maintenance_log_crud.latest_for_asset(db, asset.id)
    base_date = last_log.performed_at if last_log else utc_now()
    next_date = add_interval(base_date, asset.maintenance_frequency, asset.maintenance_unit)

    asset.next_maintenance_date = next_date.date()
    maintenance_schedule_crud.create(db, {
        "asset_id": asset.id,
        "title": f"Scheduled maintenance: {asset.name}",
        "scheduled_date": next_date,
        "frequency": asset.maintenance_frequency,
        "frequency_unit": asset.maintenance_unit,
        "priority": MaintenancePriority.medium.value,
        "status": MaintenanceScheduleStatus.scheduled.value,
    })
    db.flush()
    logger.info("Next maintenance for asset %s booked on %s", asset.code, next_date.date())
    return asset


def schedule_next_maintenance(db: Session, asset_id: UUID):
    with handle_errors(db, "scheduling next maintenance", commit=True):
        asset = get_or_404(db, asset_crud, asset_id, "Asset")
        return _schedule_next_maintenance(db, asset)


def _check_warranty(purchase_date, warranty_expiry):
    if purchase_date and warranty_expiry and warranty_expiry < purchase_date:
        raise ValidationError.for_field(
            "warranty_expiry", "The warranty expiry must be a date after or equal to purchase date.")


def create_asset(db: Session, asset: AssetCreate):
    with handle_errors(db, "creating asset", commit=True):
        data = asset.model_dump(exclude_unset=True)
        category = ensure_reference(db, asset_category_crud, "category_id", data.get("category_id"))
        space = ensure_reference(db, space_crud, "space_id", data.get("space_id"))
        ensure_unique(db, asset_crud, "serial_number", data.get("serial_number"))
        if data.get("code"):
            ensure_unique(db, asset_crud, "code", data["code"])
        else:
            data["code"] = generate_asset_code(db, category, space, data["name"])
        data["status"] = data.get("status") or AssetStatus.active.value

        db_asset = asset_crud.create(db, data)
        if db_asset.maintenance_frequency and db_asset.maintenance_unit:
            _schedule_next_maintenance(db, db_asset)
    logger.info("Asset %s created", db_asset.code)
    return db_asset


def update_asset(db: Session, asset_id: UUID, asset: AssetUpdate):
    with handle_errors(db, "updating asset", commit=True):
        db_asset = get_or_404(db, asset_crud, asset_id, "Asset")
        data = drop_nulls(asset.model_dump(exclude_unset=True), "name", "code", "status")
        if "category_id" in data:
            ensure_reference(db, asset_category_crud, "category_id", data["category_id"])
        if "space_id" in data:
            ensure_reference(db, space_crud, "space_id", data["space_id"])
        if "code" in data:
            ensure_unique(db, asset_crud, "code", data["code"], exclude_id=asset_id)
        if "serial_number" in data:
            ensure_unique(db, asset_crud, "serial_number", data["serial_number"], exclude_id=asset_id)
        _check_warranty(data.get("purchase_date", db_asset.purchase_date),
                        data.get("warranty_expiry", db_asset.warranty_expiry))
        return asset_crud.update(db, asset_id, data)


def delete_asset(db: Session, asset_id: UUID):
    with handle_errors(db, "deleting asset", commit=True):
        get_or_404(db, asset_crud, asset_id, "Asset")
        return asset_crud.delete(db, asset_id)


def update_asset_status(db: Session, asset_id: UUID, status: str):
    with handle_errors(db, "updating asset status", commit=True):
        validate_choice(status, AssetStatus)
        db_asset = get_or_404(db, asset_crud, asset_id, "Asset")
        previous = db_asset.status
        db_asset = asset_crud.update(db, asset_id, {"status": status})
        if status == AssetStatus.maintenance.value:
            _schedule_next_maintenance(db, db_asset)
    logger.info("Asset %s status changed from %s to %s", db_asset.code, previous, status)
    return db_asset


def assign_asset_to_space(db: Session, asset_id: UUID, space_id: UUID):
    with handle_errors(db, "assigning asset to space", commit=True):
        get_or_404(db, asset_crud, asset_id, "Asset")
        ensure_reference(db, space_crud, "space_id", space_id)
        return asset_crud.update(db, asset_id, {"space_id": space_id})


def get_maintenance_history(db: Session, asset_id: UUID):
    with handle_errors(db, "retrieving maintenance history"):
        get_or_404(db, asset_crud, asset_id, "Asset")
        return maintenance_log_crud.get_by_asset(db, asset_id)


def get_asset_work_orders(db: Session, asset_id: UUID):
    with handle_errors(db, "retrieving asset work orders"):
        get_or_404(db, asset_crud, asset_id, "Asset")
        return work_order_crud.get_by_asset(db, asset_id)


def get_asset_maintenance_schedule(db: Session, asset_id: UUID):
    with handle_errors(db, "retrieving asset maintenance schedule"):
        get_or_404(db, asset_crud, asset_id, "Asset")
        return maintenance_schedule_crud.get_by_asset(db, asset_id)


def get_asset_utilization(db: Session, asset_id: UUID, now: datetime = None) -> dict:
    """Share of the current year the asset was not down for maintenance."""
    now = now or utc_now()
    year_start = datetime(now.year, 1, 1)
    total_hours = (now - year_start).total_seconds() / 3600
    maintenance_hours = maintenance_log_crud.duration_hours_between(db, asset_id, year_start, now)

    rate = (total_hours - maintenance_hours) / total_hours * 100 if total_hours else 100.0
    return {
        "utilization_rate": round(rate, 2),
        "maintenance_hours": round(maintenance_hours, 2),
        "total_hours": round(total_hours, 2),
    }


def get_asset_statistics(db: Session, asset_id: UUID) -> AssetStatistics:
    with handle_errors(db, "retrieving asset statistics"):
        get_or_404(db, asset_crud, asset_id, "Asset")

        maintenance = maintenance_log_crud.totals(db, MaintenanceLog.asset_id == asset_id)
        total, completed, high_priority = (
            db.query(
                func.count(WorkOrder.id),
                func.count(case((WorkOrder.status == WorkOrderStatus.completed.value, 1))),
                func.count(case((WorkOrder.priority == WorkOrderPriority.high.value, 1))),
            )
            .filter(WorkOrder.asset_id == asset_id, WorkOrder.is_deleted == False)
            .one()
        )

        return AssetStatistics(
            maintenance_stats=AssetMaintenanceStats(**maintenance),
            work_order_stats=AssetWorkOrderStats(
                total=total or 0, completed=completed or 0, high_priority=high_priority or 0),
            **get_asset_utilization(db, asset_id),
        )
