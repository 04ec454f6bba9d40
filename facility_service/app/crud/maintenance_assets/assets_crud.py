# app/crud/maintenance_assets/assets_crud.py
from datetime import date, timedelta
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from ...models.maintenance_assets.assets import Asset
from ...schemas.maintenance_assets.assets_schemas import AssetsRequest
from ..base_crud import CRUDBase
from ..space_sites.spaces_crud import building_space_ids, floor_space_ids


def space_asset_ids(space_id: UUID):
    return select(Asset.id).where(Asset.space_id == space_id, Asset.is_deleted == False)


def floor_asset_ids(floor_id: UUID):
    return select(Asset.id).where(
        Asset.space_id.in_(floor_space_ids(floor_id)),
        Asset.is_deleted == False
    )


def building_asset_ids(building_id: UUID):
    return select(Asset.id).where(
        Asset.space_id.in_(building_space_ids(building_id)),
        Asset.is_deleted == False
    )


class CRUDAsset(CRUDBase[Asset]):
    search_fields = ("name", "code", "serial_number", "model", "manufacturer")

    def get_by_code(self, db: Session, code: str):
        return self.first_by(db, "code", code)

    def get_active(self, db: Session):
        return self.find_by(db, "status", "active")

    def get_by_space(self, db: Session, space_id: UUID):
        return self.find_by(db, "space_id", space_id)

    def get_by_floor(self, db: Session, floor_id: UUID):
        return self.find_where(db, Asset.space_id.in_(floor_space_ids(floor_id)))

    def get_by_building(self, db: Session, building_id: UUID):
        return self.find_where(db, Asset.space_id.in_(building_space_ids(building_id)))

    def get_by_category(self, db: Session, category_id: UUID):
        return self.find_by(db, "category_id", category_id)

    def get_warranty_expiring(self, db: Session, days: int):
        today = date.today()
        return self.find_where(
            db,
            Asset.warranty_expiry.isnot(None),
            Asset.warranty_expiry >= today,
            Asset.warranty_expiry <= today + timedelta(days=days)
        )

    def build_filters(self, params: AssetsRequest):
        filters = []
        if params.status:
            filters.append(Asset.status == params.status)
        if params.category_id:
            filters.append(Asset.category_id == params.category_id)
        if params.space_id:
            filters.append(Asset.space_id == params.space_id)
        if params.condition:
            filters.append(Asset.condition == params.condition)
        if params.criticality:
            filters.append(Asset.criticality == params.criticality)
        return filters


asset_crud = CRUDAsset(Asset)
