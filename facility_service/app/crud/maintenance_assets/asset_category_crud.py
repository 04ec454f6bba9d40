# app/crud/maintenance_assets/asset_category_crud.py
from typing import List, Set
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.orm import Session

from ...models.maintenance_assets.asset_category import AssetCategory
from ...schemas.maintenance_assets.asset_category_schemas import AssetCategoryRequest
from ..base_crud import CRUDBase


class CRUDAssetCategory(CRUDBase[AssetCategory]):
    search_fields = ("name", "code", "description")

    def default_order(self):
        return AssetCategory.name.asc()

    def get_active(self, db: Session):
        return self.find_by(db, "status", "active")

    def get_roots(self, db: Session) -> List[AssetCategory]:
        return self.find_where(db, AssetCategory.parent_id.is_(None))

    def get_children(self, db: Session, parent_id: UUID) -> List[AssetCategory]:
        return self.find_by(db, "parent_id", parent_id)

    def descendant_ids(self, db: Session, category_id: UUID) -> Set[UUID]:
        """Walk the tree downwards from ``category_id`` (excluded)."""
        found: Set[UUID] = set()
        frontier = [category_id]
        while frontier:
            rows = (
                db.query(AssetCategory.id)
                .filter(AssetCategory.parent_id.in_(frontier), AssetCategory.is_deleted == False)
                .all()
            )
            frontier = [row.id for row in rows if row.id not in found]
            found.update(frontier)
        return found

    def search(self, db: Session, term: str) -> List[AssetCategory]:
        pattern = f"%{term}%"
        return self.find_where(db, or_(
            AssetCategory.name.ilike(pattern),
            AssetCategory.code.ilike(pattern),
            AssetCategory.description.ilike(pattern),
        ))

    def build_filters(self, params: AssetCategoryRequest):
        filters = []
        if params.status:
            filters.append(AssetCategory.status == params.status)
        if params.parent_id:
            filters.append(AssetCategory.parent_id == params.parent_id)
        return filters


asset_category_crud = CRUDAssetCategory(AssetCategory)
