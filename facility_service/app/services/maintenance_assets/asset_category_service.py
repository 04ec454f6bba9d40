from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from shared.core.exceptions import ConflictError, ValidationError
from shared.core.schemas import PaginatedResult
from ...crud.maintenance_assets.asset_category_crud import asset_category_crud
from ...crud.maintenance_assets.assets_crud import asset_crud
from ...enum.maintenance_assets_enum import AssetCategoryStatus
from ...models.maintenance_assets.asset_category import AssetCategory
from ...models.maintenance_assets.assets import Asset
from ...schemas.maintenance_assets.asset_category_schemas import (
    AssetCategoryCreate, AssetCategoryOut, AssetCategoryRequest, AssetCategoryTree, AssetCategoryUpdate)
from ..base_service import (
    drop_nulls, ensure_reference, ensure_unique, get_or_404, handle_errors, logger, validate_choice)


def _check_parent(db: Session, category_id: Optional[UUID], parent_id: Optional[UUID]):
    """A category may not hang below itself or any of its descendants."""
    if parent_id is None:
        return
    ensure_reference(db, asset_category_crud, "parent_id", parent_id)
    if category_id is None:
        return
    if parent_id == category_id or parent_id in asset_category_crud.descendant_ids(db, category_id):
        raise ValidationError.for_field(
            "parent_id", "A category cannot be moved under itself or one of its descendants.")


def get_categories(db: Session, params: AssetCategoryRequest):
    with handle_errors(db, "retrieving asset categories"):
        items, total = asset_category_crud.paginate(
            db, params.page, params.per_page, asset_category_crud.build_filters(params), params.search)
        return PaginatedResult.build(
            [AssetCategoryOut.model_validate(item) for item in items], total, params.page, params.per_page)


def get_active_categories(db: Session):
    with handle_errors(db, "retrieving active asset categories"):
        return asset_category_crud.get_active(db)


def get_category(db: Session, category_id: UUID):
    with handle_errors(db, "retrieving asset category"):
        return get_or_404(db, asset_category_crud, category_id, "Asset category")


def get_category_hierarchy(db: Session) -> List[AssetCategoryTree]:
    with handle_errors(db, "retrieving asset category hierarchy"):
        categories = asset_category_crud.all(db)
        nodes = {
            category.id: AssetCategoryTree(**AssetCategoryOut.model_validate(category).model_dump())
            for category in categories
        }
        roots = []
        for category in categories:
            node = nodes[category.id]
            parent = nodes.get(category.parent_id)
            if parent is not None:
                parent.children.append(node)
            else:
                # orphans of a deleted parent surface as roots
                roots.append(node)
        return roots


def get_child_categories(db: Session, category_id: UUID):
    with handle_errors(db, "retrieving child categories"):
        get_or_404(db, asset_category_crud, category_id, "Asset category")
        return asset_category_crud.get_children(db, category_id)


def search_categories(db: Session, term: str):
    with handle_errors(db, "searching asset categories"):
        term = (term or "").strip()
        if not term:
            raise ValidationError.for_field("term", "The term field is required.")
        return asset_category_crud.search(db, term)


def create_category(db: Session, category: AssetCategoryCreate):
    with handle_errors(db, "creating asset category", commit=True):
        data = category.model_dump(exclude_unset=True)
        if data.get("code"):
            ensure_unique(db, asset_category_crud, "code", data["code"])
        _check_parent(db, None, data.get("parent_id"))
        data["status"] = data.get("status") or AssetCategoryStatus.active.value

        db_category = asset_category_crud.create(db, data)
    logger.info("Asset category %s created", db_category.name)
    return db_category


def update_category(db: Session, category_id: UUID, category: AssetCategoryUpdate):
    with handle_errors(db, "updating asset category", commit=True):
        get_or_404(db, asset_category_crud, category_id, "Asset category")
        data = drop_nulls(category.model_dump(exclude_unset=True), "name", "status")
        if data.get("code"):
            ensure_unique(db, asset_category_crud, "code", data["code"], exclude_id=category_id)
        if "parent_id" in data:
            _check_parent(db, category_id, data["parent_id"])
        return asset_category_crud.update(db, category_id, data)


def move_category(db: Session, category_id: UUID, parent_id: Optional[UUID]):
    with handle_errors(db, "moving asset category", commit=True):
        get_or_404(db, asset_category_crud, category_id, "Asset category")
        _check_parent(db, category_id, parent_id)
        return asset_category_crud.update(db, category_id, {"parent_id": parent_id})


def update_category_status(db: Session, category_id: UUID, status: str):
    with handle_errors(db, "updating asset category status", commit=True):
        validate_choice(status, AssetCategoryStatus)
        get_or_404(db, asset_category_crud, category_id, "Asset category")
        return asset_category_crud.update(db, category_id, {"status": status})


def delete_category(db: Session, category_id: UUID):
    with handle_errors(db, "deleting asset category", commit=True):
        get_or_404(db, asset_category_crud, category_id, "Asset category")
        if asset_crud.count(db, Asset.category_id == category_id):
            raise ConflictError("Cannot delete a category that still has assets")
        if asset_category_crud.count(db, AssetCategory.parent_id == category_id):
            raise ConflictError("Cannot delete a category that still has child categories")
        return asset_category_crud.delete(db, category_id)
