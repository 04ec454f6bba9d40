# app/routers/maintenance_assets/asset_category_router.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.auth import require_permission
from shared.core.database import get_facility_db as get_db
from shared.core.schemas import JsonOutResult, PaginatedResult, StatusUpdate
from shared.helpers.json_response_helper import created_response, deleted_response, success_response
from ...schemas.maintenance_assets.asset_category_schemas import (
    AssetCategoryCreate, AssetCategoryMove, AssetCategoryOut, AssetCategoryRequest, AssetCategoryTree,
    AssetCategoryUpdate)
from ...services.maintenance_assets import asset_category_service as service

router = APIRouter(
    prefix="/api/asset-categories",
    tags=["asset-categories"],
    dependencies=[Depends(require_permission("view assets"))]
)


@router.get("/", response_model=JsonOutResult[PaginatedResult[AssetCategoryOut]])
def get_categories(params: AssetCategoryRequest = Depends(), db: Session = Depends(get_db)):
    return success_response(data=service.get_categories(db, params), message="Asset categories retrieved successfully")


@router.post("/", status_code=201, response_model=JsonOutResult[AssetCategoryOut])
def create_category(
        category: AssetCategoryCreate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("manage asset categories"))):
    result = service.create_category(db, category)
    return created_response(data=AssetCategoryOut.model_validate(result), message="Asset category created successfully")


@router.get("/active", response_model=JsonOutResult[List[AssetCategoryOut]])
def get_active_categories(db: Session = Depends(get_db)):
    categories = service.get_active_categories(db)
    return success_response(
        data=[AssetCategoryOut.model_validate(c) for c in categories],
        message="Active asset categories retrieved successfully")


@router.get("/tree", response_model=JsonOutResult[List[AssetCategoryTree]])
def get_category_hierarchy(db: Session = Depends(get_db)):
    return success_response(
        data=service.get_category_hierarchy(db), message="Asset category hierarchy retrieved successfully")


@router.get("/search", response_model=JsonOutResult[List[AssetCategoryOut]])
def search_categories(term: str = Query(""), db: Session = Depends(get_db)):
    categories = service.search_categories(db, term)
    return success_response(
        data=[AssetCategoryOut.model_validate(c) for c in categories], message="Asset categories retrieved successfully")


@router.get("/{category_id}", response_model=JsonOutResult[AssetCategoryOut])
def get_category(category_id: UUID, db: Session = Depends(get_db)):
    category = service.get_category(db, category_id)
    return success_response(data=AssetCategoryOut.model_validate(category), message="Asset category retrieved successfully")


@router.put("/{category_id}", response_model=JsonOutResult[AssetCategoryOut])
def update_category(
        category_id: UUID,
        category: AssetCategoryUpdate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("manage asset categories"))):
    result = service.update_category(db, category_id, category)
    return success_response(data=AssetCategoryOut.model_validate(result), message="Asset category updated successfully")


@router.delete("/{category_id}", response_model=JsonOutResult[None])
def delete_category(
        category_id: UUID,
        db: Session = Depends(get_db),
        _=Depends(require_permission("manage asset categories"))):
    service.delete_category(db, category_id)
    return deleted_response(message="Asset category deleted successfully")


@router.get("/{category_id}/children", response_model=JsonOutResult[List[AssetCategoryOut]])
def get_child_categories(category_id: UUID, db: Session = Depends(get_db)):
    children = service.get_child_categories(db, category_id)
    return success_response(
        data=[AssetCategoryOut.model_validate(c) for c in children], message="Child categories retrieved successfully")


@router.patch("/{category_id}/move", response_model=JsonOutResult[AssetCategoryOut])
def move_category(
        category_id: UUID,
        payload: AssetCategoryMove,
        db: Session = Depends(get_db),
        _=Depends(require_permission("manage asset categories"))):
    result = service.move_category(db, category_id, payload.parent_id)
    return success_response(data=AssetCategoryOut.model_validate(result), message="Asset category moved successfully")


@router.patch("/{category_id}/status", response_model=JsonOutResult[AssetCategoryOut])
def update_category_status(
        category_id: UUID,
        payload: StatusUpdate,
        db: Session = Depends(get_db),
        _=Depends(require_permission("manage asset categories"))):
    result = service.update_category_status(db, category_id, payload.status)
    return success_response(
        data=AssetCategoryOut.model_validate(result), message="Asset category status updated successfully")
