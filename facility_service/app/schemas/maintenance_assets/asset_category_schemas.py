# app/schemas/asset_category.py
from pydantic import Field
from typing import Any, Dict, List, Optional
from datetime import datetime
from uuid import UUID

from shared.core.schemas import CommonQueryParams, MetadataOrmModel
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.maintenance_assets_enum import AssetCategoryStatus


class AssetCategoryBase(EmptyStringModel):
    code: Optional[str] = Field(None, max_length=32)
    description: Optional[str] = None
    parent_id: Optional[UUID] = None
    status: Optional[AssetCategoryStatus] = None
    metadata: Optional[Dict[str, Any]] = None


class AssetCategoryCreate(AssetCategoryBase):
    name: str = Field(..., max_length=128)


class AssetCategoryUpdate(AssetCategoryBase):
    name: Optional[str] = Field(None, max_length=128)


class AssetCategoryMove(EmptyStringModel):
    # null moves the category to the root
    parent_id: Optional[UUID] = None


class AssetCategoryOut(MetadataOrmModel):
    id: UUID
    name: str
    code: Optional[str] = None
    description: Optional[str] = None
    parent_id: Optional[UUID] = None
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AssetCategoryTree(AssetCategoryOut):
    children: List["AssetCategoryTree"] = []


class AssetCategoryRequest(CommonQueryParams):
    status: Optional[AssetCategoryStatus] = None
    parent_id: Optional[UUID] = None
