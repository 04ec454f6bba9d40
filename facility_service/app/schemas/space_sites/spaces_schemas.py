from pydantic import Field
from typing import Any, Dict, Optional
from datetime import datetime
from uuid import UUID

from shared.core.schemas import CommonQueryParams, MaintenanceStatistics, MetadataOrmModel
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.space_sites_enum import SpaceStatus, SpaceType


class SpaceBase(EmptyStringModel):
    description: Optional[str] = None
    area: Optional[float] = Field(None, ge=0)
    capacity: Optional[int] = Field(None, ge=0)
    status: Optional[SpaceStatus] = None
    metadata: Optional[Dict[str, Any]] = None


class SpaceCreate(SpaceBase):
    floor_id: UUID
    name: str = Field(..., max_length=128)
    type: SpaceType
    code: Optional[str] = Field(None, max_length=32)


class SpaceUpdate(SpaceBase):
    floor_id: Optional[UUID] = None
    name: Optional[str] = Field(None, max_length=128)
    type: Optional[SpaceType] = None
    code: Optional[str] = Field(None, max_length=32)


class SpaceOut(MetadataOrmModel):
    id: UUID
    floor_id: UUID
    name: str
    code: str
    type: str
    description: Optional[str] = None
    area: Optional[float] = None
    capacity: Optional[int] = None
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SpaceRequest(CommonQueryParams):
    floor_id: Optional[UUID] = None
    type: Optional[SpaceType] = None
    status: Optional[SpaceStatus] = None


class SpaceStatistics(EmptyStringModel):
    assets_count: int = 0
    work_orders_count: int = 0
    open_work_orders: int = 0
    maintenance_statistics: MaintenanceStatistics
    utilization_rate: float = 0.0
