from pydantic import Field
from typing import Any, Dict, Optional
from datetime import datetime
from uuid import UUID

from shared.core.schemas import CommonQueryParams, MaintenanceStatistics, MetadataOrmModel
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.space_sites_enum import FloorStatus


class FloorBase(EmptyStringModel):
    description: Optional[str] = None
    total_area: Optional[float] = Field(None, ge=0)
    common_area: Optional[float] = Field(None, ge=0)
    rentable_area: Optional[float] = Field(None, ge=0)
    status: Optional[FloorStatus] = None
    metadata: Optional[Dict[str, Any]] = None


class FloorCreate(FloorBase):
    building_id: UUID
    name: str = Field(..., max_length=128)
    level: int
    code: Optional[str] = Field(None, max_length=32)


class FloorUpdate(FloorBase):
    building_id: Optional[UUID] = None
    name: Optional[str] = Field(None, max_length=128)
    level: Optional[int] = None
    code: Optional[str] = Field(None, max_length=32)


class FloorOut(MetadataOrmModel):
    id: UUID
    building_id: UUID
    name: str
    code: str
    level: int
    description: Optional[str] = None
    total_area: Optional[float] = None
    common_area: Optional[float] = None
    rentable_area: Optional[float] = None
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class FloorRequest(CommonQueryParams):
    building_id: Optional[UUID] = None
    status: Optional[FloorStatus] = None


class FloorStatistics(EmptyStringModel):
    spaces_count: int = 0
    assets_count: int = 0
    occupancy_rate: float = 0.0
    maintenance_statistics: MaintenanceStatistics
