from pydantic import Field
from typing import Any, Dict, Optional
from datetime import datetime
from uuid import UUID

from shared.core.schemas import CommonQueryParams, MaintenanceStatistics, MetadataOrmModel
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.space_sites_enum import BuildingStatus, OccupancyStatus


class BuildingBase(EmptyStringModel):
    address: Optional[str] = None
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=100)
    postal_code: Optional[str] = Field(None, max_length=20)
    status: Optional[BuildingStatus] = None
    occupancy_status: Optional[OccupancyStatus] = None
    metadata: Optional[Dict[str, Any]] = None


class BuildingCreate(BuildingBase):
    name: str = Field(..., max_length=128)
    code: Optional[str] = Field(None, max_length=32)


class BuildingUpdate(BuildingBase):
    name: Optional[str] = Field(None, max_length=128)
    code: Optional[str] = Field(None, max_length=32)


class BuildingOut(MetadataOrmModel):
    id: UUID
    code: str
    name: str
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    status: str
    occupancy_status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BuildingRequest(CommonQueryParams):
    status: Optional[BuildingStatus] = None
    city: Optional[str] = None


class BuildingStatistics(EmptyStringModel):
    spaces_count: int = 0
    assets_count: int = 0
    occupancy_rate: float = 0.0
    maintenance_statistics: MaintenanceStatistics
    active_work_orders: int = 0
