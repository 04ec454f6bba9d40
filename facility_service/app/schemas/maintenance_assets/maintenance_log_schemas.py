from pydantic import Field
from typing import Any, Dict, List, Optional, Union
from datetime import datetime
from uuid import UUID

from shared.core.schemas import CommonQueryParams, MetadataOrmModel, OrmModel, UtcDateTime
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.maintenance_assets_enum import DurationUnit, MaintenanceLogStatus, MaintenanceLogType

PartsUsed = Union[List[Any], Dict[str, Any]]


class MaintenanceLogBase(EmptyStringModel):
    schedule_id: Optional[UUID] = None
    description: Optional[str] = None
    performed_by: Optional[UUID] = None
    duration: Optional[int] = Field(None, ge=0)
    duration_unit: Optional[DurationUnit] = None
    cost: Optional[float] = Field(None, ge=0)
    parts_used: Optional[PartsUsed] = None
    status: Optional[MaintenanceLogStatus] = None
    notes: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class MaintenanceLogCreate(MaintenanceLogBase):
    asset_id: UUID
    type: MaintenanceLogType
    title: str = Field(..., max_length=200)
    performed_at: Optional[UtcDateTime] = None


class MaintenanceLogUpdate(MaintenanceLogBase):
    asset_id: Optional[UUID] = None
    type: Optional[MaintenanceLogType] = None
    title: Optional[str] = Field(None, max_length=200)
    performed_at: Optional[UtcDateTime] = None


class MaintenanceLogOut(MetadataOrmModel):
    id: UUID
    asset_id: UUID
    schedule_id: Optional[UUID] = None
    type: str
    title: str
    description: Optional[str] = None
    performed_by: Optional[UUID] = None
    performed_at: datetime
    duration: Optional[int] = None
    duration_unit: Optional[str] = None
    cost: Optional[float] = None
    parts_used: Optional[PartsUsed] = None
    status: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MaintenanceLogRequest(CommonQueryParams):
    type: Optional[MaintenanceLogType] = None
    status: Optional[MaintenanceLogStatus] = None
    asset_id: Optional[UUID] = None


class MaintenanceLogStatistics(OrmModel):
    total: int = 0
    total_cost: float = 0.0
    average_cost: float = 0.0
    by_type: Dict[str, int] = {}
    by_status: Dict[str, int] = {}
