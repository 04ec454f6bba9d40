from pydantic import Field
from typing import Any, Dict, Optional
from datetime import datetime
from uuid import UUID

from shared.core.schemas import CommonQueryParams, MetadataOrmModel, OrmModel, UtcDateTime
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.maintenance_assets_enum import FrequencyUnit, MaintenancePriority, MaintenanceScheduleStatus


class MaintenanceScheduleBase(EmptyStringModel):
    description: Optional[str] = None
    frequency: Optional[int] = Field(None, ge=1)
    frequency_unit: Optional[FrequencyUnit] = None
    priority: Optional[MaintenancePriority] = None
    status: Optional[MaintenanceScheduleStatus] = None
    assigned_to: Optional[UUID] = None
    notes: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class MaintenanceScheduleCreate(MaintenanceScheduleBase):
    asset_id: UUID
    title: str = Field(..., max_length=200)
    scheduled_date: UtcDateTime


class MaintenanceScheduleUpdate(MaintenanceScheduleBase):
    asset_id: Optional[UUID] = None
    title: Optional[str] = Field(None, max_length=200)
    scheduled_date: Optional[UtcDateTime] = None


class MaintenanceScheduleComplete(EmptyStringModel):
    completion_date: UtcDateTime
    completion_notes: Optional[str] = None
    completed_by: UUID


class MaintenanceScheduleReschedule(EmptyStringModel):
    scheduled_date: UtcDateTime


class MaintenanceScheduleOut(MetadataOrmModel):
    id: UUID
    asset_id: UUID
    title: str
    description: Optional[str] = None
    scheduled_date: datetime
    frequency: Optional[int] = None
    frequency_unit: Optional[str] = None
    priority: str
    status: str
    assigned_to: Optional[UUID] = None
    notes: Optional[str] = None
    completion_date: Optional[datetime] = None
    completion_notes: Optional[str] = None
    completed_by: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ScheduleCompletionOut(OrmModel):
    completed: MaintenanceScheduleOut
    next_schedule: Optional[MaintenanceScheduleOut] = None


class MaintenanceScheduleRequest(CommonQueryParams):
    status: Optional[MaintenanceScheduleStatus] = None
    priority: Optional[MaintenancePriority] = None
    asset_id: Optional[UUID] = None
