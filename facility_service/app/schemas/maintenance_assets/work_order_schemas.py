# app/schemas/work_order_schemas.py
from pydantic import Field
from typing import Any, Dict, List, Optional, Union
from uuid import UUID
from datetime import datetime

from shared.core.schemas import CommonQueryParams, MetadataOrmModel, OrmModel, UtcDateTime
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.maintenance_assets_enum import WorkOrderPriority, WorkOrderStatus, WorkOrderType


class WorkOrderBase(EmptyStringModel):
    type: Optional[WorkOrderType] = None
    priority: Optional[WorkOrderPriority] = None
    status: Optional[WorkOrderStatus] = None
    asset_id: Optional[UUID] = None
    space_id: Optional[UUID] = None
    assigned_to: Optional[UUID] = None
    due_date: Optional[UtcDateTime] = None
    estimated_hours: Optional[float] = Field(None, ge=0)
    actual_hours: Optional[float] = Field(None, ge=0)
    completion_notes: Optional[str] = None
    cost: Optional[float] = Field(None, ge=0)
    parts_used: Optional[Union[List[Any], Dict[str, Any]]] = None
    metadata: Optional[Dict[str, Any]] = None


class WorkOrderCreate(WorkOrderBase):
    title: str = Field(..., max_length=200)
    description: str
    # defaults to the authenticated user
    requested_by: Optional[UUID] = None


class WorkOrderUpdate(WorkOrderBase):
    title: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    requested_by: Optional[UUID] = None


class WorkOrderAssign(EmptyStringModel):
    assignee_id: UUID


class WorkOrderOut(MetadataOrmModel):
    id: UUID
    number: str
    title: str
    description: str
    type: str
    priority: str
    status: str
    asset_id: Optional[UUID] = None
    space_id: Optional[UUID] = None
    requested_by: UUID
    assigned_to: Optional[UUID] = None
    due_date: Optional[datetime] = None
    estimated_hours: Optional[float] = None
    actual_hours: Optional[float] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    completion_notes: Optional[str] = None
    cost: Optional[float] = None
    parts_used: Optional[Union[List[Any], Dict[str, Any]]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class WorkOrderRequest(CommonQueryParams):
    status: Optional[WorkOrderStatus] = None
    priority: Optional[WorkOrderPriority] = None
    type: Optional[WorkOrderType] = None


class WorkOrderStatistics(OrmModel):
    total: int = 0
    pending: int = 0
    in_progress: int = 0
    completed: int = 0
    overdue: int = 0
    by_priority: Dict[str, int] = {}
    by_type: Dict[str, int] = {}
    completion_rate: float = 0.0


# ---------------- Comments ----------------
class WorkOrderCommentCreate(EmptyStringModel):
    comment: str
    metadata: Optional[Dict[str, Any]] = None


class WorkOrderCommentOut(MetadataOrmModel):
    id: UUID
    work_order_id: UUID
    user_id: Optional[UUID] = None
    comment: str
    created_at: Optional[datetime] = None


# ---------------- Attachments ----------------
class WorkOrderAttachmentCreate(EmptyStringModel):
    file_name: str = Field(..., max_length=255)
    file_path: str = Field(..., max_length=500)
    file_type: str = Field(..., max_length=50)
    file_size: int = Field(..., ge=0)
    description: Optional[str] = None


class WorkOrderAttachmentOut(OrmModel):
    id: UUID
    work_order_id: UUID
    user_id: Optional[UUID] = None
    file_name: str
    file_path: str
    file_type: Optional[str] = None
    file_size: Optional[int] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
