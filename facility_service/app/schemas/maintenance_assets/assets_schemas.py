# app/schemas/asset.py
from pydantic import Field, model_validator
from typing import Any, Dict, Optional
from uuid import UUID
from datetime import date, datetime

from shared.core.schemas import CommonQueryParams, MetadataOrmModel, OrmModel
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ...enum.maintenance_assets_enum import AssetCondition, AssetCriticality, AssetStatus, FrequencyUnit


class AssetBase(EmptyStringModel):
    category_id: Optional[UUID] = None
    space_id: Optional[UUID] = None
    description: Optional[str] = None
    model: Optional[str] = Field(None, max_length=128)
    manufacturer: Optional[str] = Field(None, max_length=128)
    serial_number: Optional[str] = Field(None, max_length=128)
    purchase_date: Optional[date] = None
    purchase_cost: Optional[float] = Field(None, ge=0)
    warranty_expiry: Optional[date] = None
    maintenance_frequency: Optional[int] = Field(None, ge=1)
    maintenance_unit: Optional[FrequencyUnit] = None
    status: Optional[AssetStatus] = None
    condition: Optional[AssetCondition] = None
    criticality: Optional[AssetCriticality] = None
    metadata: Optional[Dict[str, Any]] = None

    @model_validator(mode="after")
    def check_warranty_after_purchase(self):
        if self.purchase_date and self.warranty_expiry and self.warranty_expiry < self.purchase_date:
            raise ValueError("warranty_expiry must be on or after purchase_date")
        return self


class AssetCreate(AssetBase):
    name: str = Field(..., max_length=200)
    code: Optional[str] = Field(None, max_length=32)


class AssetUpdate(AssetBase):
    name: Optional[str] = Field(None, max_length=200)
    code: Optional[str] = Field(None, max_length=32)


class AssetAssign(EmptyStringModel):
    space_id: UUID


class AssetOut(MetadataOrmModel):
    id: UUID
    category_id: Optional[UUID] = None
    space_id: Optional[UUID] = None
    name: str
    code: str
    description: Optional[str] = None
    model: Optional[str] = None
    manufacturer: Optional[str] = None
    serial_number: Optional[str] = None
    purchase_date: Optional[date] = None
    purchase_cost: Optional[float] = None
    warranty_expiry: Optional[date] = None
    maintenance_frequency: Optional[int] = None
    maintenance_unit: Optional[str] = None
    next_maintenance_date: Optional[date] = None
    status: str
    condition: Optional[str] = None
    criticality: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AssetsRequest(CommonQueryParams):
    status: Optional[AssetStatus] = None
    category_id: Optional[UUID] = None
    space_id: Optional[UUID] = None
    condition: Optional[AssetCondition] = None
    criticality: Optional[AssetCriticality] = None


class AssetMaintenanceStats(OrmModel):
    total_maintenance: int = 0
    total_cost: float = 0.0
    average_cost: float = 0.0
    average_duration: float = 0.0


class AssetWorkOrderStats(OrmModel):
    total: int = 0
    completed: int = 0
    high_priority: int = 0


class AssetStatistics(OrmModel):
    maintenance_stats: AssetMaintenanceStats
    work_order_stats: AssetWorkOrderStats
    utilization_rate: float = 0.0
    maintenance_hours: float = 0.0
    total_hours: float = 0.0
