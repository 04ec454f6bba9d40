from enum import Enum


class AssetCategoryStatus(str, Enum):
    active = "active"
    inactive = "inactive"


class AssetStatus(str, Enum):
    active = "active"
    inactive = "inactive"
    maintenance = "maintenance"
    retired = "retired"
    storage = "storage"


class AssetCondition(str, Enum):
    excellent = "excellent"
    good = "good"
    fair = "fair"
    poor = "poor"


class AssetCriticality(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


class FrequencyUnit(str, Enum):
    days = "days"
    weeks = "weeks"
    months = "months"
    years = "years"


class MaintenanceScheduleStatus(str, Enum):
    scheduled = "scheduled"
    completed = "completed"
    cancelled = "cancelled"
    overdue = "overdue"


class MaintenancePriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class MaintenanceLogType(str, Enum):
    preventive = "preventive"
    corrective = "corrective"
    emergency = "emergency"


class MaintenanceLogStatus(str, Enum):
    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"


class DurationUnit(str, Enum):
    minutes = "minutes"
    hours = "hours"


class WorkOrderStatus(str, Enum):
    pending = "pending"
    assigned = "assigned"
    in_progress = "in_progress"
    on_hold = "on_hold"
    completed = "completed"
    cancelled = "cancelled"


class WorkOrderPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    critical = "critical"


class WorkOrderType(str, Enum):
    corrective = "corrective"
    preventive = "preventive"
    emergency = "emergency"
    inspection = "inspection"
