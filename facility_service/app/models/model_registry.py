# Importing every model registers its table on Base.metadata and lets the
# string based relationship() targets resolve.
from shared.models.users import Users  # noqa: F401
from facility_service.app.models.space_sites.buildings import Building  # noqa: F401
from facility_service.app.models.space_sites.floors import Floor  # noqa: F401
from facility_service.app.models.space_sites.spaces import Space  # noqa: F401
from facility_service.app.models.maintenance_assets.asset_category import AssetCategory  # noqa: F401
from facility_service.app.models.maintenance_assets.assets import Asset  # noqa: F401
from facility_service.app.models.maintenance_assets.maintenance_schedules import MaintenanceSchedule  # noqa: F401
from facility_service.app.models.maintenance_assets.maintenance_logs import MaintenanceLog  # noqa: F401
from facility_service.app.models.maintenance_assets.work_order import WorkOrder  # noqa: F401
from facility_service.app.models.maintenance_assets.work_order_comments import WorkOrderComment  # noqa: F401
from facility_service.app.models.maintenance_assets.work_order_attachments import WorkOrderAttachment  # noqa: F401
