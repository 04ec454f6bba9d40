from enum import Enum


class UserRole(str, Enum):
    SUPER_ADMIN = "super_admin"
    FACILITY_MANAGER = "facility_manager"
    MAINTENANCE_SUPERVISOR = "maintenance_supervisor"
    MAINTENANCE_TECHNICIAN = "maintenance_technician"
    EMPLOYEE = "employee"


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Permission(str, Enum):
    # -- buildings / floors / spaces
    VIEW_BUILDINGS = "view buildings"
    CREATE_BUILDINGS = "create buildings"
    EDIT_BUILDINGS = "edit buildings"
    DELETE_BUILDINGS = "delete buildings"
    VIEW_FLOORS = "view floors"
    CREATE_FLOORS = "create floors"
    EDIT_FLOORS = "edit floors"
    DELETE_FLOORS = "delete floors"
    VIEW_SPACES = "view spaces"
    CREATE_SPACES = "create spaces"
    EDIT_SPACES = "edit spaces"
    DELETE_SPACES = "delete spaces"
    # -- assets
    VIEW_ASSETS = "view assets"
    CREATE_ASSETS = "create assets"
    EDIT_ASSETS = "edit assets"
    DELETE_ASSETS = "delete assets"
    MANAGE_ASSET_CATEGORIES = "manage asset categories"
    # -- maintenance
    VIEW_MAINTENANCE_SCHEDULES = "view maintenance schedules"
    CREATE_MAINTENANCE_SCHEDULES = "create maintenance schedules"
    EDIT_MAINTENANCE_SCHEDULES = "edit maintenance schedules"
    DELETE_MAINTENANCE_SCHEDULES = "delete maintenance schedules"
    VIEW_MAINTENANCE_LOGS = "view maintenance logs"
    CREATE_MAINTENANCE_LOGS = "create maintenance logs"
    EDIT_MAINTENANCE_LOGS = "edit maintenance logs"
    DELETE_MAINTENANCE_LOGS = "delete maintenance logs"
    # -- work orders
    VIEW_WORK_ORDERS = "view work orders"
    CREATE_WORK_ORDERS = "create work orders"
    EDIT_WORK_ORDERS = "edit work orders"
    DELETE_WORK_ORDERS = "delete work orders"
    ASSIGN_WORK_ORDERS = "assign work orders"
    CLOSE_WORK_ORDERS = "close work orders"
    ADD_WORK_ORDER_COMMENTS = "add work order comments"
    DELETE_WORK_ORDER_COMMENTS = "delete work order comments"
    UPLOAD_WORK_ORDER_ATTACHMENTS = "upload work order attachments"
    DELETE_WORK_ORDER_ATTACHMENTS = "delete work order attachments"


ROLE_PERMISSIONS = {
    UserRole.SUPER_ADMIN: [p.value for p in Permission],

    UserRole.FACILITY_MANAGER: [
        "view buildings", "create buildings", "edit buildings",
        "view floors", "create floors", "edit floors",
        "view spaces", "create spaces", "edit spaces",
        "view assets", "create assets", "edit assets", "manage asset categories",
        "view maintenance schedules", "create maintenance schedules", "edit maintenance schedules",
        "view maintenance logs", "create maintenance logs",
        "view work orders", "create work orders", "edit work orders",
        "assign work orders", "close work orders",
        "add work order comments",
        "upload work order attachments",
    ],

    UserRole.MAINTENANCE_SUPERVISOR: [
        "view buildings", "view floors", "view spaces",
        "view assets", "edit assets",
        "view maintenance schedules", "create maintenance schedules", "edit maintenance schedules",
        "view maintenance logs", "create maintenance logs", "edit maintenance logs",
        "view work orders", "create work orders", "edit work orders",
        "assign work orders", "close work orders",
        "add work order comments",
        "upload work order attachments",
    ],

    UserRole.MAINTENANCE_TECHNICIAN: [
        "view buildings", "view floors", "view spaces",
        "view assets",
        "view maintenance schedules",
        "view maintenance logs", "create maintenance logs",
        "view work orders", "edit work orders", "close work orders",
        "add work order comments",
        "upload work order attachments",
    ],

    UserRole.EMPLOYEE: [
        "view buildings", "view floors", "view spaces",
        "view assets",
        "view work orders", "create work orders",
        "add work order comments",
        "upload work order attachments",
    ],
}


def permissions_for(role: str) -> list[str]:
    try:
        return ROLE_PERMISSIONS[UserRole(role)]
    except ValueError:
        return []
