from enum import Enum


class BuildingStatus(str, Enum):
    active = "active"
    inactive = "inactive"
    maintenance = "maintenance"


class OccupancyStatus(str, Enum):
    vacant = "vacant"
    partial = "partial"
    full = "full"


class FloorStatus(str, Enum):
    active = "active"
    inactive = "inactive"
    maintenance = "maintenance"


class SpaceType(str, Enum):
    office = "office"
    meeting = "meeting"
    storage = "storage"
    common = "common"
    facility = "facility"


class SpaceStatus(str, Enum):
    active = "active"
    inactive = "inactive"
    maintenance = "maintenance"
    occupied = "occupied"
    vacant = "vacant"
