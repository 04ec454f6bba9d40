from uuid import UUID

from sqlalchemy.orm import Session

from ...models.space_sites.floors import Floor
from ...schemas.space_sites.floor_schemas import FloorRequest
from ..base_crud import CRUDBase


class CRUDFloor(CRUDBase[Floor]):
    search_fields = ("name", "code", "description")

    def default_order(self):
        return Floor.level.asc()

    def get_by_code(self, db: Session, code: str):
        return self.first_by(db, "code", code)

    def get_active(self, db: Session):
        return self.find_by(db, "status", "active")

    def get_by_building(self, db: Session, building_id: UUID):
        return self.find_by(db, "building_id", building_id)

    def build_filters(self, params: FloorRequest):
        filters = []
        if params.building_id:
            filters.append(Floor.building_id == params.building_id)
        if params.status:
            filters.append(Floor.status == params.status)
        return filters


floor_crud = CRUDFloor(Floor)
