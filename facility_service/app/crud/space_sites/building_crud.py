# building_crud.py
from sqlalchemy.orm import Session

from ...models.space_sites.buildings import Building
from ...schemas.space_sites.building_schemas import BuildingRequest
from ..base_crud import CRUDBase


class CRUDBuilding(CRUDBase[Building]):
    search_fields = ("name", "code", "city", "address")

    def get_by_code(self, db: Session, code: str):
        return self.first_by(db, "code", code)

    def get_active(self, db: Session):
        return self.find_by(db, "status", "active")

    def build_filters(self, params: BuildingRequest):
        filters = []
        if params.status:
            filters.append(Building.status == params.status)
        if params.city:
            filters.append(Building.city.ilike(params.city))
        return filters


building_crud = CRUDBuilding(Building)
