# app/crud/space_sites/spaces_crud.py
from uuid import UUID

from sqlalchemy import func, case, select
from sqlalchemy.orm import Session

from ...enum.space_sites_enum import SpaceStatus
from ...models.space_sites.floors import Floor
from ...models.space_sites.spaces import Space
from ...schemas.space_sites.spaces_schemas import SpaceRequest
from ..base_crud import CRUDBase


def floor_space_ids(floor_id: UUID):
    return select(Space.id).where(
        Space.floor_id == floor_id,
        Space.is_deleted == False
    )


def building_space_ids(building_id: UUID):
    return (
        select(Space.id)
        .join(Floor, Space.floor_id == Floor.id)
        .where(
            Floor.building_id == building_id,
            Floor.is_deleted == False,
            Space.is_deleted == False
        )
    )


class CRUDSpace(CRUDBase[Space]):
    search_fields = ("name", "code", "description")

    def get_by_code(self, db: Session, code: str):
        return self.first_by(db, "code", code)

    def get_active(self, db: Session):
        return self.find_by(db, "status", SpaceStatus.active.value)

    def get_by_floor(self, db: Session, floor_id: UUID):
        return self.find_by(db, "floor_id", floor_id)

    def get_by_building(self, db: Session, building_id: UUID):
        return self.find_where(db, Space.id.in_(building_space_ids(building_id)))

    def occupancy_counts(self, db: Session, *criteria):
        """Return (total, occupied) for the spaces matching ``criteria``."""
        total, occupied = (
            db.query(
                func.count(Space.id),
                func.count(case((Space.status == SpaceStatus.occupied.value, 1)))
            )
            .filter(Space.is_deleted == False, *criteria)
            .one()
        )
        return total or 0, occupied or 0

    def build_filters(self, params: SpaceRequest):
        filters = []
        if params.floor_id:
            filters.append(Space.floor_id == params.floor_id)
        if params.type:
            filters.append(Space.type == params.type)
        if params.status:
            filters.append(Space.status == params.status)
        return filters


space_crud = CRUDSpace(Space)
