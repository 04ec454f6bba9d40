import os

# must be set before shared.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from facility_service.app.main import app
from facility_service.app.schemas.maintenance_assets.asset_category_schemas import AssetCategoryCreate
from facility_service.app.schemas.maintenance_assets.assets_schemas import AssetCreate
from facility_service.app.schemas.space_sites.building_schemas import BuildingCreate
from facility_service.app.schemas.space_sites.floor_schemas import FloorCreate
from facility_service.app.schemas.space_sites.spaces_schemas import SpaceCreate
from facility_service.app.services.maintenance_assets import asset_category_service, asset_service
from facility_service.app.services.space_sites import building_service, floor_service, space_service
from shared.core.auth import create_user_token
from shared.core.database import Base, FacilitySessionLocal, facility_engine
from shared.core.schemas import UserToken
from shared.models.users import Users
from shared.utils.enums import UserRole


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=facility_engine)
    Base.metadata.create_all(bind=facility_engine)
    yield


@pytest.fixture
def db():
    session = FacilitySessionLocal()
    try:
        yield session
    finally:
        session.close()


def make_user(db, role=UserRole.SUPER_ADMIN, status="active", email=None):
    user = Users(
        name=f"{role.value} user",
        email=email or f"{role.value}@facility.test",
        role=role.value,
        status=status,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth_headers(user):
    return {"Authorization": f"Bearer {create_user_token(user)}"}


@pytest.fixture
def admin(db):
    return make_user(db)


@pytest.fixture
def admin_token(admin):
    return UserToken(user_id=str(admin.id), name=admin.name, email=admin.email, role=admin.role)


@pytest.fixture
def client(admin):
    with TestClient(app) as test_client:
        test_client.headers.update(auth_headers(admin))
        yield test_client


@pytest.fixture
def anonymous_client():
    with TestClient(app) as test_client:
        yield test_client


# ---------------- builders ----------------
@pytest.fixture
def building(db):
    return building_service.create_building(db, BuildingCreate(name="Headquarters", code="HQ1"))


@pytest.fixture
def floor(db, building):
    return floor_service.create_floor(db, FloorCreate(building_id=building.id, name="Ground", level=1))


@pytest.fixture
def space(db, floor):
    return space_service.create_space(db, SpaceCreate(floor_id=floor.id, name="Office", type="office", capacity=4))


@pytest.fixture
def category(db):
    return asset_category_service.create_category(db, AssetCategoryCreate(name="HVAC", code="HVA"))


@pytest.fixture
def asset(db, category, space):
    return asset_service.create_asset(db, AssetCreate(name="Chiller", category_id=category.id, space_id=space.id))
