import random
from datetime import timedelta

from faker import Faker
from sqlalchemy.orm import Session

from facility_service.app.models import model_registry  # noqa: F401
from facility_service.app.schemas.maintenance_assets.asset_category_schemas import AssetCategoryCreate
from facility_service.app.schemas.maintenance_assets.assets_schemas import AssetCreate
from facility_service.app.schemas.maintenance_assets.maintenance_log_schemas import MaintenanceLogCreate
from facility_service.app.schemas.maintenance_assets.work_order_schemas import WorkOrderCreate
from facility_service.app.schemas.space_sites.building_schemas import BuildingCreate
from facility_service.app.schemas.space_sites.floor_schemas import FloorCreate
from facility_service.app.schemas.space_sites.spaces_schemas import SpaceCreate
from facility_service.app.services.maintenance_assets import (
    asset_category_service, asset_service, maintenance_log_service, work_order_service)
from facility_service.app.services.space_sites import building_service, floor_service, space_service
from shared.core.auth import create_user_token
from shared.core.database import Base, FacilitySessionLocal, facility_engine
from shared.core.logging import get_logger
from shared.core.schemas import UserToken
from shared.helpers.date_helper import utc_now
from shared.models.users import Users
from shared.utils.enums import UserRole

logger = get_logger("facility.seed")

# Create tables
Base.metadata.create_all(bind=facility_engine)

fake = Faker()

CATEGORIES = {
    "HVAC": ["Chiller", "Air Handler", "Split AC"],
    "Electrical": ["Generator", "UPS", "Distribution Board"],
    "Plumbing": ["Water Pump", "Water Heater"],
    "Safety": ["Fire Extinguisher", "Smoke Detector"],
}


def seed_users(db: Session):
    users = {}
    for role in UserRole:
        user = Users(
            name=fake.name(),
            email=f"{role.value}@facility.test",
            role=role.value,
        )
        db.add(user)
        users[role] = user
    db.commit()
    return users


def seed_data():
    db: Session = FacilitySessionLocal()
    try:
        users = seed_users(db)
        admin = users[UserRole.SUPER_ADMIN]
        admin_token = UserToken(user_id=str(admin.id), name=admin.name, email=admin.email, role=admin.role)
        technician = users[UserRole.MAINTENANCE_TECHNICIAN]

        categories = []
        for parent_name, children in CATEGORIES.items():
            parent = asset_category_service.create_category(
                db, AssetCategoryCreate(name=parent_name, code=parent_name[:3].upper()))
            for child_name in children:
                categories.append(asset_category_service.create_category(
                    db, AssetCategoryCreate(name=child_name, parent_id=parent.id)))

        for _ in range(3):
            building = building_service.create_building(db, BuildingCreate(
                name=f"{fake.company()} Tower",
                address=fake.street_address(),
                city=fake.city(),
                state=fake.state(),
                country=fake.country(),
                postal_code=fake.postcode(),
            ))

            for level in range(1, 4):
                floor = floor_service.create_floor(db, FloorCreate(
                    building_id=building.id,
                    name=f"Level {level}",
                    level=level,
                    total_area=round(random.uniform(800, 2500), 2),
                ))

                for _ in range(4):
                    space = space_service.create_space(db, SpaceCreate(
                        floor_id=floor.id,
                        name=fake.word().capitalize(),
                        type=random.choice(["office", "meeting", "storage", "common", "facility"]),
                        area=round(random.uniform(20, 300), 2),
                        capacity=random.randint(2, 40),
                        status=random.choice(["vacant", "occupied"]),
                    ))

                    category = random.choice(categories)
                    purchase_date = fake.date_between(start_date="-3y", end_date="-30d")
                    asset = asset_service.create_asset(db, AssetCreate(
                        name=f"{category.name} {fake.random_int(1, 99)}",
                        category_id=category.id,
                        space_id=space.id,
                        manufacturer=fake.company(),
                        serial_number=fake.unique.bothify("SN-####-????").upper(),
                        purchase_date=purchase_date,
                        purchase_cost=round(random.uniform(500, 50000), 2),
                        warranty_expiry=purchase_date + timedelta(days=random.choice([365, 730, 1095])),
                        maintenance_frequency=random.choice([1, 3, 6]),
                        maintenance_unit="months",
                        condition=random.choice(["excellent", "good", "fair", "poor"]),
                        criticality=random.choice(["high", "medium", "low"]),
                    ))

                    maintenance_log_service.create_log(db, MaintenanceLogCreate(
                        asset_id=asset.id,
                        type=random.choice(["preventive", "corrective"]),
                        title=f"Routine check of {asset.name}",
                        performed_at=utc_now() - timedelta(days=random.randint(1, 90)),
                        duration=random.randint(30, 240),
                        duration_unit="minutes",
                        cost=round(random.uniform(50, 2000), 2),
                    ), performed_by=technician.id)

                    if random.random() < 0.5:
                        work_order_service.create_work_order(db, WorkOrderCreate(
                            title=f"Inspect {asset.name}",
                            description=fake.sentence(),
                            asset_id=asset.id,
                            space_id=space.id,
                            priority=random.choice(["low", "medium", "high", "critical"]),
                            due_date=utc_now() + timedelta(days=random.randint(-5, 20)),
                        ), admin_token)

        logger.info("Database seeded successfully")
        logger.info("Super admin token: %s", create_user_token(admin))

    except Exception:
        db.rollback()
        logger.exception("Error seeding data")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_data()
