from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from shared.core.config import FACILITY_DATABASE_URL, settings

Base = declarative_base()


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        # in-memory databases live on a single connection
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options

    return {
        "pool_pre_ping": True,
        "pool_recycle": 300,
        "pool_size": settings.DB_POOL_SIZE,          # max idle connections
        "max_overflow": settings.DB_MAX_OVERFLOW,    # max temporary extra connections
        "pool_timeout": 30,                          # wait time before failing
    }


# Facility DB
facility_engine = create_engine(
    FACILITY_DATABASE_URL, **_engine_options(FACILITY_DATABASE_URL))
FacilitySessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=facility_engine)


# Dependency
def get_facility_db():
    db = FacilitySessionLocal()
    try:
        yield db
    finally:
        db.close()
