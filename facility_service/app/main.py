from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import Base, facility_engine
from shared.core.exception_handler import setup_exception_handlers
from shared.helpers.json_response_helper import success_response
from shared.wrappers.request_logging_middleware import RequestLoggingMiddleware

from .models import model_registry  # noqa: F401
from .router.space_sites import building_router, floor_router, spaces_router
from .router.maintenance_assets import (
    asset_category_router, assets_router, maintenance_log_router, maintenance_schedule_router, work_order_router)


app = FastAPI(title=settings.APP_NAME, version=settings.API_VERSION)

# Create all tables
Base.metadata.create_all(bind=facility_engine)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

setup_exception_handlers(app)


@app.get("/health")
def health():
    return success_response(data={"status": "ok", "service": settings.APP_NAME}, message="Service is healthy")


# Include routers
app.include_router(building_router.router)
app.include_router(floor_router.router)
app.include_router(spaces_router.router)
app.include_router(asset_category_router.router)
app.include_router(assets_router.router)
app.include_router(maintenance_schedule_router.router)
app.include_router(maintenance_log_router.router)
app.include_router(work_order_router.router)
