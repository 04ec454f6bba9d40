from datetime import datetime

from sqlalchemy.orm import Session

from facility_service.app.enum.maintenance_assets_enum import MaintenanceScheduleStatus
from facility_service.app.models.maintenance_assets.maintenance_schedules import MaintenanceSchedule
from shared.core.logging import get_logger
from shared.helpers.date_helper import utc_now

logger = get_logger("facility.scheduler")


def mark_overdue_schedules(db: Session, now: datetime = None) -> int:
    """Flag every still-scheduled maintenance whose date has passed as overdue."""
    now = now or utc_now()

    try:
        overdue = (
            db.query(MaintenanceSchedule)
            .filter(
                MaintenanceSchedule.status == MaintenanceScheduleStatus.scheduled.value,
                MaintenanceSchedule.scheduled_date < now,
                MaintenanceSchedule.is_deleted == False
            )
            .all()
        )

        for schedule in overdue:
            schedule.status = MaintenanceScheduleStatus.overdue.value
            logger.info("Maintenance schedule %s for asset %s is overdue", schedule.id, schedule.asset_id)

        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Scheduler error while marking overdue schedules")
        raise

    return len(overdue)


if __name__ == "__main__":
    from facility_service.app.models import model_registry  # noqa: F401
    from shared.core.database import FacilitySessionLocal

    session = FacilitySessionLocal()
    try:
        count = mark_overdue_schedules(session)
        logger.info("Marked %s maintenance schedules as overdue", count)
    finally:
        session.close()
