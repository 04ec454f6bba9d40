import uuid
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, JSON, String, Text, Index, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from shared.core.database import Base


class MaintenanceSchedule(Base):
    __tablename__ = "maintenance_schedules"
    __table_args__ = (
        # due-row scans: WHERE status='scheduled' AND scheduled_date < now
        Index("ix_schedule_status_date", "status", "scheduled_date"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    asset_id = Column(UUID(as_uuid=True), ForeignKey(
        "assets.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    scheduled_date = Column(DateTime, nullable=False)
    frequency = Column(Integer, nullable=True)
    frequency_unit = Column(String(16), nullable=True)
    priority = Column(String(16), default="medium", nullable=False)
    status = Column(String(16), default="scheduled", nullable=False)
    assigned_to = Column(UUID(as_uuid=True), ForeignKey(
        "users.id", ondelete="SET NULL"), nullable=True)
    notes = Column(Text, nullable=True)
    completion_date = Column(DateTime, nullable=True)
    completion_notes = Column(Text, nullable=True)
    completed_by = Column(UUID(as_uuid=True), ForeignKey(
        "users.id", ondelete="SET NULL"), nullable=True)
    meta = Column("metadata", JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())
    is_deleted = Column(Boolean, default=False, nullable=False)
    deleted_at = Column(DateTime, nullable=True)

    asset = relationship("Asset", back_populates="maintenance_schedules")
    logs = relationship("MaintenanceLog", back_populates="schedule")
