import uuid
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, JSON, Numeric, String, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from shared.core.database import Base


class MaintenanceLog(Base):
    __tablename__ = "maintenance_logs"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    asset_id = Column(UUID(as_uuid=True), ForeignKey(
        "assets.id", ondelete="CASCADE"), nullable=False, index=True)
    schedule_id = Column(UUID(as_uuid=True), ForeignKey(
        "maintenance_schedules.id", ondelete="SET NULL"), nullable=True, index=True)
    type = Column(String(16), nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    performed_by = Column(UUID(as_uuid=True), ForeignKey(
        "users.id", ondelete="SET NULL"), nullable=True, index=True)
    performed_at = Column(DateTime, nullable=False)
    duration = Column(Integer, nullable=True)
    duration_unit = Column(String(16), nullable=True)
    cost = Column(Numeric(14, 2), nullable=True)
    parts_used = Column(JSON, nullable=True)
    status = Column(String(16), default="completed", nullable=False)
    notes = Column(Text, nullable=True)
    meta = Column("metadata", JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())
    is_deleted = Column(Boolean, default=False, nullable=False)
    deleted_at = Column(DateTime, nullable=True)

    asset = relationship("Asset", back_populates="maintenance_logs")
    schedule = relationship("MaintenanceSchedule", back_populates="logs")
