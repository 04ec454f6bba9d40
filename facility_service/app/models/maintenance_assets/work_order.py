# app/models/work_order.py
import uuid
from sqlalchemy import Boolean, Column, DateTime, Numeric, String, Text, ForeignKey, JSON, TIMESTAMP, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class WorkOrder(Base):
    __tablename__ = "work_orders"
    __table_args__ = (
        Index("ix_work_order_status_due", "status", "due_date"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    number = Column(String(32), unique=True, nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    type = Column(String(24), default="corrective", nullable=False)
    priority = Column(String(16), default="medium", nullable=False)
    status = Column(String(24), default="pending", nullable=False)
    asset_id = Column(UUID(as_uuid=True), ForeignKey(
        "assets.id", ondelete="SET NULL"), nullable=True, index=True)
    space_id = Column(UUID(as_uuid=True), ForeignKey(
        "spaces.id", ondelete="SET NULL"), nullable=True, index=True)
    requested_by = Column(UUID(as_uuid=True), ForeignKey(
        "users.id"), nullable=False, index=True)
    assigned_to = Column(UUID(as_uuid=True), ForeignKey(
        "users.id", ondelete="SET NULL"), nullable=True, index=True)
    due_date = Column(DateTime, nullable=True)
    estimated_hours = Column(Numeric(8, 2), nullable=True)
    actual_hours = Column(Numeric(8, 2), nullable=True)
    started_at = Column(DateTime, nullable=True)
    completed_at = Column(DateTime, nullable=True)
    completion_notes = Column(Text, nullable=True)
    cost = Column(Numeric(14, 2), nullable=True)
    parts_used = Column(JSON, nullable=True)
    meta = Column("metadata", JSON, nullable=True)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True),
                        server_default=func.now(), onupdate=func.now())
    is_deleted = Column(Boolean, default=False, nullable=False)
    deleted_at = Column(DateTime, nullable=True)

    # Relationships
    asset = relationship("Asset", back_populates="work_orders")
    space = relationship("Space", back_populates="work_orders")
    comments = relationship(
        "WorkOrderComment", back_populates="work_order", cascade="all, delete-orphan")
    attachments = relationship(
        "WorkOrderAttachment", back_populates="work_order", cascade="all, delete-orphan")
