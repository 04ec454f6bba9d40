# app/models/asset.py
import uuid
from sqlalchemy import Boolean, Column, String, Text, Date, DateTime, Integer, Numeric, ForeignKey, JSON, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Asset(Base):
    __tablename__ = "assets"
    __table_args__ = (
        Index("ix_asset_status", "status"),
        Index("ix_asset_next_maintenance", "next_maintenance_date"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    category_id = Column(UUID(as_uuid=True), ForeignKey(
        "asset_categories.id", ondelete="SET NULL"), nullable=True, index=True)
    space_id = Column(UUID(as_uuid=True), ForeignKey(
        "spaces.id", ondelete="SET NULL"), nullable=True, index=True)
    name = Column(String(200), nullable=False)
    code = Column(String(32), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    model = Column(String(128))
    manufacturer = Column(String(128))
    serial_number = Column(String(128), unique=True, nullable=True)
    purchase_date = Column(Date)
    purchase_cost = Column(Numeric(14, 2))
    warranty_expiry = Column(Date)
    maintenance_frequency = Column(Integer, nullable=True)
    maintenance_unit = Column(String(16), nullable=True)
    next_maintenance_date = Column(Date, nullable=True)
    status = Column(String(24), default="active", nullable=False)
    condition = Column(String(16), nullable=True)
    criticality = Column(String(16), nullable=True)
    meta = Column("metadata", JSON, nullable=True)
    created_at = Column(DateTime(timezone=True),
                        server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(
    ), onupdate=func.now(), nullable=False)
    is_deleted = Column(Boolean, default=False, nullable=False)
    deleted_at = Column(DateTime, nullable=True)

    space = relationship("Space", back_populates="assets")
    category = relationship("AssetCategory", back_populates="assets")
    maintenance_schedules = relationship(
        "MaintenanceSchedule", back_populates="asset")
    maintenance_logs = relationship("MaintenanceLog", back_populates="asset")
    work_orders = relationship("WorkOrder", back_populates="asset")
