# app/models/spaces.py
import uuid
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, JSON, Numeric, String, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Space(Base):
    __tablename__ = "spaces"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    floor_id = Column(UUID(as_uuid=True), ForeignKey(
        "floors.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(128), nullable=False)
    code = Column(String(32), unique=True, nullable=False)
    type = Column(String(16), nullable=False)
    description = Column(Text, nullable=True)
    area = Column(Numeric(12, 2), nullable=True)
    capacity = Column(Integer, nullable=True)
    status = Column(String(16), default="vacant", nullable=False)
    meta = Column("metadata", JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())
    is_deleted = Column(Boolean, default=False, nullable=False)
    deleted_at = Column(DateTime, nullable=True)

    floor = relationship("Floor", back_populates="spaces")
    assets = relationship("Asset", back_populates="space")
    work_orders = relationship("WorkOrder", back_populates="space")
