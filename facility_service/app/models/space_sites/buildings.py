# building.py
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy import Boolean, Column, String, Text, JSON, func, DateTime, Index
from sqlalchemy.orm import relationship
import uuid
from shared.core.database import Base


class Building(Base):
    __tablename__ = "buildings"
    __table_args__ = (
        # Filter + Sort: WHERE is_deleted=false ORDER BY updated_at DESC
        Index("ix_building_active_updated", "is_deleted", "updated_at"),
        Index("ix_building_status", "status"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    code = Column(String(32), unique=True, nullable=False)
    name = Column(String(128), nullable=False)
    address = Column(Text, nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(100), nullable=True)
    country = Column(String(100), nullable=True)
    postal_code = Column(String(20), nullable=True)
    status = Column(String(16), default="active", nullable=False)
    occupancy_status = Column(String(16), nullable=True)
    # "metadata" is reserved on declarative classes
    meta = Column("metadata", JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())
    is_deleted = Column(Boolean, default=False, nullable=False)
    deleted_at = Column(DateTime, nullable=True)

    # Relationships
    floors = relationship("Floor", back_populates="building")
