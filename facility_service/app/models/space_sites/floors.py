import uuid
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, JSON, Numeric, String, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Floor(Base):
    __tablename__ = "floors"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    building_id = Column(UUID(as_uuid=True), ForeignKey(
        "buildings.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(128), nullable=False)
    code = Column(String(32), unique=True, nullable=False)
    level = Column(Integer, nullable=False)
    description = Column(Text, nullable=True)
    total_area = Column(Numeric(12, 2), nullable=True)
    common_area = Column(Numeric(12, 2), nullable=True)
    rentable_area = Column(Numeric(12, 2), nullable=True)
    status = Column(String(16), default="active", nullable=False)
    meta = Column("metadata", JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())
    is_deleted = Column(Boolean, default=False, nullable=False)
    deleted_at = Column(DateTime, nullable=True)

    building = relationship("Building", back_populates="floors")
    spaces = relationship("Space", back_populates="floor")
