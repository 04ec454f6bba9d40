# app/models/asset_category.py
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy import Boolean, Column, DateTime, JSON, String, Text, ForeignKey, func
from sqlalchemy.orm import relationship
import uuid
from shared.core.database import Base


class AssetCategory(Base):
    __tablename__ = "asset_categories"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(128), nullable=False)
    code = Column(String(32), unique=True, nullable=True)
    description = Column(Text, nullable=True)
    parent_id = Column(UUID(as_uuid=True), ForeignKey(
        "asset_categories.id", ondelete="SET NULL"), nullable=True, index=True)
    status = Column(String(16), default="active", nullable=False)
    meta = Column("metadata", JSON, nullable=True)
    is_deleted = Column(Boolean, default=False, nullable=False)
    deleted_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    parent = relationship(
        "AssetCategory", remote_side=[id], back_populates="children")
    children = relationship("AssetCategory", back_populates="parent")
    assets = relationship("Asset", back_populates="category")
