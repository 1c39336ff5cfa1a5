# app/models/catalog/brands.py
import uuid
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship
from shared.core.database import Base, utc_now


class Brand(Base):
    __tablename__ = "brands"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(Text, nullable=False)
    description = Column(Text)
    is_generic = Column(Boolean, default=False)
    industry = Column(Text, index=True)
    logo = Column(Text)
    website = Column(Text)
    template_id = Column(String(36), ForeignKey("brand_templates.id"), nullable=True)
    parent_brand_id = Column(String(36), ForeignKey("brands.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, index=True)
    updated_at = Column(DateTime(timezone=True), default=utc_now)

    template = relationship("BrandTemplate", back_populates="brands")
