# app/models/catalog/brand_templates.py
import uuid
from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import relationship
from shared.core.database import Base, JSONType, utc_now


class BrandTemplate(Base):
    __tablename__ = "brand_templates"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(Text, nullable=False)
    description = Column(Text)
    # {"categories": [{"name", "description", "subcategories": [...]}]}
    template = Column(JSONType)
    created_at = Column(DateTime(timezone=True), default=utc_now, index=True)
    updated_at = Column(DateTime(timezone=True), default=utc_now)

    brands = relationship("Brand", back_populates="template")
