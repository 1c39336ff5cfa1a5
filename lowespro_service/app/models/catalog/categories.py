# app/models/catalog/categories.py
import uuid
from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from shared.core.database import Base, JSONType, utc_now


class Category(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(Text, nullable=False)
    description = Column(Text)
    parent_id = Column(String(36), ForeignKey(
        "categories.id", ondelete="RESTRICT"), nullable=True, index=True)
    level = Column(Text, default="1")
    subcategories = Column(JSONType)
    created_at = Column(DateTime(timezone=True), default=utc_now, index=True)
    updated_at = Column(DateTime(timezone=True), default=utc_now)
