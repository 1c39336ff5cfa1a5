# app/models/customers/trades.py
import uuid
from sqlalchemy import Boolean, Column, DateTime, String, Text
from shared.core.database import Base, utc_now


class Trade(Base):
    __tablename__ = "trades"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(Text, nullable=False, unique=True)
    is_default = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, index=True)
