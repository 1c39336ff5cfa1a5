# app/models/procurement/vendors.py
import uuid
from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import relationship
from shared.core.database import Base, JSONType, utc_now


class Vendor(Base):
    __tablename__ = "vendors"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    vendor_number = Column(String(32), unique=True, nullable=False)
    company_name = Column(Text, nullable=False)
    phone = Column(Text)
    phone_extension = Column(Text)
    fax = Column(Text)
    email = Column(Text)
    website = Column(Text)
    address = Column(Text)
    notes = Column(Text)
    categories = Column(JSONType)   # category names
    brands = Column(JSONType)       # brand ids
    services = Column(JSONType)     # service names
    phones = Column(JSONType)       # [{"number", "label", "extension"}]
    emails = Column(JSONType)       # [{"address", "label"}]
    created_at = Column(DateTime(timezone=True), default=utc_now, index=True)
    updated_at = Column(DateTime(timezone=True), default=utc_now)

    representatives = relationship("Representative", back_populates="vendor")
