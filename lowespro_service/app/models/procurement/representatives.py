# app/models/procurement/representatives.py
import uuid
from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship
from shared.core.database import Base, JSONType, utc_now


class Representative(Base):
    __tablename__ = "representatives"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    vendor_id = Column(String(36), ForeignKey("vendors.id"), nullable=True, index=True)
    # snapshot of the vendor's company name, not kept in sync
    vendor_name = Column(Text)
    name = Column(Text, nullable=False)
    position = Column(Text)
    cell_phone = Column(Text)
    cell_phone_extension = Column(Text)
    office_phone = Column(Text)
    office_phone_extension = Column(Text)
    fax = Column(Text)
    email = Column(Text)
    notes = Column(Text)
    phones = Column(JSONType)
    emails = Column(JSONType)
    created_at = Column(DateTime(timezone=True), default=utc_now, index=True)
    updated_at = Column(DateTime(timezone=True), default=utc_now)

    vendor = relationship("Vendor", back_populates="representatives")
