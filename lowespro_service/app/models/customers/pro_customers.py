# app/models/customers/pro_customers.py
import uuid
from sqlalchemy import Boolean, Column, DateTime, String, Text
from shared.core.database import Base, JSONType, utc_now


class ProCustomer(Base):
    __tablename__ = "pro_customers"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    business_name = Column(Text, nullable=False)
    contact_name = Column(Text)
    phone = Column(Text)
    phone_extension = Column(Text)
    email = Column(Text)
    address = Column(Text)
    city = Column(Text)
    state = Column(Text)
    zip_code = Column(Text)
    trades = Column(JSONType)            # trade names
    preferred_brands = Column(JSONType)
    notes = Column(Text)
    payment_preference = Column(Text)
    mvp_rewards_program = Column(Boolean, default=False)
    phones = Column(JSONType)
    emails = Column(JSONType)
    created_at = Column(DateTime(timezone=True), default=utc_now, index=True)
    updated_at = Column(DateTime(timezone=True), default=utc_now)
