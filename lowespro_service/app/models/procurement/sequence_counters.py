# app/models/procurement/sequence_counters.py
from sqlalchemy import BigInteger, Column, String
from shared.core.database import Base


class SequenceCounter(Base):
    __tablename__ = "sequence_counters"

    name = Column(String(64), primary_key=True)
    value = Column(BigInteger, nullable=False, default=0)
