"""SQLAlchemy ORM models for persisted saves"""

from sqlalchemy import JSON, Column, DateTime, Float, Integer, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class SaveSlotRecord(Base):
    """One save slot: summary columns plus the opaque game state"""

    __tablename__ = "save_slot"

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    last_played = Column(DateTime(timezone=True), nullable=False, index=True)
    net_worth = Column(Float, nullable=False, default=0.0)
    companies = Column(Integer, nullable=False, default=0)
    play_time = Column(Integer, nullable=False, default=0)
    state = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
