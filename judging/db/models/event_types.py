from sqlalchemy import Column, DateTime, Integer, String, Text

from .base import Base, now_utc


class EventType(Base):
    __tablename__ = 'event_types'
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    max_participants = Column(Integer, nullable=False, default=50)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=True)
