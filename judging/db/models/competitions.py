from sqlalchemy import Column, Date, DateTime, ForeignKey, Index, Integer, String, Text

from .base import Base, now_utc


class Competition(Base):
    __tablename__ = 'competitions'
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    date = Column(Date, nullable=True)
    # Deleting an event type leaves its competitions untyped
    event_type_id = Column(Integer, ForeignKey('event_types.id', ondelete='SET NULL'), nullable=True)
    status = Column(String(50), nullable=False, default='active')
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index('idx_competitions_name', 'name'),
        Index('idx_competitions_event_type_id', 'event_type_id'),
    )
