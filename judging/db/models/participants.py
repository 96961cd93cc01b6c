from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String

from .base import Base, now_utc


class Participant(Base):
    __tablename__ = 'participants'
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    course = Column(String(255), nullable=False)
    competition_id = Column(Integer, ForeignKey('competitions.id', ondelete='SET NULL'), nullable=True)
    contact = Column(String(255), nullable=True)
    age = Column(Integer, nullable=True)
    year_level = Column(String(50), nullable=True)
    status = Column(String(50), nullable=False, default='active')
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index('idx_participants_competition_id', 'competition_id'),
    )
