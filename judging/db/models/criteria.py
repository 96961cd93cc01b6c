from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, Numeric, String, Text

from .base import Base, now_utc


class Criteria(Base):
    __tablename__ = 'criteria'
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    max_score = Column(Integer, nullable=False, default=100)
    weight = Column(Numeric(5, 2, asdecimal=False), nullable=False, default=1.00)
    # Criteria belong to exactly one competition and go away with it
    competition_id = Column(Integer, ForeignKey('competitions.id', ondelete='CASCADE'), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index('idx_criteria_competition_id', 'competition_id'),
        CheckConstraint('max_score > 0 AND max_score <= 100', name='ck_criteria_max_score'),
    )
