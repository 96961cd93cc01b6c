"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc`, and one ORM class per judging table.
"""

from .base import Base, now_utc  # re-export

from .event_types import EventType
from .competitions import Competition
from .judges import Judge
from .participants import Participant
from .criteria import Criteria

__all__ = [
    # base
    "Base",
    "now_utc",
    # taxonomy
    "EventType",
    # activity
    "Competition",
    "Judge",
    "Participant",
    "Criteria",
]
