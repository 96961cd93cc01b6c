"""
Domain-split Pydantic schemas.

Each resource has a permissive ``*Payload`` request model (required-field
checks happen in the repositories) and a response model.
"""

from .common import MessageResponse, CreatedResponse
from .event_types import EventTypePayload, EventType
from .competitions import CompetitionPayload, Competition
from .judges import JudgePayload, Judge
from .participants import ParticipantPayload, Participant
from .criteria import CriteriaPayload, Criteria

__all__ = [
    "MessageResponse",
    "CreatedResponse",
    "EventTypePayload",
    "EventType",
    "CompetitionPayload",
    "Competition",
    "JudgePayload",
    "Judge",
    "ParticipantPayload",
    "Participant",
    "CriteriaPayload",
    "Criteria",
]
