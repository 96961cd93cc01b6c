"""
Per-resource repositories built on one generic CRUD implementation.

Each module exposes a ready-to-use instance of its repository.
"""
from .base import ResourceRepository
from .event_types import event_type_repo
from .competitions import competition_repo
from .judges import judge_repo
from .participants import participant_repo
from .criteria import criteria_repo

__all__ = [
    "ResourceRepository",
    "event_type_repo",
    "competition_repo",
    "judge_repo",
    "participant_repo",
    "criteria_repo",
]
