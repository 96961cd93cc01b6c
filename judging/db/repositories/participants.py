"""
Participant repository.

Clients send the participant's competition by name in the ``category``
field; unknown names are stored as "no competition".
"""
from judging.db import models
from judging.db.references import Reference
from judging.utils.validation import DEFAULT_STATUS, clean_text, require_text

from .base import ResourceRepository


class ParticipantRepository(ResourceRepository):
    model = models.Participant
    label = "participant"
    plural = "participants"
    create_verb = "add"
    created_verb = "added"
    references = (
        Reference(field="category", column="competition_id", model=models.Competition, label="competition"),
    )
    defaults = {"status": DEFAULT_STATUS}

    def normalize(self, payload):
        name, course = require_text("Name and course are required", payload.name, payload.course)
        return {
            "name": name,
            "course": course,
            "category": payload.category,
            "contact": clean_text(payload.contact),
            "age": payload.age,
            "year_level": clean_text(payload.year_level),
            "status": clean_text(payload.status),
        }


participant_repo = ParticipantRepository()
