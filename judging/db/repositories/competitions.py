from judging.db import models
from judging.db.references import Reference
from judging.utils.validation import DEFAULT_STATUS, clean_text, require_text

from .base import ResourceRepository


class CompetitionRepository(ResourceRepository):
    model = models.Competition
    label = "competition"
    plural = "competitions"
    references = (
        Reference(field="event_type", column="event_type_id", model=models.EventType, label="event type"),
    )
    defaults = {"status": DEFAULT_STATUS}

    def normalize(self, payload):
        name, description = require_text(
            "Name and description are required", payload.name, payload.description
        )
        return {
            "name": name,
            "description": description,
            "date": payload.date,
            "event_type": payload.event_type,
            "status": clean_text(payload.status),
        }


competition_repo = CompetitionRepository()
