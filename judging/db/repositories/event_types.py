"""
Event type repository.

Event types are a taxonomy: listed alphabetically, names unique.
"""
from judging.db import models
from judging.utils.validation import clean_text, require_text

from .base import ResourceRepository

DEFAULT_MAX_PARTICIPANTS = 50


class EventTypeRepository(ResourceRepository):
    model = models.EventType
    label = "event type"
    plural = "event types"
    duplicate_message = "Event type name already exists"
    defaults = {"max_participants": DEFAULT_MAX_PARTICIPANTS}

    def normalize(self, payload):
        (name,) = require_text("Name is required", payload.name)
        return {
            "name": name,
            "description": clean_text(payload.description),
            "max_participants": payload.max_participants,
        }

    def ordering(self):
        return (models.EventType.name, models.EventType.id)


event_type_repo = EventTypeRepository()
