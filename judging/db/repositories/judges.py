from judging.db import models
from judging.utils.validation import DEFAULT_STATUS, clean_text, require_text

from .base import ResourceRepository


class JudgeRepository(ResourceRepository):
    model = models.Judge
    label = "judge"
    plural = "judges"
    create_verb = "add"
    created_verb = "added"
    duplicate_message = "Email address already exists"
    defaults = {"status": DEFAULT_STATUS}

    def normalize(self, payload):
        name, email = require_text("Name and email are required", payload.name, payload.email)
        return {
            "name": name,
            "email": email,
            "expertise": clean_text(payload.expertise),
            "phone": clean_text(payload.phone),
            "status": clean_text(payload.status),
        }


judge_repo = JudgeRepository()
