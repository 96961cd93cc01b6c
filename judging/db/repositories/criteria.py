"""
Scoring criteria repository.

Unlike the other references, a criterion's competition is mandatory: a
missing or unknown competition name is rejected.
"""
from judging.db import models
from judging.db.references import Reference
from judging.utils.validation import check_range, clean_text, require_text

from .base import ResourceRepository

DEFAULT_MAX_SCORE = 100
DEFAULT_WEIGHT = 1.00
MAX_SCORE_LIMIT = 100


class CriteriaRepository(ResourceRepository):
    model = models.Criteria
    label = "criteria"
    plural = "criteria"
    references = (
        Reference(
            field="competition",
            column="competition_id",
            model=models.Competition,
            label="competition",
            required=True,
        ),
    )
    defaults = {"max_score": DEFAULT_MAX_SCORE, "weight": DEFAULT_WEIGHT}

    def normalize(self, payload):
        (name,) = require_text("Name is required", payload.name)
        max_score = check_range(
            payload.max_score,
            0,
            MAX_SCORE_LIMIT,
            f"Max score must be between 1 and {MAX_SCORE_LIMIT}",
        )
        return {
            "name": name,
            "description": clean_text(payload.description),
            "max_score": max_score,
            "weight": payload.weight,
            "competition": payload.competition,
        }


criteria_repo = CriteriaRepository()
