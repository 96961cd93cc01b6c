from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from .common import number_or_none


class CriteriaPayload(BaseModel):
    name: str | None = None
    description: str | None = None
    max_score: int | None = None
    weight: float | None = None
    competition: str | None = None

    @field_validator("max_score", "weight", mode="before")
    @classmethod
    def _blank_as_missing(cls, v):
        return number_or_none(v)


class Criteria(BaseModel):
    id: int
    name: str
    description: str | None = None
    max_score: int
    weight: float
    competition: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
    model_config = ConfigDict(from_attributes=True)
