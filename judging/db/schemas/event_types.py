from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from .common import number_or_none


class EventTypePayload(BaseModel):
    name: str | None = None
    description: str | None = None
    max_participants: int | None = None

    @field_validator("max_participants", mode="before")
    @classmethod
    def _blank_as_missing(cls, v):
        return number_or_none(v)


class EventType(BaseModel):
    id: int
    name: str
    description: str | None = None
    max_participants: int
    created_at: datetime
    updated_at: datetime | None = None
    model_config = ConfigDict(from_attributes=True)
