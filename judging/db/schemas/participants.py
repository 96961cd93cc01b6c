from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from .common import number_or_none


class ParticipantPayload(BaseModel):
    name: str | None = None
    course: str | None = None
    # Competition name; the client calls it "category"
    category: str | None = None
    contact: str | None = None
    age: int | None = None
    year_level: str | None = None
    status: str | None = None

    @field_validator("age", mode="before")
    @classmethod
    def _blank_as_missing(cls, v):
        return number_or_none(v)


class Participant(BaseModel):
    id: int
    name: str
    course: str
    category: str | None = None
    contact: str | None = None
    age: int | None = None
    year_level: str | None = None
    status: str
    created_at: datetime
    updated_at: datetime | None = None
    model_config = ConfigDict(from_attributes=True)
