import datetime as dt

from pydantic import BaseModel, ConfigDict, field_validator

from .common import blank_to_none


class CompetitionPayload(BaseModel):
    name: str | None = None
    description: str | None = None
    date: dt.date | None = None
    # Event type is referenced by name and resolved server-side
    event_type: str | None = None
    status: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def _blank_as_missing(cls, v):
        return blank_to_none(v)


class Competition(BaseModel):
    id: int
    name: str
    description: str
    date: dt.date | None = None
    event_type: str | None = None
    status: str
    created_at: dt.datetime
    updated_at: dt.datetime | None = None
    model_config = ConfigDict(from_attributes=True)
