from datetime import datetime

from pydantic import BaseModel, ConfigDict


class JudgePayload(BaseModel):
    name: str | None = None
    email: str | None = None
    expertise: str | None = None
    phone: str | None = None
    status: str | None = None


class Judge(BaseModel):
    id: int
    name: str
    email: str
    expertise: str | None = None
    phone: str | None = None
    status: str
    created_at: datetime
    updated_at: datetime | None = None
    model_config = ConfigDict(from_attributes=True)
