from typing import Any

from pydantic import BaseModel


def blank_to_none(value: Any) -> Any:
    """Treat blank strings sent for typed (numeric/date) fields as absent."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def number_or_none(value: Any) -> Any:
    """``blank_to_none`` for numeric fields; JSON booleans are not numbers."""
    if isinstance(value, bool):
        raise ValueError("Input should be a number, not a boolean")
    return blank_to_none(value)


class MessageResponse(BaseModel):
    msg: str


class CreatedResponse(MessageResponse):
    id: int
