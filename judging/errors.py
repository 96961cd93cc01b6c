"""
Domain error taxonomy.

Each error carries the HTTP status it maps to and the English ``msg`` shown
to clients. The API layer turns them into JSON responses.
"""
from typing import Optional


class JudgingError(Exception):
    status_code = 500

    def __init__(self, msg: str, error: Optional[str] = None):
        super().__init__(msg)
        self.msg = msg
        self.error = error

    def to_payload(self) -> dict:
        payload = {"msg": self.msg}
        if self.error is not None:
            payload["error"] = self.error
        return payload


class ValidationError(JudgingError):
    """Missing, blank, or out-of-range input. Raised before any store access."""

    status_code = 400


class DuplicateError(JudgingError):
    """The store rejected a value that must be unique (event type name, judge email)."""

    status_code = 400


class NotFoundError(JudgingError):
    status_code = 404


class StoreError(JudgingError):
    """Any other persistence failure; ``error`` holds the driver message."""

    status_code = 500
