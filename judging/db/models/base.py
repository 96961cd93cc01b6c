"""
Shared SQLAlchemy base and helpers.
"""
from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base


def now_utc():
    """Return an aware UTC datetime for created/updated timestamps."""
    return datetime.now(timezone.utc)


Base = declarative_base()
