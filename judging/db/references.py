"""
Name-to-id reference resolution.

Clients refer to related rows by their human-readable name (a competition's
or an event type's ``name``). Before insert/update the repositories turn
that name into the surrogate id with a single exact-match lookup.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from judging.errors import StoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reference:
    """A foreign key that clients address by the referenced row's name.

    field: key in the request/response body ("event_type", "category", ...)
    column: foreign-key column on the owning model
    model: referenced model, which must have ``id`` and ``name`` columns
    label: human-readable name of the referenced resource
    required: reject requests that omit the name or name nothing
    """

    field: str
    column: str
    model: type
    label: str
    required: bool = False


def resolve_reference(db: Session, model, name: Optional[str]) -> Optional[int]:
    """Return the id of the ``model`` row called ``name``, or None.

    No name means no lookup. An unknown name resolves to None rather than
    failing; missing rows are never created here.
    """
    if name is None:
        return None
    row = (
        db.query(model.id)
        .filter(model.name == name)
        .order_by(model.id)
        .first()
    )
    return row[0] if row else None


def resolve(db: Session, reference: Reference, name: Optional[str]) -> Optional[int]:
    """``resolve_reference`` with store failures mapped to ``StoreError``."""
    try:
        ref_id = resolve_reference(db, reference.model, name)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to resolve {reference.label} '{name}': {e}")
        raise StoreError(f"Failed to find {reference.label}", str(getattr(e, "orig", None) or e))
    if name is not None and ref_id is None:
        logger.info(f"No {reference.label} named '{name}'")
    return ref_id
