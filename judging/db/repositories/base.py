"""
Generic CRUD repository shared by every judging resource.

A resource subclass names its model, its labels, the message used when the
store reports a uniqueness violation, its list ordering, and the references
clients address by name. It implements ``normalize`` to validate and clean
the request payload; everything else (reference resolution, statement
execution, error mapping) happens here.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, aliased

from judging.db import models
from judging.db.references import Reference, resolve
from judging.errors import DuplicateError, NotFoundError, StoreError, ValidationError
from judging.utils.validation import clean_text, with_default

logger = logging.getLogger(__name__)


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def _error_detail(exc: SQLAlchemyError) -> str:
    return str(getattr(exc, "orig", None) or exc)


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when the store rejected a duplicate value.

    PostgreSQL reports SQLSTATE 23505; SQLite and MySQL only say so in the
    message text.
    """
    orig = getattr(exc, "orig", None)
    if getattr(orig, "pgcode", None) == "23505":
        return True
    text = _error_detail(exc).lower()
    return "unique" in text or "duplicate entry" in text


class ResourceRepository:
    model: Any = None
    label: str = "resource"
    plural: str = "resources"
    create_verb: str = "create"
    created_verb: str = "created"
    duplicate_message: Optional[str] = None
    references: Tuple[Reference, ...] = ()
    # Filled in on create when absent; an update that omits them keeps the stored value
    defaults: Dict[str, Any] = {}

    # -- hooks -----------------------------------------------------------
    def normalize(self, payload) -> Dict[str, Any]:
        """Return validated column values, with reference names under ``Reference.field``."""
        raise NotImplementedError

    def ordering(self):
        return (self.model.created_at.desc(), self.model.id.desc())

    # -- messages --------------------------------------------------------
    @property
    def title(self) -> str:
        return _capitalize(self.label)

    def created_message(self, row) -> str:
        return f"Successfully {self.created_verb} {self.label}: {row.name}"

    def updated_message(self, row) -> str:
        return f"Successfully updated {self.label}: {row.name}"

    def deleted_message(self) -> str:
        return f"{self.title} deleted successfully"

    # -- operations ------------------------------------------------------
    def list(self, db: Session) -> List[Dict[str, Any]]:
        try:
            query = db.query(self.model)
            for ref in self.references:
                target = aliased(ref.model)
                query = query.outerjoin(
                    target, getattr(self.model, ref.column) == target.id
                ).add_columns(target.name.label(ref.field))
            rows = query.order_by(*self.ordering()).all()
        except SQLAlchemyError as e:
            db.rollback()
            raise self._store_error(f"Failed to fetch {self.plural}", e)
        logger.info(f"Returned {len(rows)} {self.plural}")
        return [self._to_record(row) for row in rows]

    def create(self, db: Session, payload):
        values = self._prepare(db, payload)
        for key, default in self.defaults.items():
            values[key] = with_default(values.get(key), default)
        row = self.model(**values)
        db.add(row)
        self._commit(db, f"Failed to {self.create_verb} {self.label}")
        db.refresh(row)
        logger.info(f"Created {self.label}: {row.name} with ID: {row.id}")
        return row

    def update(self, db: Session, resource_id: int, payload):
        values = self._prepare(db, payload)
        for key in self.defaults:
            if values.get(key) is None:
                values.pop(key, None)
        try:
            row = db.query(self.model).filter(self.model.id == resource_id).first()
        except SQLAlchemyError as e:
            db.rollback()
            raise self._store_error(f"Failed to update {self.label}", e)
        if row is None:
            raise NotFoundError(f"{self.title} not found")
        for key, value in values.items():
            setattr(row, key, value)
        row.updated_at = models.now_utc()
        self._commit(db, f"Failed to update {self.label}")
        db.refresh(row)
        logger.info(f"Updated {self.label} ID: {resource_id}")
        return row

    def delete(self, db: Session, resource_id: int) -> None:
        try:
            deleted = (
                db.query(self.model)
                .filter(self.model.id == resource_id)
                .delete(synchronize_session=False)
            )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            raise self._store_error(f"Failed to delete {self.label}", e)
        if not deleted:
            raise NotFoundError(f"{self.title} not found")
        logger.info(f"Deleted {self.label} ID: {resource_id}")

    # -- internals -------------------------------------------------------
    def _prepare(self, db: Session, payload) -> Dict[str, Any]:
        """Validate, then resolve references. Nothing touches the store until validation passes."""
        values = self.normalize(payload)
        names = []
        for ref in self.references:
            name = clean_text(values.pop(ref.field, None))
            if ref.required and name is None:
                raise ValidationError(f"{_capitalize(ref.label)} is required")
            names.append((ref, name))
        for ref, name in names:
            ref_id = resolve(db, ref, name)
            if ref.required and ref_id is None:
                raise ValidationError(f"{_capitalize(ref.label)} '{name}' does not exist")
            values[ref.column] = ref_id
        return values

    def _commit(self, db: Session, failure_message: str) -> None:
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            if self.duplicate_message and is_unique_violation(e):
                logger.warning(f"Duplicate {self.label} rejected: {_error_detail(e)}")
                raise DuplicateError(self.duplicate_message)
            raise self._store_error(failure_message, e)
        except SQLAlchemyError as e:
            db.rollback()
            raise self._store_error(failure_message, e)

    def _store_error(self, message: str, exc: SQLAlchemyError) -> StoreError:
        detail = _error_detail(exc)
        logger.error(f"Database error ({message}): {detail}")
        return StoreError(message, detail)

    def _to_record(self, row) -> Dict[str, Any]:
        if self.references:
            instance, names = row[0], tuple(row[1:])
        else:
            instance, names = row, ()
        hidden = {ref.column for ref in self.references}
        record = {
            column.key: getattr(instance, column.key)
            for column in self.model.__table__.columns
            if column.key not in hidden
        }
        for ref, name in zip(self.references, names):
            record[ref.field] = name
        return record
