"""
CRUD routers for the judging resources.

Every resource exposes the same four endpoints under ``/api/<resource>``;
``build_router`` wires one repository to them so the five resources share a
single implementation.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Path
from sqlalchemy.orm import Session

from judging.db import schemas
from judging.db.database import get_db
from judging.db.repositories import (
    ResourceRepository,
    competition_repo,
    criteria_repo,
    event_type_repo,
    judge_repo,
    participant_repo,
)

logger = logging.getLogger(__name__)

# Largest id a BIGINT-backed store can address
MAX_RESOURCE_ID = 2**63 - 1


def build_router(path: str, repository: ResourceRepository, payload_model, response_model) -> APIRouter:
    router = APIRouter(prefix=f"/api/{path}", tags=[path])

    @router.get("", response_model=List[response_model])
    def list_resources(db: Session = Depends(get_db)):
        logger.info(f"GET /api/{path} requested")
        return repository.list(db)

    @router.post("", response_model=schemas.CreatedResponse)
    def create_resource(
        payload: Optional[payload_model] = Body(default=None),
        db: Session = Depends(get_db),
    ):
        # A missing body fails field validation like an empty object
        if payload is None:
            payload = payload_model()
        logger.info(f"POST /api/{path}: {payload.model_dump(exclude_none=True)}")
        row = repository.create(db, payload)
        return {"msg": repository.created_message(row), "id": row.id}

    @router.put("/{resource_id}", response_model=schemas.MessageResponse)
    def update_resource(
        resource_id: int = Path(..., le=MAX_RESOURCE_ID),
        payload: Optional[payload_model] = Body(default=None),
        db: Session = Depends(get_db),
    ):
        if payload is None:
            payload = payload_model()
        logger.info(f"PUT /api/{path}/{resource_id}: {payload.model_dump(exclude_none=True)}")
        row = repository.update(db, resource_id, payload)
        return {"msg": repository.updated_message(row)}

    @router.delete("/{resource_id}", response_model=schemas.MessageResponse)
    def delete_resource(
        resource_id: int = Path(..., le=MAX_RESOURCE_ID),
        db: Session = Depends(get_db),
    ):
        logger.info(f"DELETE /api/{path}/{resource_id}")
        repository.delete(db, resource_id)
        return {"msg": repository.deleted_message()}

    return router


event_types_router = build_router("event-types", event_type_repo, schemas.EventTypePayload, schemas.EventType)
competitions_router = build_router("competitions", competition_repo, schemas.CompetitionPayload, schemas.Competition)
judges_router = build_router("judges", judge_repo, schemas.JudgePayload, schemas.Judge)
participants_router = build_router("participants", participant_repo, schemas.ParticipantPayload, schemas.Participant)
criteria_router = build_router("criteria", criteria_repo, schemas.CriteriaPayload, schemas.Criteria)

routers = [
    event_types_router,
    competitions_router,
    judges_router,
    participants_router,
    criteria_router,
]
