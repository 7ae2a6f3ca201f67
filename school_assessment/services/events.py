from __future__ import annotations

import logging
from typing import List, Optional
from uuid import uuid4

from sqlalchemy.orm import Session

from school_assessment.models.event import Event, Question
from school_assessment.schemas.event import EventCreate, EventUpdate
from school_assessment.services.errors import NotFoundError

logger = logging.getLogger(__name__)


def create_event(db: Session, payload: EventCreate) -> Event:
    """Event and its questions are written in one commit."""
    event = Event(
        id=str(uuid4()),
        name=payload.name,
        description=payload.description,
        is_active=payload.is_active,
    )
    event.questions = [
        Question(id=str(uuid4()), text=q.text, type=q.type, order=q.order)
        for q in payload.questions
    ]
    db.add(event)
    db.commit()
    db.refresh(event)
    logger.info("Event %s created with %d questions", event.id, len(event.questions))
    return event


def list_events(db: Session, active: Optional[bool] = None) -> List[Event]:
    query = db.query(Event)
    if active is not None:
        query = query.filter(Event.is_active == active)
    return query.order_by(Event.created_at.desc()).all()


def get_event(db: Session, event_id: str) -> Event:
    event = db.get(Event, event_id)
    if not event:
        raise NotFoundError(f"Event with ID {event_id} not found")
    return event


def update_event(db: Session, event_id: str, payload: EventUpdate) -> Event:
    event = get_event(db, event_id)
    changes = payload.model_dump(exclude_unset=True)

    if changes.get("name"):
        event.name = changes["name"]
    if "description" in changes:
        event.description = changes["description"]
    if changes.get("is_active") is not None:
        event.is_active = changes["is_active"]

    db.commit()
    db.refresh(event)
    return event


def delete_event(db: Session, event_id: str) -> None:
    event = get_event(db, event_id)
    db.delete(event)
    db.commit()
    logger.info("Event %s deleted", event_id)
