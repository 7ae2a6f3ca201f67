from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from school_assessment.database import get_db
from school_assessment.models.user import Role
from school_assessment.schemas.event import EventCreate, EventDetailOut, EventOut, EventUpdate
from school_assessment.services import events as service
from school_assessment.utils.auth import get_current_user, require_roles

router = APIRouter(prefix="/events", tags=["Events"], dependencies=[Depends(get_current_user)])

admin_only = require_roles(Role.ADMIN)


@router.post("", response_model=EventDetailOut, status_code=status.HTTP_201_CREATED, dependencies=[Depends(admin_only)])
def create_event(payload: EventCreate, db: Session = Depends(get_db)):
    """Creates an event with 1..50 questions."""
    return service.create_event(db, payload)


@router.get("", response_model=List[EventOut])
def list_events(active: Optional[bool] = None, db: Session = Depends(get_db)):
    """All events, newest first; `?active=true|false` narrows by the active flag."""
    return service.list_events(db, active)


@router.get("/{event_id}", response_model=EventDetailOut)
def get_event(event_id: str, db: Session = Depends(get_db)):
    return service.get_event(db, event_id)


@router.patch("/{event_id}", response_model=EventOut, dependencies=[Depends(admin_only)])
def update_event(event_id: str, payload: EventUpdate, db: Session = Depends(get_db)):
    return service.update_event(db, event_id, payload)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(admin_only)])
def delete_event(event_id: str, db: Session = Depends(get_db)):
    """Deletes the event along with its questions and every answer to it."""
    service.delete_event(db, event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
