from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from school_assessment.database import get_db
from school_assessment.models.user import Role
from school_assessment.schemas.answer import (
    HistoryEntry,
    MyEventAnswers,
    ParticipatedEvent,
    SchoolResults,
    SubmitAnswersRequest,
    SubmitAnswersResponse,
    TeacherHistory,
)
from school_assessment.schemas.auth import SessionUser
from school_assessment.services import answers as service
from school_assessment.utils.auth import require_roles

router = APIRouter(prefix="/answers", tags=["Answers"])

teacher_only = require_roles(Role.TEACHER)
director_only = require_roles(Role.DIRECTOR)


@router.post("/submit", response_model=SubmitAnswersResponse, status_code=status.HTTP_201_CREATED)
def submit_answers(payload: SubmitAnswersRequest, db: Session = Depends(get_db), teacher: SessionUser = Depends(teacher_only)):
    """
    Teacher submits the full answer set for an event. Only one submission per
    event is accepted; partial or malformed sets are rejected as a whole.
    """
    answers = service.submit_answers(db, payload, teacher)
    return SubmitAnswersResponse(message="Answers submitted successfully", answers=answers)


@router.get("/my-history", response_model=List[HistoryEntry])
def my_history(db: Session = Depends(get_db), teacher: SessionUser = Depends(teacher_only)):
    return service.list_my_history(db, teacher)


@router.get("/my-participated-events", response_model=List[ParticipatedEvent])
def my_participated_events(db: Session = Depends(get_db), teacher: SessionUser = Depends(teacher_only)):
    return service.list_participated_events(db, teacher.id)


@router.get("/my-answers/{event_id}", response_model=MyEventAnswers)
def my_answers_for_event(event_id: str, db: Session = Depends(get_db), teacher: SessionUser = Depends(teacher_only)):
    return service.get_my_answers_for_event(db, teacher, event_id)


@router.get("/school-results/{event_id}", response_model=SchoolResults)
def school_results(event_id: str, db: Session = Depends(get_db), director: SessionUser = Depends(director_only)):
    """Answers of the director's teachers to one event, grouped per teacher."""
    return service.get_school_results(db, director, event_id)


@router.get("/teacher-history/{teacher_id}", response_model=TeacherHistory)
def teacher_history(teacher_id: str, db: Session = Depends(get_db), director: SessionUser = Depends(director_only)):
    return service.get_teacher_history(db, director, teacher_id)
