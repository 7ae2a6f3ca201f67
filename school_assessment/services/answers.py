from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Dict, List
from uuid import uuid4

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from school_assessment.models.answer import Answer, EventSubmission
from school_assessment.models.event import Event, Question
from school_assessment.models.school import TeacherSchool
from school_assessment.models.user import Role, User
from school_assessment.schemas.answer import (
    AnsweredQuestion,
    EventParticipation,
    HistoryEntry,
    MyEventAnswers,
    ParticipatedEvent,
    SchoolResults,
    SubmitAnswersRequest,
    TeacherHistory,
    TeacherResult,
)
from school_assessment.schemas.auth import SessionUser
from school_assessment.services.errors import BadRequestError, ConflictError, NotFoundError
from school_assessment.services.events import get_event
from school_assessment.services.teachers import director_school_id, get_school_teacher

logger = logging.getLogger(__name__)


def _has_submitted(db: Session, user_id: str, event_id: str) -> bool:
    if db.query(EventSubmission.id).filter_by(user_id=user_id, event_id=event_id).first():
        return True
    return db.query(Answer.id).filter_by(user_id=user_id, event_id=event_id).first() is not None


def submit_answers(db: Session, payload: SubmitAnswersRequest, teacher: SessionUser) -> List[Answer]:
    """
    Records a teacher's complete answer set for one event.

    Checks, in order, before anything is written:
      1) the event exists (NotFoundError);
      2) the teacher has not submitted for it yet (ConflictError);
      3) every question is answered, no unknown or repeated question IDs (BadRequestError).

    The answers and the submission marker are committed together; losing a
    race against a concurrent submission surfaces as ConflictError.
    """
    event_id = str(payload.event_id)
    event = db.get(Event, event_id)
    if not event:
        raise NotFoundError("Event not found")

    if _has_submitted(db, teacher.id, event_id):
        raise ConflictError("You have already submitted answers for this event")

    questions = event.questions
    if len(payload.answers) != len(questions):
        raise BadRequestError(f"You must answer all {len(questions)} questions")

    known_ids = {q.id for q in questions}
    submitted_ids = [str(a.question_id) for a in payload.answers]

    invalid = [qid for qid in submitted_ids if qid not in known_ids]
    if invalid:
        raise BadRequestError(f"Invalid question IDs: {', '.join(invalid)}")

    seen, duplicates = set(), []
    for qid in submitted_ids:
        if qid in seen and qid not in duplicates:
            duplicates.append(qid)
        seen.add(qid)
    if duplicates:
        raise BadRequestError(f"Duplicate answers for questions: {', '.join(duplicates)}")

    answers = [
        Answer(
            id=str(uuid4()),
            user_id=teacher.id,
            question_id=qid,
            event_id=event_id,
            answer_text=item.answer_text,
            selected_option=item.selected_option,
        )
        for qid, item in zip(submitted_ids, payload.answers)
    ]
    db.add(EventSubmission(id=str(uuid4()), user_id=teacher.id, event_id=event_id))
    db.add_all(answers)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Concurrent duplicate submission by %s for event %s", teacher.id, event_id)
        raise ConflictError("You have already submitted answers for this event")

    logger.info("Teacher %s submitted %d answers for event %s", teacher.id, len(answers), event_id)
    return answers


def _answered(answer: Answer) -> AnsweredQuestion:
    return AnsweredQuestion(
        question_id=answer.question_id,
        question_text=answer.question.text,
        question_type=answer.question.type,
        answer_text=answer.answer_text,
        selected_option=answer.selected_option,
        submitted_at=answer.created_at,
    )


def _by_question_order(answers: List[Answer]) -> List[Answer]:
    return sorted(answers, key=lambda a: a.question.order)


def _question_totals(db: Session, event_ids: List[str]) -> Dict[str, int]:
    if not event_ids:
        return {}
    rows = (
        db.query(Question.event_id, func.count(Question.id))
        .filter(Question.event_id.in_(event_ids))
        .group_by(Question.event_id)
        .all()
    )
    return {event_id: count for event_id, count in rows}


def list_my_history(db: Session, user: SessionUser) -> List[HistoryEntry]:
    answers = (
        db.query(Answer)
        .options(joinedload(Answer.question), joinedload(Answer.event))
        .filter(Answer.user_id == user.id)
        .order_by(Answer.created_at.desc())
        .all()
    )
    return [
        HistoryEntry(
            id=a.id,
            event_id=a.event_id,
            event_name=a.event.name,
            **_answered(a).model_dump(),
        )
        for a in answers
    ]


def list_participated_events(db: Session, user_id: str) -> List[ParticipatedEvent]:
    """
    One entry per event the user answered: distinct questions answered vs. the
    event's total, and the earliest answer time. Newest participation first.
    """
    rows = (
        db.query(
            Answer.event_id,
            func.count(func.distinct(Answer.question_id)),
            func.min(Answer.created_at),
        )
        .filter(Answer.user_id == user_id)
        .group_by(Answer.event_id)
        .all()
    )
    if not rows:
        return []

    event_ids = [event_id for event_id, _, _ in rows]
    events = {e.id: e for e in db.query(Event).filter(Event.id.in_(event_ids)).all()}
    totals = _question_totals(db, event_ids)

    result = [
        ParticipatedEvent(
            event_id=event_id,
            event_name=events[event_id].name,
            event_description=events[event_id].description,
            is_active=events[event_id].is_active,
            answered_questions_count=answered,
            total_questions_count=totals.get(event_id, 0),
            participated_at=first_at,
        )
        for event_id, answered, first_at in rows
    ]
    result.sort(key=lambda p: p.participated_at, reverse=True)
    return result


def get_my_answers_for_event(db: Session, user: SessionUser, event_id: str) -> MyEventAnswers:
    event = get_event(db, event_id)
    answers = (
        db.query(Answer)
        .options(joinedload(Answer.question))
        .filter(Answer.user_id == user.id, Answer.event_id == event.id)
        .all()
    )
    return MyEventAnswers(
        event_id=event.id,
        event_name=event.name,
        answers=[_answered(a) for a in _by_question_order(answers)],
    )


def get_school_results(db: Session, director: SessionUser, event_id: str) -> SchoolResults:
    """Answers to one event from the teachers of the director's school, grouped per teacher."""
    school_id = director_school_id(director)
    event = get_event(db, event_id)
    total = len(event.questions)

    answers = (
        db.query(Answer)
        .join(User, User.id == Answer.user_id)
        .join(TeacherSchool, TeacherSchool.user_id == Answer.user_id)
        .options(joinedload(Answer.question), joinedload(Answer.user))
        .filter(
            Answer.event_id == event.id,
            User.role == Role.TEACHER,
            TeacherSchool.school_id == school_id,
        )
        .order_by(Answer.created_at.desc())
        .all()
    )

    per_teacher: "OrderedDict[str, List[Answer]]" = OrderedDict()
    for answer in answers:
        per_teacher.setdefault(answer.user_id, []).append(answer)

    teachers = []
    for teacher_answers in per_teacher.values():
        user = teacher_answers[0].user
        teachers.append(
            TeacherResult(
                teacher_id=user.id,
                teacher_name=user.name,
                teacher_email=user.email,
                answered_questions_count=len({a.question_id for a in teacher_answers}),
                total_questions_count=total,
                answers=[_answered(a) for a in _by_question_order(teacher_answers)],
            )
        )
    teachers.sort(key=lambda t: t.teacher_name.lower())

    return SchoolResults(event_id=event.id, event_name=event.name, school_id=school_id, teachers=teachers)


def get_teacher_history(db: Session, director: SessionUser, teacher_id: str) -> TeacherHistory:
    """Full answer history of one teacher; the teacher must belong to the director's school."""
    teacher = get_school_teacher(db, teacher_id, director)

    answers = (
        db.query(Answer)
        .options(joinedload(Answer.question), joinedload(Answer.event))
        .filter(Answer.user_id == teacher.id)
        .order_by(Answer.created_at.desc())
        .all()
    )

    per_event: "OrderedDict[str, List[Answer]]" = OrderedDict()
    for answer in answers:
        per_event.setdefault(answer.event_id, []).append(answer)
    totals = _question_totals(db, list(per_event))

    events = []
    for event_id, event_answers in per_event.items():
        event = event_answers[0].event
        events.append(
            EventParticipation(
                event_id=event_id,
                event_name=event.name,
                event_description=event.description,
                is_active=event.is_active,
                answered_questions_count=len({a.question_id for a in event_answers}),
                total_questions_count=totals.get(event_id, 0),
                participated_at=min(a.created_at for a in event_answers),
                answers=[_answered(a) for a in _by_question_order(event_answers)],
            )
        )
    events.sort(key=lambda e: e.participated_at, reverse=True)

    return TeacherHistory(
        teacher_id=teacher.id,
        teacher_name=teacher.name,
        teacher_email=teacher.email,
        events=events,
    )
