from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from school_assessment.models.answer import MultipleChoiceOption
from school_assessment.models.event import QuestionType
from school_assessment.schemas.base import CamelModel


class SingleAnswer(CamelModel):
    question_id: UUID
    answer_text: Optional[str] = None
    selected_option: Optional[MultipleChoiceOption] = None


class SubmitAnswersRequest(CamelModel):
    event_id: UUID
    answers: List[SingleAnswer] = Field(min_length=1)


class AnswerOut(CamelModel):
    id: str
    user_id: str
    question_id: str
    event_id: str
    answer_text: Optional[str] = None
    selected_option: Optional[MultipleChoiceOption] = None
    created_at: datetime
    updated_at: datetime


class SubmitAnswersResponse(CamelModel):
    message: str
    answers: List[AnswerOut]


class AnsweredQuestion(CamelModel):
    question_id: str
    question_text: str
    question_type: QuestionType
    answer_text: Optional[str] = None
    selected_option: Optional[MultipleChoiceOption] = None
    submitted_at: datetime


class HistoryEntry(AnsweredQuestion):
    id: str
    event_id: str
    event_name: str


class ParticipatedEvent(CamelModel):
    event_id: str
    event_name: str
    event_description: Optional[str] = None
    is_active: bool
    answered_questions_count: int
    total_questions_count: int
    participated_at: datetime


class MyEventAnswers(CamelModel):
    event_id: str
    event_name: str
    answers: List[AnsweredQuestion]


class TeacherResult(CamelModel):
    teacher_id: str
    teacher_name: str
    teacher_email: str
    answered_questions_count: int
    total_questions_count: int
    answers: List[AnsweredQuestion]


class SchoolResults(CamelModel):
    event_id: str
    event_name: str
    school_id: str
    teachers: List[TeacherResult]


class EventParticipation(ParticipatedEvent):
    answers: List[AnsweredQuestion]


class TeacherHistory(CamelModel):
    teacher_id: str
    teacher_name: str
    teacher_email: str
    events: List[EventParticipation]
