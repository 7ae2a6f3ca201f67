from datetime import datetime
from typing import List, Optional

from pydantic import Field

from school_assessment.models.event import QuestionType
from school_assessment.schemas.base import CamelModel, NameStr

MAX_QUESTIONS_PER_EVENT = 50


class QuestionCreate(CamelModel):
    text: str = Field(min_length=1)
    type: QuestionType
    order: int = Field(ge=1)


class EventCreate(CamelModel):
    name: NameStr
    description: Optional[str] = None
    is_active: bool = True
    questions: List[QuestionCreate] = Field(min_length=1, max_length=MAX_QUESTIONS_PER_EVENT)


class EventUpdate(CamelModel):
    name: Optional[NameStr] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None


class QuestionOut(CamelModel):
    id: str
    text: str
    type: QuestionType
    order: int
    event_id: str


class EventOut(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class EventDetailOut(EventOut):
    questions: List[QuestionOut] = []
