import enum

from sqlalchemy import Column, String, Boolean, Integer, Text, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship

from school_assessment.database import Base, utcnow


class QuestionType(str, enum.Enum):
    FREE_TEXT = "FREE_TEXT"
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"


class Event(Base):
    __tablename__ = "events"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    # only shown to clients, submissions are accepted either way
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    questions = relationship(
        "Question",
        back_populates="event",
        cascade="all, delete-orphan",
        order_by="Question.order",
    )
    answers = relationship("Answer", back_populates="event", cascade="all, delete-orphan")
    submissions = relationship("EventSubmission", back_populates="event", cascade="all, delete-orphan")


class Question(Base):
    __tablename__ = "questions"

    id = Column(String, primary_key=True, index=True)
    text = Column(Text, nullable=False)
    type = Column(Enum(QuestionType, name="question_type", native_enum=False), nullable=False)
    order = Column(Integer, nullable=False)

    event_id = Column(String, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    event = relationship("Event", back_populates="questions")

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    answers = relationship("Answer", back_populates="question", cascade="all, delete-orphan")
