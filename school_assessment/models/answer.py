import enum

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Enum, UniqueConstraint
from sqlalchemy.orm import relationship

from school_assessment.database import Base, utcnow


class MultipleChoiceOption(str, enum.Enum):
    YES = "YES"
    NO = "NO"
    OPTION_30_70 = "OPTION_30_70"
    OPTION_70_30 = "OPTION_70_30"
    OPTION_50_50 = "OPTION_50_50"
    I_DONT_KNOW = "I_DONT_KNOW"


class Answer(Base):
    __tablename__ = "answers"

    id = Column(String, primary_key=True, index=True)

    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    question_id = Column(String, ForeignKey("questions.id", ondelete="CASCADE"), nullable=False)
    event_id = Column(String, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)

    answer_text = Column(Text, nullable=True)
    selected_option = Column(
        Enum(MultipleChoiceOption, name="multiple_choice_option", native_enum=False), nullable=True
    )

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    user = relationship("User", back_populates="answers")
    question = relationship("Question", back_populates="answers")
    event = relationship("Event", back_populates="answers")

    __table_args__ = (
        UniqueConstraint("user_id", "question_id", name="uq_answer_user_question"),
    )


class EventSubmission(Base):
    """
    One row per (teacher, event). Written in the same transaction as the
    answers, so a second concurrent submission fails on the unique constraint.
    """
    __tablename__ = "event_submissions"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    event_id = Column(String, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    submitted_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    user = relationship("User", back_populates="submissions")
    event = relationship("Event", back_populates="submissions")

    __table_args__ = (
        UniqueConstraint("user_id", "event_id", name="uq_submission_user_event"),
    )
