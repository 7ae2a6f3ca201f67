import enum

from sqlalchemy import Column, String, DateTime, Enum
from sqlalchemy.orm import relationship

from school_assessment.database import Base, utcnow


class Role(str, enum.Enum):
    ADMIN = "ADMIN"
    DIRECTOR = "DIRECTOR"
    TEACHER = "TEACHER"


class User(Base):
    """
    One table for every account; `role` decides what the account may do.
    Directors and teachers are tied to their school through the link tables.
    """
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    name = Column(String, nullable=False)
    role = Column(Enum(Role, name="user_role", native_enum=False), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # 1:1, user_id is unique in both link tables
    director_school = relationship(
        "DirectorSchool", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    teacher_school = relationship(
        "TeacherSchool", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )

    answers = relationship("Answer", back_populates="user", cascade="all, delete-orphan")
    submissions = relationship("EventSubmission", back_populates="user", cascade="all, delete-orphan")

    @property
    def school_id(self) -> str | None:
        if self.role == Role.DIRECTOR and self.director_school:
            return self.director_school.school_id
        if self.role == Role.TEACHER and self.teacher_school:
            return self.teacher_school.school_id
        return None
