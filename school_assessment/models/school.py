from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from school_assessment.database import Base, utcnow


class School(Base):
    __tablename__ = "schools"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    address = Column(String, nullable=True)

    # admin who created the school
    admin_id = Column(String, ForeignKey("users.id"), nullable=False)
    admin = relationship("User")

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    director_links = relationship("DirectorSchool", back_populates="school", cascade="all, delete-orphan")
    teacher_links = relationship("TeacherSchool", back_populates="school", cascade="all, delete-orphan")


class DirectorSchool(Base):
    __tablename__ = "director_schools"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    school_id = Column(String, ForeignKey("schools.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    user = relationship("User", back_populates="director_school")
    school = relationship("School", back_populates="director_links")


class TeacherSchool(Base):
    __tablename__ = "teacher_schools"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    school_id = Column(String, ForeignKey("schools.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    user = relationship("User", back_populates="teacher_school")
    school = relationship("School", back_populates="teacher_links")
