from __future__ import annotations

import logging
from typing import List
from uuid import uuid4

from sqlalchemy.orm import Session

from school_assessment.models.school import TeacherSchool
from school_assessment.models.user import Role, User
from school_assessment.schemas.auth import SessionUser
from school_assessment.schemas.user import TeacherCreate, StaffUpdate
from school_assessment.services import accounts
from school_assessment.services.errors import ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


def director_school_id(director: SessionUser) -> str:
    if not director.school_id:
        raise ForbiddenError("Director not assigned to school")
    return director.school_id


def create_teacher(db: Session, payload: TeacherCreate, director: SessionUser) -> User:
    school_id = director_school_id(director)

    teacher = accounts.new_user(db, payload.email, payload.password, payload.name, Role.TEACHER)
    teacher.teacher_school = TeacherSchool(id=str(uuid4()), school_id=school_id)
    accounts.commit_account(db, teacher)
    logger.info("Teacher %s created in school %s by director %s", teacher.id, school_id, director.id)
    return teacher


def list_school_teachers(db: Session, school_id: str) -> List[User]:
    return (
        db.query(User)
        .join(TeacherSchool, TeacherSchool.user_id == User.id)
        .filter(User.role == Role.TEACHER, TeacherSchool.school_id == school_id)
        .order_by(User.created_at.desc())
        .all()
    )


def list_teachers(db: Session, director: SessionUser) -> List[User]:
    return list_school_teachers(db, director_school_id(director))


def get_teacher(db: Session, teacher_id: str) -> User:
    teacher = accounts.get_user_with_role(db, teacher_id, Role.TEACHER)
    if not teacher:
        raise NotFoundError(f"Teacher with ID {teacher_id} not found")
    return teacher


def get_school_teacher(db: Session, teacher_id: str, director: SessionUser) -> User:
    """Teacher lookup for a director: 404 when absent, 403 when in another school."""
    school_id = director_school_id(director)
    teacher = get_teacher(db, teacher_id)
    if teacher.school_id != school_id:
        raise ForbiddenError("You can only manage teachers from your school")
    return teacher


def update_teacher(db: Session, teacher_id: str, payload: StaffUpdate, director: SessionUser) -> User:
    teacher = get_school_teacher(db, teacher_id, director)
    return accounts.update_profile(db, teacher, payload.model_dump(exclude_unset=True))


def delete_teacher(db: Session, teacher_id: str, director: SessionUser) -> None:
    teacher = get_school_teacher(db, teacher_id, director)
    db.delete(teacher)
    db.commit()
    logger.info("Teacher %s deleted by director %s", teacher_id, director.id)
