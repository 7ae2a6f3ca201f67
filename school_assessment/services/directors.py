from __future__ import annotations

import logging
from typing import List, Optional
from uuid import uuid4

from sqlalchemy.orm import Session

from school_assessment.models.school import DirectorSchool, School
from school_assessment.models.user import Role, User
from school_assessment.schemas.user import DirectorCreate, StaffUpdate
from school_assessment.services import accounts
from school_assessment.services.errors import NotFoundError

logger = logging.getLogger(__name__)


def create_director(db: Session, payload: DirectorCreate) -> User:
    school_id = str(payload.school_id)
    if not db.get(School, school_id):
        raise NotFoundError(f"School with ID {school_id} not found")

    director = accounts.new_user(db, payload.email, payload.password, payload.name, Role.DIRECTOR)
    director.director_school = DirectorSchool(id=str(uuid4()), school_id=school_id)
    accounts.commit_account(db, director)
    logger.info("Director %s assigned to school %s", director.id, school_id)
    return director


def list_directors(db: Session, school_id: Optional[str] = None) -> List[User]:
    query = db.query(User).filter(User.role == Role.DIRECTOR)
    if school_id:
        query = query.join(DirectorSchool, DirectorSchool.user_id == User.id).filter(
            DirectorSchool.school_id == school_id
        )
    return query.order_by(User.created_at.desc()).all()


def get_director(db: Session, director_id: str) -> User:
    director = accounts.get_user_with_role(db, director_id, Role.DIRECTOR)
    if not director:
        raise NotFoundError(f"Director with ID {director_id} not found")
    return director


def update_director(db: Session, director_id: str, payload: StaffUpdate) -> User:
    director = get_director(db, director_id)
    return accounts.update_profile(db, director, payload.model_dump(exclude_unset=True))


def delete_director(db: Session, director_id: str) -> None:
    director = get_director(db, director_id)
    db.delete(director)
    db.commit()
    logger.info("Director %s deleted", director_id)
