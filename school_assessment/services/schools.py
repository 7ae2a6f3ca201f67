from __future__ import annotations

import logging
from typing import List
from uuid import uuid4

from sqlalchemy.orm import Session

from school_assessment.models.school import School
from school_assessment.schemas.school import SchoolCreate, SchoolUpdate
from school_assessment.services.errors import NotFoundError

logger = logging.getLogger(__name__)


def create_school(db: Session, payload: SchoolCreate, admin_id: str) -> School:
    school = School(
        id=str(uuid4()),
        name=payload.name,
        address=payload.address,
        admin_id=admin_id,
    )
    db.add(school)
    db.commit()
    db.refresh(school)
    logger.info("School %s created by admin %s", school.id, admin_id)
    return school


def list_schools(db: Session) -> List[School]:
    return db.query(School).order_by(School.created_at.desc()).all()


def get_school(db: Session, school_id: str) -> School:
    school = db.get(School, school_id)
    if not school:
        raise NotFoundError(f"School with ID {school_id} not found")
    return school


def update_school(db: Session, school_id: str, payload: SchoolUpdate) -> School:
    school = get_school(db, school_id)
    changes = payload.model_dump(exclude_unset=True)

    if changes.get("name"):
        school.name = changes["name"]
    if "address" in changes:
        school.address = changes["address"]

    db.commit()
    db.refresh(school)
    return school


def delete_school(db: Session, school_id: str) -> None:
    """
    Removes the school together with the directors and teachers linked to it;
    their link rows, answers and submissions go with the accounts.
    """
    school = get_school(db, school_id)
    members = [link.user for link in school.director_links] + [link.user for link in school.teacher_links]
    for user in members:
        db.delete(user)
    db.delete(school)
    db.commit()
    logger.info("School %s deleted with %d linked accounts", school_id, len(members))
