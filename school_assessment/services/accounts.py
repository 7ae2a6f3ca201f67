from __future__ import annotations

import logging
from typing import Optional
from uuid import uuid4

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from school_assessment.models.user import Role, User
from school_assessment.services.errors import ConflictError
from school_assessment.utils.auth import get_password_hash

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def ensure_email_free(db: Session, email: str, exclude_user_id: Optional[str] = None) -> None:
    """Emails are unique across every role, not only within one."""
    query = db.query(User.id).filter(func.lower(User.email) == normalize_email(email))
    if exclude_user_id:
        query = query.filter(User.id != exclude_user_id)
    if query.first():
        raise ConflictError("User with this email already exists")


def new_user(db: Session, email: str, password: str, name: str, role: Role) -> User:
    """Builds and adds the account; the caller commits it with commit_account."""
    ensure_email_free(db, email)
    user = User(
        id=str(uuid4()),
        email=normalize_email(email),
        password_hash=get_password_hash(password),
        name=name,
        role=role,
    )
    db.add(user)
    return user


def commit_account(db: Session, user: User) -> User:
    """Commits a new or edited account; an email taken meanwhile surfaces as ConflictError."""
    email = user.email
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Email %s taken by a concurrent request", email)
        raise ConflictError("User with this email already exists")
    db.refresh(user)
    return user


def find_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(func.lower(User.email) == normalize_email(email)).first()


def get_user_with_role(db: Session, user_id: str, role: Role) -> Optional[User]:
    return db.query(User).filter(User.id == user_id, User.role == role).first()


def update_profile(db: Session, user: User, changes: dict) -> User:
    """Only email and name are editable; keys that were not sent are left alone."""
    email = changes.get("email")
    if email:
        ensure_email_free(db, email, exclude_user_id=user.id)
        user.email = normalize_email(email)
    name = changes.get("name")
    if name:
        user.name = name
    return commit_account(db, user)
