import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from school_assessment.database import get_db
from school_assessment.models.user import User
from school_assessment.schemas.auth import LoginRequest, MeResponse, SessionUser, Token
from school_assessment.services.accounts import find_by_email
from school_assessment.utils.auth import create_access_token, get_current_user, session_for, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _authenticate(db: Session, email: str, password: str) -> User:
    user = find_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        logger.warning("Failed login for %s", email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return user


@router.post("/login", response_model=Token)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    """
    Exchanges email/password for a signed token plus the user's profile,
    including the school a director or teacher belongs to.
    """
    user = _authenticate(db, payload.email, payload.password)
    return Token(access_token=create_access_token(user), user=session_for(user))


@router.post("/token", response_model=Token)
def token(form: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    """Form-encoded variant for the OAuth2 password flow; `username` carries the email."""
    user = _authenticate(db, form.username, form.password)
    return Token(access_token=create_access_token(user), user=session_for(user))


@router.get("/me", response_model=MeResponse)
def me(user: SessionUser = Depends(get_current_user)):
    return MeResponse(message="Authenticated successfully", user=user)
