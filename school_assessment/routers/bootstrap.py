from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from school_assessment.database import get_db
from school_assessment.models.user import Role
from school_assessment.schemas.auth import AdminCreate, AdminCreated
from school_assessment.services import accounts

router = APIRouter(prefix="/test", tags=["Test"])


@router.post("/create-admin", response_model=AdminCreated, status_code=status.HTTP_201_CREATED)
def create_admin(payload: AdminCreate, db: Session = Depends(get_db)):
    """
    Bootstraps an admin account without database seeding.
    Mounted only while ENABLE_TEST_ROUTES is on.
    """
    admin = accounts.new_user(db, payload.email, payload.password, payload.name, Role.ADMIN)
    accounts.commit_account(db, admin)
    return AdminCreated(message="Admin account created successfully", admin=admin)
