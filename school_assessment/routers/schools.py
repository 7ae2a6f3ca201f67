from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from school_assessment.database import get_db
from school_assessment.models.user import Role
from school_assessment.schemas.auth import SessionUser
from school_assessment.schemas.school import SchoolCreate, SchoolOut, SchoolUpdate
from school_assessment.services import schools as service
from school_assessment.utils.auth import require_roles

router = APIRouter(prefix="/schools", tags=["Schools"])

admin_only = require_roles(Role.ADMIN)


@router.post("", response_model=SchoolOut, status_code=status.HTTP_201_CREATED)
def create_school(payload: SchoolCreate, db: Session = Depends(get_db), admin: SessionUser = Depends(admin_only)):
    return service.create_school(db, payload, admin.id)


@router.get("", response_model=List[SchoolOut], dependencies=[Depends(admin_only)])
def list_schools(db: Session = Depends(get_db)):
    return service.list_schools(db)


@router.get("/{school_id}", response_model=SchoolOut, dependencies=[Depends(admin_only)])
def get_school(school_id: str, db: Session = Depends(get_db)):
    return service.get_school(db, school_id)


@router.patch("/{school_id}", response_model=SchoolOut, dependencies=[Depends(admin_only)])
def update_school(school_id: str, payload: SchoolUpdate, db: Session = Depends(get_db)):
    return service.update_school(db, school_id, payload)


@router.delete("/{school_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(admin_only)])
def delete_school(school_id: str, db: Session = Depends(get_db)):
    """Deletes the school and every director/teacher linked to it."""
    service.delete_school(db, school_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
