from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from school_assessment.database import get_db
from school_assessment.models.user import Role
from school_assessment.schemas.auth import SessionUser
from school_assessment.schemas.user import StaffUpdate, TeacherCreate, UserOut
from school_assessment.services import teachers as service
from school_assessment.utils.auth import require_roles

router = APIRouter(prefix="/teachers", tags=["Teachers"])

director_only = require_roles(Role.DIRECTOR)


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_teacher(payload: TeacherCreate, db: Session = Depends(get_db), director: SessionUser = Depends(director_only)):
    """Creates a teacher in the calling director's school."""
    return service.create_teacher(db, payload, director)


@router.get("", response_model=List[UserOut])
def list_teachers(db: Session = Depends(get_db), director: SessionUser = Depends(director_only)):
    return service.list_teachers(db, director)


@router.get("/{teacher_id}", response_model=UserOut)
def get_teacher(teacher_id: str, db: Session = Depends(get_db), director: SessionUser = Depends(director_only)):
    return service.get_school_teacher(db, teacher_id, director)


@router.patch("/{teacher_id}", response_model=UserOut)
def update_teacher(
    teacher_id: str,
    payload: StaffUpdate,
    db: Session = Depends(get_db),
    director: SessionUser = Depends(director_only),
):
    return service.update_teacher(db, teacher_id, payload, director)


@router.delete("/{teacher_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_teacher(teacher_id: str, db: Session = Depends(get_db), director: SessionUser = Depends(director_only)):
    service.delete_teacher(db, teacher_id, director)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
