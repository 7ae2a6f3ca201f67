from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from school_assessment.database import get_db
from school_assessment.models.user import Role
from school_assessment.schemas.user import DirectorCreate, StaffUpdate, UserOut
from school_assessment.services import directors as service
from school_assessment.utils.auth import require_roles

router = APIRouter(
    prefix="/directors",
    tags=["Directors"],
    dependencies=[Depends(require_roles(Role.ADMIN))],
)


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_director(payload: DirectorCreate, db: Session = Depends(get_db)):
    """Creates a director account and assigns it to an existing school."""
    return service.create_director(db, payload)


@router.get("", response_model=List[UserOut])
def list_directors(
    school_id: Optional[str] = Query(None, alias="schoolId"),
    db: Session = Depends(get_db),
):
    return service.list_directors(db, school_id)


@router.get("/{director_id}", response_model=UserOut)
def get_director(director_id: str, db: Session = Depends(get_db)):
    return service.get_director(db, director_id)


@router.patch("/{director_id}", response_model=UserOut)
def update_director(director_id: str, payload: StaffUpdate, db: Session = Depends(get_db)):
    return service.update_director(db, director_id, payload)


@router.delete("/{director_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_director(director_id: str, db: Session = Depends(get_db)):
    service.delete_director(db, director_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
