from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field

from school_assessment.models.user import Role
from school_assessment.schemas.base import CamelModel, NameStr


class DirectorCreate(CamelModel):
    email: EmailStr
    password: str = Field(min_length=8)
    name: NameStr
    school_id: UUID


class TeacherCreate(CamelModel):
    email: EmailStr
    password: str = Field(min_length=8)
    name: NameStr


class StaffUpdate(CamelModel):
    email: Optional[EmailStr] = None
    name: Optional[NameStr] = None


class UserOut(CamelModel):
    """Director or teacher as returned by the API; the password hash never leaves."""
    id: str
    email: EmailStr
    name: str
    role: Role
    school_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime
