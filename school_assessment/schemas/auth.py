from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from school_assessment.models.user import Role
from school_assessment.schemas.base import CamelModel, NameStr


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class SessionUser(CamelModel):
    id: str
    email: str
    name: str
    role: Role
    school_id: Optional[str] = None


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: SessionUser


class MeResponse(BaseModel):
    message: str
    user: SessionUser


class AdminCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8)
    name: NameStr


class AdminOut(CamelModel):
    id: str
    email: str
    name: str
    role: Role
    created_at: datetime


class AdminCreated(BaseModel):
    message: str
    admin: AdminOut
