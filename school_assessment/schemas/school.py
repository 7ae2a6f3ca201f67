from datetime import datetime
from typing import Optional

from school_assessment.schemas.base import CamelModel, NameStr


class SchoolCreate(CamelModel):
    name: NameStr
    address: Optional[str] = None


class SchoolUpdate(CamelModel):
    name: Optional[NameStr] = None
    address: Optional[str] = None


class SchoolOut(CamelModel):
    id: str
    name: str
    address: Optional[str] = None
    admin_id: str
    created_at: datetime
    updated_at: datetime
