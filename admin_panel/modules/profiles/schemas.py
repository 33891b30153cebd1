from enum import Enum
from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class ProfileRole(str, Enum):
    LEARNER = "Learner"
    PARENT = "Parent"
    TUTOR = "Tutor"
    OTHER = "Other"


class ProfileUpdate(BaseModel):
    email: Optional[str] = None
    role: Optional[ProfileRole] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    school: Optional[str] = None


class ProfileResponse(BaseModel):
    id: str
    email: Optional[str] = None
    role: Optional[ProfileRole] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    school: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
