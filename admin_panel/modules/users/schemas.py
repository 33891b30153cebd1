from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from admin_panel.modules.profiles.schemas import ProfileRole


class NewProfileData(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    role: Optional[ProfileRole] = None


class CreateUserRequest(BaseModel):
    email: str
    password: Optional[str] = None  # generated when omitted
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    role: ProfileRole = ProfileRole.LEARNER


class CreatedUser(BaseModel):
    id: str
    email: str
    created_at: Optional[datetime] = None


class CreateUserResult(BaseModel):
    user: Optional[CreatedUser] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.user is not None


class CreateUserResponse(BaseModel):
    user: CreatedUser
    generated_password: Optional[str] = None


class RecentUser(BaseModel):
    id: str
    email: Optional[str] = None
    created_at: Optional[datetime] = None


class GeneratedPasswordResponse(BaseModel):
    password: str
