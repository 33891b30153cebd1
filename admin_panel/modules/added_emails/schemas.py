from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class AddedEmailCreate(BaseModel):
    email: str = Field(min_length=1)
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class AddedEmailResponse(BaseModel):
    id: int
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class AddEmailResult(BaseModel):
    success: bool
    error: Optional[str] = None
