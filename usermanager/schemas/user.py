"""User schemas"""
from typing import Any
from pydantic import BaseModel, Field, field_validator
from usermanager.models.user import UserRole


class UserBase(BaseModel):
    """Fields shared by create and update requests"""
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    role: UserRole

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_whitespace(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value


class UserCreate(UserBase):
    """User creation request"""
    pass


class UserUpdate(UserBase):
    """User update request (full replacement of name, email and role)"""
    pass


class UserResponse(BaseModel):
    """User response"""
    id: int
    name: str
    email: str
    role: UserRole

    class Config:
        from_attributes = True


class UserDeleted(BaseModel):
    """Delete confirmation"""
    status: str = "deleted"
    user_id: int
