"""Pydantic schemas for request/response validation"""
from usermanager.schemas.user import UserCreate, UserUpdate, UserResponse, UserDeleted

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "UserDeleted",
]
