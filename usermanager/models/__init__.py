"""Database models"""
from usermanager.models.base import Base
from usermanager.models.user import User, UserRole

__all__ = ["Base", "User", "UserRole"]
