"""Business logic services"""
from usermanager.services.user_service import UserService

__all__ = ["UserService"]
