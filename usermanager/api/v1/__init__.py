"""API v1 routes"""
from usermanager.api.v1 import users

__all__ = ["users"]
