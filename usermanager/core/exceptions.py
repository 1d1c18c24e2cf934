"""Custom exception classes"""
from typing import Any
from fastapi import HTTPException, status


class UserManagerException(HTTPException):
    """Base exception for the user manager"""
    pass


class ValidationException(UserManagerException):
    """Raised when request input is missing, malformed or out of domain"""
    def __init__(self, detail: Any):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail
        )


class UserNotFoundException(UserManagerException):
    """Raised when user is not found"""
    def __init__(self, user_id: int):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with ID {user_id} not found"
        )


class DuplicateEmailException(UserManagerException):
    """Raised when an email is already taken by another user"""
    def __init__(self, email: str):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"User with email {email} already exists"
        )


class StoreUnavailableException(UserManagerException):
    """Raised when the database cannot be reached or a query fails"""
    def __init__(self, detail: str = "Database unavailable"):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=detail
        )
