"""User endpoints"""
from typing import List
from fastapi import APIRouter, Depends, status
from usermanager.api.deps import get_user_service
from usermanager.core.logging_config import get_logger
from usermanager.schemas.user import UserCreate, UserUpdate, UserResponse, UserDeleted
from usermanager.services.user_service import UserService

logger = get_logger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    """List all users in id order"""
    users = await service.list_users()
    logger.debug(f"Listing {len(users)} users")
    return users


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    """Get a single user"""
    return await service.get_user(user_id)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    service: UserService = Depends(get_user_service)
):
    """Create a new user"""
    logger.info(f"Creating user '{user_data.name}' <{user_data.email}> as {user_data.role.value}")
    return await service.create_user(user_data)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    user_data: UserUpdate,
    service: UserService = Depends(get_user_service)
):
    """Replace a user's name, email and role"""
    logger.info(f"Updating user {user_id}")
    return await service.update_user(user_id, user_data)


@router.delete("/{user_id}", response_model=UserDeleted)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    """Delete a user"""
    logger.info(f"Deleting user {user_id}")
    await service.delete_user(user_id)
    return UserDeleted(user_id=user_id)
