"""API dependencies"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from usermanager.database import get_db
from usermanager.services.user_service import UserService


async def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    """Build a UserService bound to the request's database session"""
    return UserService(db)
