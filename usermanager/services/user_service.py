"""User service - CRUD over the users table"""
from typing import List, Optional
from sqlalchemy import select, delete, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from usermanager.models.user import User
from usermanager.schemas.user import UserCreate, UserUpdate
from usermanager.core.logging_config import get_logger
from usermanager.core.exceptions import (
    DuplicateEmailException,
    StoreUnavailableException,
    UserNotFoundException,
)

logger = get_logger(__name__)


class UserService:
    """Service for user operations.

    Every operation is a single unit of work on the given session: it either
    commits in full or rolls back and raises.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_users(self) -> List[User]:
        """Return all users in id order"""
        result = await self._execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    async def count_users(self) -> int:
        result = await self._execute(select(func.count()).select_from(User))
        return result.scalar_one()

    async def get_user(self, user_id: int) -> User:
        """Return a single user or raise UserNotFoundException"""
        user = await self._get_by_id(user_id)
        if user is None:
            raise UserNotFoundException(user_id)
        return user

    async def create_user(self, data: UserCreate) -> User:
        """Create a user; the store assigns the id"""
        logger.debug(f"Creating user: {data.email}")

        if await self._get_by_email(data.email) is not None:
            logger.warning(f"Create rejected: email already registered - {data.email}")
            raise DuplicateEmailException(data.email)

        user = User(name=data.name, email=data.email, role=data.role)
        self.db.add(user)
        await self._commit(data.email)

        logger.info(f"User created: {user.id} ({user.email})")
        return user

    async def update_user(self, user_id: int, data: UserUpdate) -> User:
        """Replace name, email and role of an existing user"""
        user = await self.get_user(user_id)

        other = await self._get_by_email(data.email)
        if other is not None and other.id != user.id:
            logger.warning(f"Update of user {user_id} rejected: email taken by user {other.id}")
            raise DuplicateEmailException(data.email)

        user.name = data.name
        user.email = data.email
        user.role = data.role
        await self._commit(data.email)

        logger.info(f"User updated: {user.id} ({user.email}, role={user.role.value})")
        return user

    async def delete_user(self, user_id: int) -> None:
        """Hard-delete a user; unknown ids raise UserNotFoundException"""
        await self.get_user(user_id)
        await self._execute(delete(User).where(User.id == user_id))
        await self._commit()
        logger.info(f"User deleted: {user_id}")

    async def _get_by_id(self, user_id: int) -> Optional[User]:
        result = await self._execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def _get_by_email(self, email: str) -> Optional[User]:
        result = await self._execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def _execute(self, statement):
        try:
            return await self.db.execute(statement)
        except SQLAlchemyError as e:
            logger.error(f"Database error: {e}", exc_info=True)
            await self.db.rollback()
            raise StoreUnavailableException() from e

    async def _commit(self, email: Optional[str] = None) -> None:
        """Commit the session, mapping unique violations to DuplicateEmailException"""
        try:
            await self.db.commit()
        except IntegrityError as e:
            # A concurrent request inserted the same email after our check
            await self.db.rollback()
            logger.warning(f"Unique constraint violated for email {email}: {e.orig}")
            raise DuplicateEmailException(email) from e
        except SQLAlchemyError as e:
            logger.error(f"Database error on commit: {e}", exc_info=True)
            await self.db.rollback()
            raise StoreUnavailableException() from e
