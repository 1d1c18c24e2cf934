"""Seed a user"""
import asyncio
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pydantic import ValidationError
from usermanager.database import AsyncSessionLocal, close_db
from usermanager.core.exceptions import DuplicateEmailException
from usermanager.core.logging_config import setup_logging
from usermanager.schemas.user import UserCreate
from usermanager.services.user_service import UserService

# Set up logger
logger = setup_logging("usermanager.seed_users", log_file="seed_users.log")


async def create_user(name: str, email: str, role: str):
    """Create a user unless the email is already registered"""
    try:
        async with AsyncSessionLocal() as db:
            user = await UserService(db).create_user(
                UserCreate(name=name, email=email, role=role)
            )
            logger.info(f"User created successfully: {user.id} ({email})")
    except DuplicateEmailException:
        logger.warning(f"User with email {email} already exists!")
    finally:
        await close_db()


async def main():
    """Main function"""
    if len(sys.argv) < 3:
        logger.error("Usage: python scripts/seed_users.py <name> <email> [Admin|User]")
        sys.exit(1)

    name = sys.argv[1]
    email = sys.argv[2]
    role = sys.argv[3] if len(sys.argv) > 3 else "User"

    logger.info(f"Creating user: {email} ({role})")
    try:
        await create_user(name, email, role)
    except ValidationError as e:
        logger.error(f"Invalid user data: {e}")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
