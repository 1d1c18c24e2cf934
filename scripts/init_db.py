"""Create the users table and report how many users it holds

Usage:
    python scripts/init_db.py           # create missing tables
    python scripts/init_db.py --drop    # drop and recreate (deletes every user)
"""
import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from usermanager.database import AsyncSessionLocal, init_db, drop_db, close_db
from usermanager.core.logging_config import setup_logging
from usermanager.services.user_service import UserService

# Set up logger
logger = setup_logging("usermanager.init_db", log_file="init_db.log")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Prepare the user manager database")
    parser.add_argument(
        "--drop",
        action="store_true",
        help="drop existing tables first; all stored users are deleted"
    )
    return parser.parse_args(argv)


async def main(argv=None):
    """Initialize database"""
    args = parse_args(argv)
    try:
        if args.drop:
            logger.warning("Dropping existing tables...")
            await drop_db()
        await init_db()
        async with AsyncSessionLocal() as db:
            count = await UserService(db).count_users()
        logger.info(f"Database ready: users table holds {count} row(s)")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}", exc_info=True)
        raise
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
