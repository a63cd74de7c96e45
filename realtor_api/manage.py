"""
Database management commands.
Creates and resets tables and bootstraps the first admin account, which is
needed before any product key can be issued through the API.
"""

import argparse
import asyncio
import logging
import sys
from sqlalchemy.ext.asyncio import AsyncSession

from realtor_api.config import settings
from realtor_api.database import AsyncSessionLocal, create_tables, drop_tables, close_db_connection
from realtor_api.models.user import User, UserRole
from realtor_api.repositories.user import UserRepository
from realtor_api.utils.auth import hash_password

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def create_admin(session: AsyncSession, name: str, email: str, phone: str, password: str) -> User:
    """
    Create an admin user directly in the database.

    Raises:
        ValueError: If the email is already registered or the password is too short
    """
    admin = await UserRepository(session).create_user({
        "name": name,
        "email": email,
        "phone": phone,
        "hashed_password": hash_password(password),
        "role": UserRole.ADMIN,
    })
    logger.info(f"Admin created: {admin.email} (ID: {admin.id})")
    return admin


async def _create_admin_command(args: argparse.Namespace) -> None:
    async with AsyncSessionLocal() as session:
        await create_admin(session, args.name, args.email, args.phone, args.password)


async def _reset_command() -> None:
    await drop_tables()
    await create_tables()


async def _run(coro) -> None:
    try:
        await coro
    finally:
        await close_db_connection()


def main(argv=None):
    """Main CLI interface for database management."""
    parser = argparse.ArgumentParser(description=f"{settings.app_name} database management")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("create-tables", help="Create all tables")

    reset_parser = subparsers.add_parser("reset", help="Drop and recreate all tables (not in production)")
    reset_parser.add_argument("--confirm", action="store_true", help="Confirm database reset")

    admin_parser = subparsers.add_parser("create-admin", help="Create an admin account")
    admin_parser.add_argument("--name", required=True)
    admin_parser.add_argument("--email", required=True)
    admin_parser.add_argument("--phone", required=True)
    admin_parser.add_argument("--password", required=True)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    try:
        if args.command == "create-tables":
            asyncio.run(_run(create_tables()))

        elif args.command == "reset":
            if not args.confirm:
                print("Database reset requires --confirm flag")
                return
            asyncio.run(_run(_reset_command()))

        elif args.command == "create-admin":
            asyncio.run(_run(_create_admin_command(args)))

    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
