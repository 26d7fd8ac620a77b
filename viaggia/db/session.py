"""
Database Session Management Module

Provides asynchronous database session management, supporting SQLite and PostgreSQL.
One session per request; it is the unit of work for everything the
repositories stage during that request.
"""

import logging
from typing import AsyncGenerator

from sqlalchemy import event, select
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from viaggia.config import get_settings
from viaggia.db.models import Base, Role
from viaggia.domain.constants import RoleName

logger = logging.getLogger(__name__)

# Get configuration
settings = get_settings()

# Create asynchronous database engine
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.SQL_ECHO,
    # SQLite specific configuration
    connect_args={"check_same_thread": False}
    if settings.DATABASE_TYPE == "sqlite"
    else {},
)

# Enable foreign keys for SQLite
if settings.DATABASE_TYPE == "sqlite":
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

# Create asynchronous session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,  # Entities stay readable after save_changes
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session (request scoped)

    Uncommitted work is rolled back if the caller raises.

    Yields:
        AsyncSession: Async database session
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def seed_roles(session: AsyncSession) -> int:
    """
    Insert the default roles that are missing.

    Returns:
        int: Number of roles inserted
    """
    result = await session.execute(select(Role.name))
    existing = set(result.scalars().all())
    missing = [role for role in RoleName if role.value not in existing]
    for role in missing:
        session.add(Role(name=role.value))
    if missing:
        await session.commit()
        logger.info("Seeded roles: %s", ", ".join(r.value for r in missing))
    return len(missing)


async def init_db() -> None:
    """
    Initialize Database

    Creates all defined tables and, unless disabled, seeds the default roles.

    Note:
        In production, using Alembic for database migration is recommended.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.SEED_DEFAULT_ROLES:
        async with AsyncSessionLocal() as session:
            await seed_roles(session)
