"""
Test Configuration Module
"""

from datetime import datetime
from decimal import Decimal
from typing import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from viaggia.db.models import Base, Hotel, User


# Use in-memory database for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def async_engine():
    """Create async database engine for testing"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Clean up
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for testing (same options as AsyncSessionLocal)"""
    async_session = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


def make_user(n: int = 1, **overrides) -> User:
    """Build an unsaved User with unique e-mail"""
    data = {
        "name": f"User {n}",
        "email": f"user{n}@example.com",
        "password_hash": "hashed",
    }
    data.update(overrides)
    return User(**data)


def make_hotel(n: int = 1, **overrides) -> Hotel:
    """Build an unsaved Hotel with unique CNPJ"""
    data = {
        "name": f"Hotel {n}",
        "cnpj": f"00.000.000/0001-{n:02d}",
        "street": "Rua A, 100",
        "city": "Florianopolis",
        "state": "SC",
        "zip_code": "88000-000",
        "star_rating": 4,
    }
    data.update(overrides)
    return Hotel(**data)


@pytest_asyncio.fixture
async def user(db_session) -> User:
    """A persisted active User"""
    entity = make_user()
    db_session.add(entity)
    await db_session.commit()
    return entity


@pytest_asyncio.fixture
async def hotel(db_session, user) -> Hotel:
    """A persisted active Hotel owned by ``user``"""
    entity = make_hotel(user_id=user.id)
    db_session.add(entity)
    await db_session.commit()
    return entity


STAY_START = datetime(2025, 7, 1, 14, 0)
STAY_END = datetime(2025, 7, 5, 11, 0)
PRICE = Decimal("450.00")
