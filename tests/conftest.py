import os
import sys
import tempfile
from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import date
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient
from sqlalchemy import insert
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

# Load environment variables from .env file
load_dotenv()

# The app module needs a DATABASE_URL at import time
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{Path(tempfile.gettempdir()) / 'booking_dev.db'}",
)

from booking.config import settings  # noqa: E402
from booking.database import get_db  # noqa: E402
from booking.main import app  # noqa: E402
from booking.models.appointments import appointments, metadata  # noqa: E402

# Test database URL - MUST be different from the application database
TEST_DATABASE_URL = os.getenv(
    "TEST_DATABASE_URL",
    f"sqlite+aiosqlite:///{Path(tempfile.gettempdir()) / 'booking_test.db'}",
)

# Safety check: prevent running tests against the application database
if settings.database_url == TEST_DATABASE_URL:
    print("\n❌ CRITICAL ERROR: Test database URL is same as application database!")
    print("This would DROP all appointment data during tests.")
    print("Please set TEST_DATABASE_URL to a separate test database in .env")
    sys.exit(1)

# Ensure we're using asyncpg driver for PostgreSQL
if TEST_DATABASE_URL.startswith("postgresql://"):
    TEST_DATABASE_URL = TEST_DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://", 1)

# Use NullPool to avoid event loop issues between tests
test_engine = create_async_engine(
    TEST_DATABASE_URL,
    echo=False,  # Set to True for SQL debugging
    poolclass=NullPool,
)

TestSessionLocal = async_sessionmaker(
    test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session on freshly created tables."""
    async with test_engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
        await conn.run_sync(metadata.create_all)

    async with TestSessionLocal() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_appointment_data() -> dict:
    """Sample appointment submission for testing."""
    return {
        "user_name": "张三",
        "phone": "13800138000",
        "appointment_date": "2024-06-01",
        "appointment_time": "09:00-09:30",
        "contact_info": "wechat: zhangsan",
        "notes": "First visit",
    }


@pytest.fixture
def insert_appointment(
    db_session: AsyncSession,
) -> Callable[..., Awaitable[Row[Any]]]:
    """Insert an appointment row directly, bypassing the API."""

    async def _insert(**overrides: Any) -> Row[Any]:
        values = {
            "user_name": "张三",
            "phone": "13800138000",
            "appointment_date": date(2024, 6, 1),
            "appointment_time": "09:00-09:30",
        }
        values.update(overrides)
        result = await db_session.execute(
            insert(appointments).values(**values).returning(appointments)
        )
        row = result.fetchone()
        await db_session.commit()
        return row

    return _insert
