"""Database configuration and connection management."""

from collections.abc import AsyncGenerator, Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from booking.config import Settings, settings
from booking.core.exceptions import StoreException

logger = structlog.get_logger()


def engine_options(config: Settings) -> dict[str, Any]:
    """Build engine keyword arguments for the configured backend."""
    # SQLite doesn't support pool_size/max_overflow, PostgreSQL does
    if config.is_sqlite:
        return {"echo": config.debug}

    return {
        "echo": config.debug,
        "pool_pre_ping": True,
        "pool_size": config.db_pool_size,
        "max_overflow": config.db_max_overflow,
        "pool_recycle": 3600,
        "connect_args": {
            "server_settings": {
                "application_name": config.app_name,
            },
        },
    }


# Create async engine with connection pooling
engine: AsyncEngine = create_async_engine(
    settings.async_database_url,
    **engine_options(settings),
)

# Async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting async database sessions."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def check_database_connection() -> bool:
    """Check if database connection is healthy."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception:
        return False


@contextmanager
def store_errors(message: str, event: str) -> Iterator[None]:
    """
    Translate SQLAlchemy failures into ``StoreException``.

    The driver error is logged under ``event``; callers only see ``message``.
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(event, error=str(e), error_type=e.__class__.__name__)
        raise StoreException(message) from e
