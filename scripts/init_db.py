"""Script to initialize the database."""

import argparse
import asyncio

import structlog

from booking.database import engine
from booking.middleware.logging import configure_logging
from booking.models import metadata

logger = structlog.get_logger()


async def init_db(drop: bool = False) -> None:
    """Create all tables, optionally dropping existing ones first."""
    async with engine.begin() as conn:
        if drop:
            await conn.run_sync(metadata.drop_all)
            logger.warning("tables_dropped", tables=sorted(metadata.tables))

        await conn.run_sync(metadata.create_all)

    await engine.dispose()
    logger.info("database_initialized", tables=sorted(metadata.tables))


def main() -> None:
    """Parse arguments and initialize the database."""
    parser = argparse.ArgumentParser(description="Create the booking database schema")
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Drop existing tables before creating them (destroys data)",
    )
    args = parser.parse_args()

    configure_logging()
    asyncio.run(init_db(drop=args.drop))


if __name__ == "__main__":
    main()
